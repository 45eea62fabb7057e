from .user import AuthSession, AuthUser, User

__all__ = ["AuthSession", "AuthUser", "User"]
