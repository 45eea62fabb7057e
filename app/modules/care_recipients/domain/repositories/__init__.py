from .recipient_repository import RecipientRepository

__all__ = ["RecipientRepository"]
