from .recipient import Recipient

__all__ = ["Recipient"]
