from .reminder import DeliveryMethod, Meridiem, Reminder, ReminderCategory, ReminderWithRecipient

__all__ = ["DeliveryMethod", "Meridiem", "Reminder", "ReminderCategory", "ReminderWithRecipient"]
