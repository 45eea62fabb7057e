from .caregiver import AccessLevel, Caregiver, CaregiverLink, LinkedCaregiver

__all__ = ["AccessLevel", "Caregiver", "CaregiverLink", "LinkedCaregiver"]
