from .caregiver_repository import CaregiverLinkRepository, CaregiverRepository

__all__ = ["CaregiverLinkRepository", "CaregiverRepository"]
