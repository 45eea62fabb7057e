# 📄 File: app/modules/caregivers/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# How caregivers and their links to family members are stored in the database.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM models for ``caregivers`` (unique by email) and ``user_caregivers``
# (unique per user and caregiver).
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - app.shared.infrastructure.database.connection (Base)
#
# 🔄 Connected Modules / Calls From:
# - caregiver_repository_impl.py, caregiver_link_repository_impl.py
# - migrations

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint

from app.shared.infrastructure.database.connection import Base
from app.shared.utils.helpers import utc_now


class CaregiverModel(Base):
    """SQLAlchemy model for caregivers shared across users."""
    __tablename__ = "caregivers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    phone_number = Column(String(50), nullable=False)
    role = Column(String(100), nullable=False, default="Caregiver")
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now)

    def __repr__(self) -> str:
        return f"<CaregiverModel(id={self.id}, email={self.email})>"


class UserCaregiverModel(Base):
    """SQLAlchemy model linking a user to a caregiver with an access level."""
    __tablename__ = "user_caregivers"
    __table_args__ = (
        UniqueConstraint("user_id", "caregiver_id", name="uq_user_caregivers_user_caregiver"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    caregiver_id = Column(
        Integer,
        ForeignKey("caregivers.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    access_level = Column(String(20), nullable=False, default="view", comment="view, edit or admin")
    added_by = Column(Integer, ForeignKey("users.id"), nullable=False)
    added_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)

    def __repr__(self) -> str:
        return f"<UserCaregiverModel(user_id={self.user_id}, caregiver_id={self.caregiver_id})>"
