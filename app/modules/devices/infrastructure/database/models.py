# 📄 File: app/modules/devices/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# How devices are stored in the database.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM model for the ``devices`` table with UUID string ids, owned by both a
# recipient and that recipient's user.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - app.shared.infrastructure.database.connection (Base)
#
# 🔄 Connected Modules / Calls From:
# - device_repository_impl.py
# - migrations

from uuid import uuid4

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, String

from app.shared.infrastructure.database.connection import Base
from app.shared.utils.helpers import utc_now


class DeviceModel(Base):
    """SQLAlchemy model for recipient devices."""
    __tablename__ = "devices"
    __table_args__ = (
        CheckConstraint(
            "battery_level IS NULL OR (battery_level >= 0 AND battery_level <= 100)",
            name="ck_devices_battery_level"
        ),
    )

    id = Column(String(36), primary_key=True, default=lambda: str(uuid4()))
    parent_id = Column(
        Integer,
        ForeignKey("parents.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    device_type = Column(String(50), nullable=False)
    device_model = Column(String(100), nullable=True)
    device_name = Column(String(255), nullable=False)
    status = Column(
        String(20),
        nullable=False,
        default="disconnected",
        comment="disconnected, syncing or connected"
    )
    last_sync = Column(DateTime(timezone=True), nullable=True)
    battery_level = Column(Integer, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now)

    def __repr__(self) -> str:
        return f"<DeviceModel(id={self.id}, status={self.status})>"
