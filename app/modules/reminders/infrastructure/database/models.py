# 📄 File: app/modules/reminders/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# How reminders are stored: one row per reminder with a yes/no column for each weekday.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM model for the ``reminders`` table, owned by ``parents``.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - app.shared.infrastructure.database.connection (Base)
#
# 🔄 Connected Modules / Calls From:
# - reminder_repository_impl.py, conversation log repository (joins)
# - migrations

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text

from app.shared.infrastructure.database.connection import Base
from app.shared.utils.helpers import utc_now


class ReminderModel(Base):
    """SQLAlchemy model for weekly reminders."""
    __tablename__ = "reminders"

    id = Column(Integer, primary_key=True, autoincrement=True)
    parent_id = Column(
        Integer,
        ForeignKey("parents.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    name = Column(String(255), nullable=False)
    category = Column(String(50), nullable=False, comment="Medicine, Appointment or Activity")
    delivery_method = Column(String(20), nullable=False, comment="text or call")
    time = Column(String(10), nullable=False, comment="H:MMAM, e.g. 9:00AM")

    monday = Column(Boolean, nullable=False, default=False)
    tuesday = Column(Boolean, nullable=False, default=False)
    wednesday = Column(Boolean, nullable=False, default=False)
    thursday = Column(Boolean, nullable=False, default=False)
    friday = Column(Boolean, nullable=False, default=False)
    saturday = Column(Boolean, nullable=False, default=False)
    sunday = Column(Boolean, nullable=False, default=False)

    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)

    def __repr__(self) -> str:
        return f"<ReminderModel(id={self.id}, parent_id={self.parent_id}, time={self.time})>"
