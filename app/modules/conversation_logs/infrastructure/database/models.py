# 📄 File: app/modules/conversation_logs/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# How scheduled calls and texts are stored. Another system fills these in.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM models for ``scheduled_calls`` and ``scheduled_texts``, which share
# their columns through a mixin.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - app.shared.infrastructure.database.connection (Base)
#
# 🔄 Connected Modules / Calls From:
# - conversation_repository_impl.py
# - migrations

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import declared_attr

from app.shared.infrastructure.database.connection import Base


class ScheduledMessageMixin:
    id = Column(Integer, primary_key=True, autoincrement=True)
    scheduled_time = Column(DateTime(timezone=True), nullable=False, index=True)
    last_attempt_time = Column(DateTime(timezone=True), nullable=True)
    status = Column(String(20), nullable=True)
    ai_agent_response = Column(Text, nullable=True)

    @declared_attr
    def parent_id(cls):
        return Column(Integer, ForeignKey("parents.id", ondelete="CASCADE"), nullable=False, index=True)

    @declared_attr
    def reminder_id(cls):
        return Column(Integer, ForeignKey("reminders.id", ondelete="SET NULL"), nullable=True)


class ScheduledCallModel(ScheduledMessageMixin, Base):
    """SQLAlchemy model for reminder phone calls."""
    __tablename__ = "scheduled_calls"


class ScheduledTextModel(ScheduledMessageMixin, Base):
    """SQLAlchemy model for reminder text messages."""
    __tablename__ = "scheduled_texts"
