# 📄 File: app/modules/care_recipients/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# How care recipients are stored in the database.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM model for the ``parents`` table, owned by ``users``.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - app.shared.infrastructure.database.connection (Base)
#
# 🔄 Connected Modules / Calls From:
# - recipient_repository_impl.py, reminder and device repositories (joins)
# - migrations

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String

from app.shared.infrastructure.database.connection import Base
from app.shared.utils.helpers import utc_now


class ParentModel(Base):
    """SQLAlchemy model for care recipients."""
    __tablename__ = "parents"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="Owning user"
    )
    name = Column(String(255), nullable=False)
    phone_number = Column(
        String(50),
        nullable=False,
        comment="Stored as {countryCode}_{digits}"
    )
    timezone = Column(String(64), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)

    def __repr__(self) -> str:
        return f"<ParentModel(id={self.id}, user_id={self.user_id}, name={self.name})>"
