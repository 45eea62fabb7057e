# 📄 File: app/modules/identity/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# Defines how each app user is stored in the database and how it is tied to the
# account used for signing in.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM model for the ``users`` table, keyed by an integer id with a unique
# ``supabase_id`` referencing the hosted auth subject.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - app.shared.infrastructure.database.connection (Base)
#
# 🔄 Connected Modules / Calls From:
# - user_repository_impl.py (CRUD operations)
# - migrations (schema generation)

from sqlalchemy import Column, DateTime, Integer, String

from app.shared.infrastructure.database.connection import Base
from app.shared.utils.helpers import utc_now


class UserModel(Base):
    """
    SQLAlchemy model for application users.

    One row per authenticated identity, created on first login when absent.
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    supabase_id = Column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
        comment="Subject id of the hosted auth user"
    )
    first_name = Column(String(100), nullable=False, default="User")
    last_name = Column(String(100), nullable=False, default="")
    email = Column(String(255), nullable=False, default="")
    phone_number = Column(String(50), nullable=False, default="+1")
    timezone = Column(String(64), nullable=False, default="America/New_York")
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, supabase_id={self.supabase_id})>"
