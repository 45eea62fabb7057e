# 📄 File: migrations/env.py
# 🧭 Purpose (Layman Explanation):
# Tells Alembic how to connect to the care app's database and apply table changes safely.
# 🧪 Purpose (Technical Summary):
# Alembic environment running migrations over the async asyncpg engine, with every
# module's ORM models imported for autogenerate and Supabase-managed schemas excluded.
# 🔗 Dependencies:
# - alembic (migration tool)
# - SQLAlchemy (ORM, async engine)
# - asyncpg (PostgreSQL async driver)
# - python-dotenv (environment variables)
# 🔄 Connected Modules / Calls From:
# - alembic CLI commands (upgrade, downgrade, revision)

import asyncio
import os
import sys
from logging.config import fileConfig

from alembic import context
from dotenv import load_dotenv
from sqlalchemy import pool
from sqlalchemy.ext.asyncio import async_engine_from_config

load_dotenv()

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from app.shared.infrastructure.database.connection import Base  # noqa: E402

# Import all module models so they register on Base.metadata
from app.modules.identity.infrastructure.database.models import UserModel  # noqa: E402,F401
from app.modules.care_recipients.infrastructure.database.models import ParentModel  # noqa: E402,F401
from app.modules.caregivers.infrastructure.database.models import (  # noqa: E402,F401
    CaregiverModel,
    UserCaregiverModel,
)
from app.modules.reminders.infrastructure.database.models import ReminderModel  # noqa: E402,F401
from app.modules.devices.infrastructure.database.models import DeviceModel  # noqa: E402,F401
from app.modules.conversation_logs.infrastructure.database.models import (  # noqa: E402,F401
    ScheduledCallModel,
    ScheduledTextModel,
)

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata

SUPABASE_SCHEMAS = ['auth', 'storage', 'realtime', 'vault', 'extensions']


def get_database_url() -> str:
    """
    Get the asyncpg database URL from environment variables.
    """
    database_url = os.getenv("DATABASE_URL")

    if database_url:
        if database_url.startswith("postgresql://"):
            database_url = database_url.replace("postgresql://", "postgresql+asyncpg://", 1)
        return database_url

    db_host = os.getenv("DB_HOST", "localhost")
    db_port = os.getenv("DB_PORT", "5432")
    db_user = os.getenv("DB_USER", "postgres")
    db_password = os.getenv("DB_PASSWORD", "password")
    db_name = os.getenv("DB_NAME", "care_circle")

    return f"postgresql+asyncpg://{db_user}:{db_password}@{db_host}:{db_port}/{db_name}"


def include_object(object, name, type_, reflected, compare_to):
    """
    Skip objects living in Supabase-managed schemas.
    """
    if getattr(object, 'schema', None) in SUPABASE_SCHEMAS:
        return False
    return True


def run_migrations_offline() -> None:
    """
    Run migrations in 'offline' mode, emitting SQL to the script output.
    """
    context.configure(
        url=get_database_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        compare_type=True,
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection) -> None:
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        compare_type=True,
        include_object=include_object,
    )

    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations() -> None:
    """
    Run migrations over the async engine.
    """
    configuration = config.get_section(config.config_ini_section) or {}
    configuration["sqlalchemy.url"] = get_database_url()

    connectable = async_engine_from_config(
        configuration,
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await connectable.dispose()


def run_migrations_online() -> None:
    asyncio.run(run_async_migrations())


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
