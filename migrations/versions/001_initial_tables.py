"""Create care circle tables

Revision ID: 001
Revises:
Create Date: 2025-03-02 10:00:00.000000

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

WEEKDAYS = ['monday', 'tuesday', 'wednesday', 'thursday', 'friday', 'saturday', 'sunday']


def _scheduled_message_columns():
    return [
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('parent_id', sa.Integer(), sa.ForeignKey('parents.id', ondelete='CASCADE'), nullable=False),
        sa.Column('reminder_id', sa.Integer(), sa.ForeignKey('reminders.id', ondelete='SET NULL'), nullable=True),
        sa.Column('scheduled_time', sa.DateTime(timezone=True), nullable=False),
        sa.Column('last_attempt_time', sa.DateTime(timezone=True), nullable=True),
        sa.Column('status', sa.String(20), nullable=True),
        sa.Column('ai_agent_response', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    ]


def upgrade() -> None:
    """Create care circle tables"""

    # 1. users
    op.create_table('users',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('supabase_id', sa.String(255), nullable=False),
        sa.Column('first_name', sa.String(100), nullable=False, server_default='User'),
        sa.Column('last_name', sa.String(100), nullable=False, server_default=''),
        sa.Column('email', sa.String(255), nullable=False, server_default=''),
        sa.Column('phone_number', sa.String(50), nullable=False, server_default='+1'),
        sa.Column('timezone', sa.String(64), nullable=False, server_default='America/New_York'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('supabase_id'),
    )
    op.create_index('ix_users_supabase_id', 'users', ['supabase_id'])

    # 2. parents (care recipients)
    op.create_table('parents',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('phone_number', sa.String(50), nullable=False),
        sa.Column('timezone', sa.String(64), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_parents_user_id', 'parents', ['user_id'])

    # 3. caregivers and user_caregivers
    op.create_table('caregivers',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('phone_number', sa.String(50), nullable=False),
        sa.Column('role', sa.String(100), nullable=False, server_default='Caregiver'),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('email'),
    )
    op.create_index('ix_caregivers_email', 'caregivers', ['email'])

    op.create_table('user_caregivers',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('caregiver_id', sa.Integer(), sa.ForeignKey('caregivers.id', ondelete='CASCADE'), nullable=False),
        sa.Column('access_level', sa.String(20), nullable=False, server_default='view'),
        sa.Column('added_by', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('added_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'caregiver_id', name='uq_user_caregivers_user_caregiver'),
        sa.CheckConstraint("access_level IN ('view', 'edit', 'admin')", name='ck_user_caregivers_access_level'),
    )
    op.create_index('ix_user_caregivers_user_id', 'user_caregivers', ['user_id'])
    op.create_index('ix_user_caregivers_caregiver_id', 'user_caregivers', ['caregiver_id'])

    # 4. reminders
    op.create_table('reminders',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('parent_id', sa.Integer(), sa.ForeignKey('parents.id', ondelete='CASCADE'), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('category', sa.String(50), nullable=False),
        sa.Column('delivery_method', sa.String(20), nullable=False),
        sa.Column('time', sa.String(10), nullable=False),
        *[sa.Column(day, sa.Boolean(), nullable=False, server_default=sa.false()) for day in WEEKDAYS],
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint("category IN ('Medicine', 'Appointment', 'Activity')", name='ck_reminders_category'),
        sa.CheckConstraint("delivery_method IN ('text', 'call')", name='ck_reminders_delivery_method'),
    )
    op.create_index('ix_reminders_parent_id', 'reminders', ['parent_id'])

    # 5. devices
    op.create_table('devices',
        sa.Column('id', sa.String(36), nullable=False),
        sa.Column('parent_id', sa.Integer(), sa.ForeignKey('parents.id', ondelete='CASCADE'), nullable=False),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('device_type', sa.String(50), nullable=False),
        sa.Column('device_model', sa.String(100), nullable=True),
        sa.Column('device_name', sa.String(255), nullable=False),
        sa.Column('status', sa.String(20), nullable=False, server_default='disconnected'),
        sa.Column('last_sync', sa.DateTime(timezone=True), nullable=True),
        sa.Column('battery_level', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint("status IN ('disconnected', 'syncing', 'connected')", name='ck_devices_status'),
        sa.CheckConstraint(
            'battery_level IS NULL OR (battery_level >= 0 AND battery_level <= 100)',
            name='ck_devices_battery_level'
        ),
    )
    op.create_index('ix_devices_parent_id', 'devices', ['parent_id'])
    op.create_index('ix_devices_user_id', 'devices', ['user_id'])

    # 6. scheduled calls and texts, written by the delivery system
    op.create_table('scheduled_calls', *_scheduled_message_columns())
    op.create_index('ix_scheduled_calls_parent_id', 'scheduled_calls', ['parent_id'])
    op.create_index('ix_scheduled_calls_scheduled_time', 'scheduled_calls', ['scheduled_time'])

    op.create_table('scheduled_texts', *_scheduled_message_columns())
    op.create_index('ix_scheduled_texts_parent_id', 'scheduled_texts', ['parent_id'])
    op.create_index('ix_scheduled_texts_scheduled_time', 'scheduled_texts', ['scheduled_time'])


def downgrade() -> None:
    """Drop care circle tables"""
    op.drop_table('scheduled_texts')
    op.drop_table('scheduled_calls')
    op.drop_table('devices')
    op.drop_table('reminders')
    op.drop_table('user_caregivers')
    op.drop_table('caregivers')
    op.drop_table('parents')
    op.drop_table('users')
