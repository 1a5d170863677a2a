"""create_schedule_tables

Revision ID: 0001_create_schedule_tables
Revises:
Create Date: 2025-08-01

Creates class_types, semester_ranges, holidays and class_entries.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001_create_schedule_tables'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:
    """Create the schedule tables."""
    op.create_table(
        'class_types',
        sa.Column('id', sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('color', sa.String(7), nullable=False, server_default='#cccccc'),
        *timestamps(),
        sa.UniqueConstraint('name', name='uq_class_types_name'),
    )

    op.create_table(
        'semester_ranges',
        sa.Column('id', sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('start_date', sa.Date(), nullable=False),
        sa.Column('end_date', sa.Date(), nullable=False),
        *timestamps(),
        sa.CheckConstraint('start_date <= end_date', name='ck_semester_range_order'),
    )

    op.create_table(
        'holidays',
        sa.Column('id', sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('name', sa.String(100), nullable=True),
        *timestamps(),
        sa.UniqueConstraint('date', name='uq_holidays_date'),
    )
    op.create_index('ix_holidays_date', 'holidays', ['date'])

    op.create_table(
        'class_entries',
        sa.Column('id', sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column(
            'class_type_id',
            sa.BigInteger(),
            sa.ForeignKey('class_types.id', ondelete='CASCADE'),
            nullable=True,
        ),
        sa.Column(
            'semester_range_id',
            sa.BigInteger(),
            sa.ForeignKey('semester_ranges.id', ondelete='SET NULL'),
            nullable=True,
        ),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('period', sa.Integer(), nullable=False),
        sa.Column('status', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('notes', sa.Text(), nullable=False, server_default=''),
        *timestamps(),
        sa.UniqueConstraint(
            'class_type_id', 'date', 'period',
            name='uq_class_entry_class_date_period',
        ),
    )
    op.create_index('ix_class_entries_date', 'class_entries', ['date'])
    op.create_index('ix_class_entries_class_type_id', 'class_entries', ['class_type_id'])
    op.create_index('ix_class_entries_semester_range_id', 'class_entries', ['semester_range_id'])


def downgrade() -> None:
    """Drop the schedule tables."""
    op.drop_index('ix_class_entries_semester_range_id', table_name='class_entries')
    op.drop_index('ix_class_entries_class_type_id', table_name='class_entries')
    op.drop_index('ix_class_entries_date', table_name='class_entries')
    op.drop_table('class_entries')
    op.drop_index('ix_holidays_date', table_name='holidays')
    op.drop_table('holidays')
    op.drop_table('semester_ranges')
    op.drop_table('class_types')
