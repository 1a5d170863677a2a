"""seed_default_data

Revision ID: 0002_seed_default_data
Revises: 0001_create_schedule_tables
Create Date: 2025-08-01

This migration seeds the required default data:
- Eleven class types (Class 1..10 and the club period)
- The 2025-08-01 ~ 2026-05-31 semester
- Korean public holidays for 2025 and 2026
"""
from typing import Sequence, Union
from datetime import date, datetime, timezone

from alembic import op
from sqlalchemy.sql import text


# revision identifiers, used by Alembic.
revision: str = '0002_seed_default_data'
down_revision: Union[str, None] = '0001_create_schedule_tables'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

CLASS_TYPES = [
    ("Class 1", "#FF6B6B"),
    ("Class 2", "#4ECDC4"),
    ("Class 3", "#45B7D1"),
    ("Class 4", "#96CEB4"),
    ("Class 5", "#FFEAA7"),
    ("Class 6", "#DDA0DD"),
    ("Class 7", "#98D8C8"),
    ("Class 8", "#F7DC6F"),
    ("Class 9", "#BB8FCE"),
    ("Class 10", "#85C1E9"),
    ("동아리", "#F8C471"),  # club period
]

HOLIDAYS = [
    # 2025
    ("2025-01-01", "신정"),
    ("2025-01-27", "설날 연휴"),
    ("2025-01-28", "설날 연휴"),
    ("2025-01-29", "설날"),
    ("2025-01-30", "설날 연휴"),
    ("2025-03-01", "삼일절"),
    ("2025-03-03", "삼일절 대체공휴일"),
    ("2025-05-05", "어린이날 / 부처님 오신 날"),
    ("2025-05-06", "어린이날 대체공휴일"),
    ("2025-06-06", "현충일"),
    ("2025-08-15", "광복절"),
    ("2025-10-03", "개천절"),
    ("2025-10-05", "추석 연휴"),
    ("2025-10-06", "추석"),
    ("2025-10-07", "추석 연휴"),
    ("2025-10-08", "추석 대체공휴일"),
    ("2025-10-09", "한글날"),
    ("2025-12-25", "성탄절"),
    # 2026
    ("2026-01-01", "신정"),
    ("2026-02-16", "설날 연휴"),
    ("2026-02-17", "설날"),
    ("2026-02-18", "설날 연휴"),
    ("2026-03-01", "삼일절"),
    ("2026-05-05", "어린이날"),
    ("2026-05-24", "부처님 오신 날"),
    ("2026-06-06", "현충일"),
    ("2026-08-15", "광복절"),
    ("2026-09-25", "추석 연휴"),
    ("2026-09-26", "추석"),
    ("2026-09-27", "추석 연휴"),
    ("2026-10-03", "개천절"),
    ("2026-10-09", "한글날"),
    ("2026-12-25", "성탄절"),
]


def upgrade() -> None:
    """Seed class types, the default semester and holidays."""
    conn = op.get_bind()
    now = datetime.now(timezone.utc)

    print("🌱 Seeding default data...")

    print("   Creating class types...")
    for name, color in CLASS_TYPES:
        conn.execute(text(
            "INSERT INTO class_types (name, color, created_at, updated_at) "
            "VALUES (:name, :color, :now, :now)"
        ), {"name": name, "color": color, "now": now})

    print("   Creating default semester...")
    conn.execute(text(
        "INSERT INTO semester_ranges (name, start_date, end_date, created_at, updated_at) "
        "VALUES ('Current Semester', :start, :end, :now, :now)"
    ), {"start": date(2025, 8, 1), "end": date(2026, 5, 31), "now": now})

    print("   Creating holidays...")
    for holiday_date, name in HOLIDAYS:
        conn.execute(text(
            "INSERT INTO holidays (date, name, created_at, updated_at) "
            "VALUES (:date, :name, :now, :now)"
        ), {"date": date.fromisoformat(holiday_date), "name": name, "now": now})

    print("✅ Default data seeded")


def downgrade() -> None:
    """Remove seeded rows."""
    conn = op.get_bind()
    conn.execute(text("DELETE FROM holidays WHERE date = ANY(:dates)"), {
        "dates": [date.fromisoformat(d) for d, _ in HOLIDAYS],
    })
    conn.execute(text("DELETE FROM semester_ranges WHERE name = 'Current Semester'"))
    conn.execute(text("DELETE FROM class_types WHERE name = ANY(:names)"), {
        "names": [name for name, _ in CLASS_TYPES],
    })
