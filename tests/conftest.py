import os

# Must be set before the app reads its settings
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("TIMEZONE", "Asia/Seoul")

from datetime import date

import pytest
from apscheduler.schedulers.background import BackgroundScheduler
from fastapi.testclient import TestClient
from sqlalchemy import select

from app.core.database import Base, SessionLocal, engine
from app.core.dependencies import get_note_buffer, get_today
from app.main import app
from app.models import ClassEntry, ClassType, Holiday, SemesterRange
from app.services.note_buffer import NoteBuffer

TODAY = date(2025, 9, 3)


def make_entry(day, class_type_id, period, status=False, notes=""):
    """Unsaved entry for the pure-function tests."""
    return ClassEntry(
        class_type_id=class_type_id,
        semester_range_id=None,
        date=date.fromisoformat(day) if isinstance(day, str) else day,
        period=period,
        status=status,
        notes=notes,
    )


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def class_types(db):
    types = [
        ClassType(name="Class 1", color="#FF6B6B"),
        ClassType(name="Class 2", color="#4ECDC4"),
        ClassType(name="Class 3", color="#45B7D1"),
    ]
    db.add_all(types)
    db.commit()
    return types


@pytest.fixture
def semester(db):
    semester = SemesterRange(
        name="Fall",
        start_date=date(2025, 9, 1),
        end_date=date(2025, 12, 31),
    )
    db.add(semester)
    db.commit()
    return semester


@pytest.fixture
def chuseok(db):
    holiday = Holiday(date=date(2025, 10, 6), name="추석")
    db.add(holiday)
    db.commit()
    return holiday


@pytest.fixture
def scheduler():
    sched = BackgroundScheduler(timezone="Asia/Seoul")
    sched.start()
    yield sched
    sched.shutdown(wait=False)


@pytest.fixture
def note_buffer(scheduler):
    # Long delay: drafts only land through flush()
    return NoteBuffer(scheduler, SessionLocal, delay_ms=60_000)


@pytest.fixture
def client(db, note_buffer):
    app.dependency_overrides[get_today] = lambda: TODAY
    app.dependency_overrides[get_note_buffer] = lambda: note_buffer
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def fetch_entries(db):
    db.expire_all()
    result = db.execute(select(ClassEntry).order_by(ClassEntry.date, ClassEntry.period))
    return list(result.scalars().all())
