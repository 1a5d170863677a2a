"""Fill the current semester with entries from the default weekly template.

Usage: python -m scripts.materialize_semester [replace-all|preserve-existing]
"""
import sys
from datetime import timedelta

from app.core.config import settings
from app.core.database import SessionLocal
from app.schemas.schedule import MaterializationPolicy, MaterializeRequest
from app.services.schedule import ScheduleService, default_weekly_template
from app.services.semester_range import SemesterRangeService


def main() -> None:
    policy = MaterializationPolicy(sys.argv[1]) if len(sys.argv) > 1 else None

    db = SessionLocal()
    try:
        semester = SemesterRangeService(db).get_current()
        print(f"Semester: {semester.name} ({semester.start_date} ~ {semester.end_date})")

        # The range limit applies per call, so long semesters go in chunks
        chunk_start = semester.start_date
        while chunk_start <= semester.end_date:
            chunk_end = min(
                chunk_start + timedelta(days=settings.MAX_RANGE_DAYS - 1),
                semester.end_date,
            )
            result = ScheduleService(db).apply_weekly_template(
                MaterializeRequest(
                    start_date=chunk_start,
                    end_date=chunk_end,
                    weekly_schedule=default_weekly_template(),
                    semester_range_id=semester.id,
                    policy=policy,
                )
            )
            print(
                f"  {chunk_start} ~ {chunk_end}: created {result.created}, "
                f"deleted {result.deleted}, preserved {result.preserved}"
            )
            chunk_start = chunk_end + timedelta(days=1)

        db.commit()
        print("Done.")
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
