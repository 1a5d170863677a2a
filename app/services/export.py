"""Excel export of class entries and statistics."""

from datetime import date
from io import BytesIO

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter
from sqlalchemy import select
from sqlalchemy.orm import Session

from app.models.holiday import Holiday
from app.services.calendar import day_name
from app.services.class_entry import ClassEntryService
from app.services.statistics import StatisticsService

ENTRY_HEADERS = ["Date", "Day", "Period", "Class", "Completed", "Holiday", "Notes"]
STAT_HEADERS = ["Class", "Total", "Completed", "Remaining", "Progress (%)"]


class ExportService:
    """Builds a workbook with an "Entries" and a "Statistics" sheet."""

    def __init__(self, db: Session):
        self.db = db

    def build_workbook(self, start_date: date, end_date: date, today: date) -> bytes:
        stats = StatisticsService(self.db).get_statistics(start_date, end_date, today)
        entries = ClassEntryService(self.db).list_entries(start_date, end_date)
        holidays = set(
            self.db.execute(
                select(Holiday.date).where(
                    Holiday.date >= start_date,
                    Holiday.date <= end_date,
                )
            ).scalars().all()
        )

        # Styles
        header_font = Font(bold=True, color="FFFFFF")
        header_fill = PatternFill(start_color="4F81BD", end_color="4F81BD", fill_type="solid")
        holiday_fill = PatternFill(start_color="FDE9E7", end_color="FDE9E7", fill_type="solid")
        thin_border = Border(
            left=Side(style="thin"),
            right=Side(style="thin"),
            top=Side(style="thin"),
            bottom=Side(style="thin"),
        )
        center_align = Alignment(horizontal="center", vertical="center")

        wb = Workbook()
        ws = wb.active
        ws.title = "Entries"
        self._write_header(ws, 1, ENTRY_HEADERS, header_font, header_fill, thin_border, center_align)

        for row_idx, entry in enumerate(entries, start=2):
            is_holiday = entry.date in holidays
            values = [
                entry.date.isoformat(),
                day_name(entry.date).capitalize(),
                entry.period,
                entry.class_name or "",
                "Y" if entry.status else "N",
                "Y" if is_holiday else "",
                entry.notes or "",
            ]
            for col_idx, value in enumerate(values, start=1):
                cell = ws.cell(row=row_idx, column=col_idx, value=value)
                cell.border = thin_border
                if is_holiday:
                    cell.fill = holiday_fill

        for col_idx, width in enumerate([12, 11, 8, 16, 11, 9, 40], start=1):
            ws.column_dimensions[get_column_letter(col_idx)].width = width
        ws.freeze_panes = "A2"

        ws_stats = wb.create_sheet("Statistics")
        ws_stats.append(["Range", f"{start_date.isoformat()} ~ {end_date.isoformat()}"])
        ws_stats.append(["Total days", stats.total_weekdays])
        ws_stats.append(["Completed days", stats.completed_weekdays])
        ws_stats.append(["Remaining days", stats.remaining_weekdays])
        ws_stats.append(["Total classes", stats.total_classes])
        ws_stats.append(["Completed classes", stats.completed_classes])
        ws_stats.append(["Remaining classes", stats.remaining_classes])
        ws_stats.append([])

        self._write_header(
            ws_stats, ws_stats.max_row + 1, STAT_HEADERS,
            header_font, header_fill, thin_border, center_align,
        )
        for detail in stats.class_stats:
            ws_stats.append([
                detail.name or str(detail.class_type_id),
                detail.total,
                detail.completed,
                detail.remaining,
                detail.percentage,
            ])
        ws_stats.column_dimensions["A"].width = 20

        output = BytesIO()
        wb.save(output)
        return output.getvalue()

    def _write_header(self, ws, row, headers, font, fill, border, alignment) -> None:
        for col_idx, header in enumerate(headers, start=1):
            cell = ws.cell(row=row, column=col_idx, value=header)
            cell.font = font
            cell.fill = fill
            cell.border = border
            cell.alignment = alignment
