"""CSV export of cached entries."""
from collections.abc import Iterable
from datetime import UTC, date, datetime

CSV_HEADERS = ["Name", "Category", "Notes", "Date Added"]


def format_date_added(created_at: datetime) -> str:
    """Short local date, e.g. 3/7/2025."""
    local = created_at.astimezone() if created_at.tzinfo else created_at
    return f"{local.month}/{local.day}/{local.year}"


def export_filename(today: date | None = None) -> str:
    # Named after the UTC date
    today = today or datetime.now(UTC).date()
    return f"remember-her-{today.isoformat()}.csv"


def quote_field(value: str) -> str:
    return '"' + value.replace('"', '""') + '"'


def entries_to_csv(entries: Iterable) -> str:
    """Serialize entries (anything with name/category/notes/created_at) to CSV text.

    Name and notes are always quoted, with inner quotes doubled. Category and
    date are written bare.
    """
    lines = [",".join(CSV_HEADERS)]
    for entry in entries:
        lines.append(",".join([
            quote_field(entry.name),
            entry.category,
            quote_field(entry.notes),
            format_date_added(entry.created_at),
        ]))
    return "\n".join(lines)
