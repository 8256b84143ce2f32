"""Due date parsing utilities."""

import re
from datetime import date, datetime, timedelta
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

COMPACT_DATE_RE = re.compile(r"^\d{8}$")
RELATIVE_OFFSET_RE = re.compile(r"^in (\d+) (day|days|week|weeks)$")


def parse_due_date(date_str: str, today: date | None = None) -> date:
    """Parse a due date string into a date object.

    Due dates lie in the future, so relative forms look forward:
    - "today", "tomorrow"
    - "in 3 days", "in 2 weeks"
    - "next week" (Monday of next week)
    - "next month" (first day of next month)
    - "end of month" (last day of the current month)
    - Compact link form: "20240115"
    - Absolute dates: "2024-01-15", "January 15, 2024", etc.

    Args:
        date_str: Date string in various formats
        today: Reference date for relative forms (defaults to date.today())

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    if today is None:
        today = date.today()

    if date_str == "today":
        return today
    if date_str == "tomorrow":
        return today + timedelta(days=1)
    if date_str == "next week":
        return today + timedelta(days=(7 - today.weekday()))
    if date_str == "next month":
        return (today + relativedelta(months=1)).replace(day=1)
    if date_str == "end of month":
        return (today + relativedelta(months=1)).replace(day=1) - timedelta(days=1)

    match = RELATIVE_OFFSET_RE.match(date_str)
    if match:
        count = int(match.group(1))
        try:
            if match.group(2).startswith("week"):
                return today + timedelta(weeks=count)
            return today + timedelta(days=count)
        except OverflowError as e:
            raise ValueError(f"Could not parse date '{date_str}': {e}")

    # Same layout the DD parameter uses
    if COMPACT_DATE_RE.match(date_str):
        try:
            return datetime.strptime(date_str, "%Y%m%d").date()
        except ValueError as e:
            raise ValueError(f"Could not parse date '{date_str}': {e}")

    try:
        dt = date_parser.parse(date_str)
        return dt.date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")
