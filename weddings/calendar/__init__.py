"""Calendar file generation."""

from weddings.calendar.batch import BatchResult, generate_all, generate_file, list_slugs
from weddings.calendar.generator import build_calendar, build_schedule, generate_calendar

__all__ = [
    "BatchResult",
    "build_calendar",
    "build_schedule",
    "generate_all",
    "generate_calendar",
    "generate_file",
    "list_slugs",
]
