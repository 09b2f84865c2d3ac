"""Formatting for UTC offsets and offset deltas, both expressed in minutes."""


def format_offset(minutes: int) -> str:
    """
    Format a signed minute count as ±HH:MM.

    Zero is rendered as +00:00. Used for a zone's UTC offset and for
    the offset delta between two zones.
    """
    sign = "+" if minutes >= 0 else "-"
    hours, mins = divmod(abs(minutes), 60)
    return f"{sign}{hours:02d}:{mins:02d}"


def format_offset_hours(minutes: int) -> str:
    """Format a signed minute count as decimal hours, e.g. 300 -> '+5.0h'."""
    sign = "+" if minutes >= 0 else "-"
    return f"{sign}{abs(minutes) / 60:.1f}h"
