"""
Canonical timestamp handling.

Creation times are stored and displayed in exactly one textual form:
ISO-8601 with microseconds and an explicit UTC offset, e.g.

    2026-10-18T09:30:12.345678+00:00

Because the stored text and the rendered text are the same string,
storage and display round-trip without loss.
"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Return the current instant as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def to_text(value: datetime) -> str:
    """
    Serialize a timezone-aware datetime to its canonical UTC text.

    Raises
    ------
    ValueError
        If `value` is naive. A naive datetime has no defined instant.
    """
    if value.tzinfo is None or value.utcoffset() is None:
        raise ValueError(f"timestamp must be timezone-aware: {value!r}")

    return value.astimezone(timezone.utc).isoformat(timespec="microseconds")


def from_text(text: str) -> datetime:
    """Parse canonical text produced by to_text() back into a UTC datetime."""
    value = datetime.fromisoformat(text)
    if value.tzinfo is None:
        # Rows written by other tools may omit the offset; they are UTC.
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


# Display uses the storage form verbatim.
render = to_text
