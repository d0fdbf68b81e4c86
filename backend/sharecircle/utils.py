from datetime import UTC, datetime


def now_utc() -> datetime:
    return datetime.now(UTC)


def as_utc(value: datetime) -> datetime:
    """
    Attach UTC to a naive timestamp. Backends without a timezone-aware
    column type (SQLite) hand stored values back naive.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value
