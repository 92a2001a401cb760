"""UTC 时间工具"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """返回当前 UTC 时间（aware datetime）"""
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """naive datetime 视为 UTC（SQLite 等驱动读回时会丢失时区）"""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_iso8601z(value: datetime) -> str:
    return as_utc(value).isoformat().replace("+00:00", "Z")
