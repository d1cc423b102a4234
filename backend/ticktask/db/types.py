"""Column Types — SQLAlchemy type decorators shared by ORM models.

Invariants:
    - UTCDateTime always returns timezone-aware datetimes in UTC
    - Naive values written to the store are taken to be UTC

Design Decisions:
    - SQLite drops the offset of DateTime(timezone=True); re-attaching UTC on
      load makes SQLite and PostgreSQL return identical values
"""

from datetime import datetime, timezone

from sqlalchemy import BigInteger, DateTime, Integer
from sqlalchemy.types import TypeDecorator

# SQLite only autoincrements a column declared exactly INTEGER PRIMARY KEY
# (its INTEGER is already 64-bit)
BigIntPrimaryKey = BigInteger().with_variant(Integer(), "sqlite")


class UTCDateTime(TypeDecorator):
    """DateTime(timezone=True) that never hands back a naive value."""
    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect):
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    def process_result_value(self, value: datetime | None, dialect):
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
