"""
Temporal values seen as offsets from a reference epoch.

Decoding a date, time or timestamp into a float goes through a TemporalCodec,
which turns the binary payload into a point in time; the float is then the
offset of that point from REFERENCE_EPOCH, in seconds.

PostgresTemporalCodec reads the binary formats used by PostgreSQL servers
with integer datetimes:
    - timestamp: int64 microseconds since 2000-01-01 00:00:00
    - date:      int32 days since 2000-01-01
    - time:      int64 microseconds since midnight
"""

import warnings
from datetime import datetime, timedelta, timezone
from typing import Protocol

from .basic_types import PGInt4, PGInt8, unpack
from .errors import ByteLengthError, UnsupportedTagError, WireLengthError
from .wire import Binary, WireTag


REFERENCE_EPOCH = datetime(2001, 1, 1, tzinfo=timezone.utc)
"""Point in time that temporal offsets are measured from."""

POSTGRES_EPOCH = datetime(2000, 1, 1, tzinfo=timezone.utc)
"""Zero point of PostgreSQL's binary date and timestamp formats."""


class TemporalCodec(Protocol):
    """Turns a binary temporal wire value into a point in time."""

    def decode(self, value: Binary) -> datetime:
        ...


class PostgresTemporalCodec:
    """Decoder for PostgreSQL's binary timestamp, date and time formats"""

    target = "datetime"

    def decode(self, value: Binary) -> datetime:
        try:
            if value.tag == WireTag.TIMESTAMP:
                micros = unpack(PGInt8, value.data)
                return POSTGRES_EPOCH + timedelta(microseconds=micros)
            if value.tag == WireTag.DATE:
                days = unpack(PGInt4, value.data)
                return POSTGRES_EPOCH + timedelta(days=days)
            if value.tag == WireTag.TIME:
                # time of day only; anchored on the epoch's date
                micros = unpack(PGInt8, value.data)
                return POSTGRES_EPOCH + timedelta(microseconds=micros)
        except WireLengthError as e:
            raise ByteLengthError(self.target, value.tag, len(value.data)) from e
        except OverflowError as e:
            # 'infinity' and anything else outside datetime's range
            raise UnsupportedTagError(self.target, value.tag) from e
        raise UnsupportedTagError(self.target, value.tag)

    def __repr__(self):
        return f"{self.__class__.__name__}()"


def epoch_offset(point: datetime) -> float:
    """
    Seconds between REFERENCE_EPOCH and a point in time.

    A naive datetime is taken to be in UTC.

    Examples:
        >>> epoch_offset(datetime(2001, 1, 2, tzinfo=timezone.utc))
        86400.0
    """
    if point.tzinfo is None:
        warnings.warn(f"Naive datetime {point.isoformat()} treated as UTC")
        point = point.replace(tzinfo=timezone.utc)
    return (point - REFERENCE_EPOCH).total_seconds()
