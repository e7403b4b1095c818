"""
Tests for the temporal codec and temporal-to-float conversion.
"""

from datetime import datetime, timedelta, timezone

import pytest
import numpy as np

from pgfloat import (
    decode, Binary, WireTag, PGInt4, PGInt8,
    ConversionContext, PostgresTemporalCodec,
    REFERENCE_EPOCH, POSTGRES_EPOCH, epoch_offset,
    ByteLengthError, UnsupportedTagError,
)


# ============================================================================
# PostgresTemporalCodec
# ============================================================================

def test_decode_date():
    """Dates are days since 2000-01-01."""
    codec = PostgresTemporalCodec()

    result = codec.decode(Binary(WireTag.DATE, PGInt4.build(-1)))

    assert result == datetime(1999, 12, 31, tzinfo=timezone.utc)


def test_decode_timestamp():
    """Timestamps are microseconds since 2000-01-01."""
    codec = PostgresTemporalCodec()

    result = codec.decode(Binary(WireTag.TIMESTAMP, PGInt8.build(1)))

    assert result == POSTGRES_EPOCH + timedelta(microseconds=1)


def test_decode_time():
    """Times are microseconds since midnight."""
    codec = PostgresTemporalCodec()

    result = codec.decode(Binary(WireTag.TIME, PGInt8.build(90 * 1_000_000)))

    assert result.time().isoformat() == "00:01:30"


def test_decode_timestamp_infinity():
    """'infinity' timestamps are out of datetime's range."""
    codec = PostgresTemporalCodec()
    wire = Binary(WireTag.TIMESTAMP, bytes.fromhex("7fffffffffffffff"))

    with pytest.raises(UnsupportedTagError, match="datetime from binary data type: timestamp"):
        codec.decode(wire)


def test_decode_wrong_length():
    """Test the codec rejects payloads of the wrong size."""
    codec = PostgresTemporalCodec()

    with pytest.raises(ByteLengthError):
        codec.decode(Binary(WireTag.TIMESTAMP, PGInt4.build(0)))


def test_decode_non_temporal_tag():
    """Test the codec rejects tags that are not temporal."""
    with pytest.raises(UnsupportedTagError):
        PostgresTemporalCodec().decode(Binary(WireTag.INT4, PGInt4.build(0)))


# ============================================================================
# Epoch Offsets
# ============================================================================

def test_epoch_offset():
    """Offsets are seconds from 2001-01-01 UTC."""
    assert epoch_offset(REFERENCE_EPOCH) == 0.0
    assert epoch_offset(POSTGRES_EPOCH) == -366 * 86400.0
    assert epoch_offset(datetime(2001, 1, 2, tzinfo=timezone.utc)) == 86400.0


def test_epoch_offset_respects_timezone():
    """Aware datetimes in other zones are measured in UTC."""
    tz = timezone(timedelta(hours=2))

    assert epoch_offset(datetime(2001, 1, 1, 2, 0, tzinfo=tz)) == 0.0


def test_epoch_offset_naive_datetime_warns():
    """Naive datetimes are taken as UTC with a warning."""
    with pytest.warns(UserWarning, match="treated as UTC"):
        result = epoch_offset(datetime(2001, 1, 1, 0, 0, 10))

    assert result == 10.0


# ============================================================================
# Decode Through the Context
# ============================================================================

@pytest.mark.parametrize("days", [0, 366, 9000, -4000])
def test_decode_date_matches_temporal_codec(days):
    """Decoding a date equals asking the codec for its epoch offset."""
    wire = Binary(WireTag.DATE, PGInt4.build(days))

    expected = epoch_offset(PostgresTemporalCodec().decode(wire))

    assert decode(wire) == expected


def test_decode_with_custom_temporal_codec():
    """The context's temporal codec is used for temporal tags."""

    class FixedCodec:
        def __init__(self):
            self.seen = []

        def decode(self, value):
            self.seen.append(value)
            return datetime(2001, 1, 1, 0, 0, 30, tzinfo=timezone.utc)

    codec = FixedCodec()
    context = ConversionContext(temporal_codec=codec)
    wire = Binary(WireTag.TIMESTAMP, PGInt8.build(0))

    result = decode(wire, np.float32, context)

    assert isinstance(result, np.float32)
    assert result == 30.0
    assert codec.seen == [wire]


def test_default_context_codec():
    """The default context uses PostgresTemporalCodec."""
    assert isinstance(ConversionContext().temporal_codec, PostgresTemporalCodec)
