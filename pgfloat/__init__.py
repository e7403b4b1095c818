"""
PostgreSQL Floating-Point Conversion.

Converts PostgreSQL wire values into 32- and 64-bit host floats, and host
floats into the binary float4/float8 wire format.

Key Features:
    - Declarative wire formats using Construct
    - Big-endian byte order (network byte order), bit-exact for NaN payloads
    - Decoding from float4, float8, "char", int2, int4, int8, timestamp, date,
      time and text values
    - Only 32- and 64-bit float types can be registered

Public API:
    - decode: Decode a wire value into a float type
    - encode: Encode a float into a binary wire value
    - floating_point: Register a float type

Usage:
    >>> from pgfloat import decode, encode, Binary, WireTag
    >>> wire = encode(3.5)
    >>> print(wire.tag.typname, wire.data.hex())
    float8 400c000000000000
    >>> decode(Binary(WireTag.INT4, bytes.fromhex("0000002a")))
    42.0
"""

from .api import (
    decode,
    decode_optional,
    encode,
    encode_float4,
    decode_float4,
    encode_float8,
    decode_float8,
)

from .basic_types import (
    # Construct definitions
    PGFloat4, PGFloat8,
    PGChar, PGInt2, PGInt4, PGInt8,
    # Type aliases
    PGFloat4Type, PGFloat8Type,
    PGCharType, PGInt2Type, PGInt4Type, PGInt8Type,
    # Transcoding
    to_wire_bytes,
    from_wire_bytes,
)

from .decorators import (
    FloatTypeInfo,
    floating_point,
    get_float_type,
    is_floating_point,
    postgres_data_type,
    postgres_array_type,
)

from .errors import (
    PGFloatError,
    ConversionError,
    UnsupportedTagError,
    ByteLengthError,
    MalformedTextError,
    NullValueError,
    UnsupportedFloatTypeError,
    WireLengthError,
)

from .serialization import ConversionContext
from .tags import bit_width, resolve_tag, resolve_array_tag
from .temporal import (
    REFERENCE_EPOCH,
    POSTGRES_EPOCH,
    TemporalCodec,
    PostgresTemporalCodec,
    epoch_offset,
)
from .wire import WireTag, WireValue, Binary, Text, Null, NULL, wire_tag

__all__ = [
    # Main API
    "decode",
    "decode_optional",
    "encode",
    # Convenience functions
    "encode_float4",
    "decode_float4",
    "encode_float8",
    "decode_float8",
    # Wire formats
    "PGFloat4", "PGFloat8",
    "PGChar", "PGInt2", "PGInt4", "PGInt8",
    "PGFloat4Type", "PGFloat8Type",
    "PGCharType", "PGInt2Type", "PGInt4Type", "PGInt8Type",
    "to_wire_bytes",
    "from_wire_bytes",
    # Type registration
    "FloatTypeInfo",
    "floating_point",
    "get_float_type",
    "is_floating_point",
    "postgres_data_type",
    "postgres_array_type",
    "bit_width",
    "resolve_tag",
    "resolve_array_tag",
    # Wire values
    "WireTag", "WireValue", "Binary", "Text", "Null", "NULL", "wire_tag",
    # Temporal
    "REFERENCE_EPOCH",
    "POSTGRES_EPOCH",
    "TemporalCodec",
    "PostgresTemporalCodec",
    "epoch_offset",
    # Configuration
    "ConversionContext",
    # Errors
    "PGFloatError",
    "ConversionError",
    "UnsupportedTagError",
    "ByteLengthError",
    "MalformedTextError",
    "NullValueError",
    "UnsupportedFloatTypeError",
    "WireLengthError",
]

__version__ = "0.1.0"
