"""
Public API for PostgreSQL floating-point conversion.

This module converts tagged wire values into host floats and host floats into
binary wire values.

Functions:
    decode: Wire value (binary, text or null) to a registered float type
    encode: Registered float to a binary FLOAT4/FLOAT8 wire value
"""

import re
from typing import Any, Callable, Optional, Type, Union

import numpy as np

from .basic_types import (
    PGFloat4, PGFloat8, PGChar, PGInt2, PGInt4, PGInt8,
    unpack, to_wire_bytes,
)
from .decorators import get_float_type, is_floating_point
from .errors import (
    ByteLengthError,
    MalformedTextError,
    NullValueError,
    UnsupportedFloatTypeError,
    UnsupportedTagError,
    WireLengthError,
)
from .serialization import ConversionContext, DEFAULT_CONTEXT
from .temporal import epoch_offset
from .wire import Binary, Null, Text, WireTag, WireValue


# ============================================================================
# Binary Decoders
# ============================================================================

BinaryDecoder = Callable[[Binary, ConversionContext], Any]


def _scalar(fmt) -> BinaryDecoder:
    def decode_scalar(value: Binary, context: ConversionContext):
        return unpack(fmt, value.data)
    return decode_scalar


def _temporal(value: Binary, context: ConversionContext) -> float:
    return epoch_offset(context.temporal_codec.decode(value))


_BINARY_DECODERS: dict[WireTag, BinaryDecoder] = {
    WireTag.FLOAT4: _scalar(PGFloat4),
    WireTag.FLOAT8: _scalar(PGFloat8),
    WireTag.CHAR: _scalar(PGChar),
    WireTag.INT2: _scalar(PGInt2),
    WireTag.INT4: _scalar(PGInt4),
    WireTag.INT8: _scalar(PGInt8),
    WireTag.TIMESTAMP: _temporal,
    WireTag.DATE: _temporal,
    WireTag.TIME: _temporal,
}


# ============================================================================
# Text Decoding
# ============================================================================

# float() also accepts surrounding whitespace and digit underscores; the wire
# text format has neither
_FLOAT_LITERAL = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|nan|inf|infinity)",
    re.IGNORECASE | re.ASCII,
)


def _parse_float(string: str) -> Optional[float]:
    if not isinstance(string, str) or not _FLOAT_LITERAL.fullmatch(string):
        return None
    try:
        return float(string)
    except ValueError:
        return None


def _to_target(value, target: Type):
    if type(value) is target:
        return value
    # narrowing float8 -> float4 may overflow to infinity
    with np.errstate(over="ignore"):
        return target(value)


# ============================================================================
# Decode / Encode
# ============================================================================

def decode(value: WireValue, target: Type = float,
           context: Optional[ConversionContext] = None):
    """
    Decode a wire value into a registered float type.

    Binary values are routed on their tag: FLOAT4/FLOAT8 are reinterpreted as
    floats, CHAR/INT2/INT4/INT8 as signed integers, TIMESTAMP/DATE/TIME are
    handed to the context's temporal codec and measured from the reference
    epoch. The result is then converted to target.

    Text values are parsed as a 64-bit float, then converted to target.

    Args:
        value: Binary, Text or Null wire value.
        target: Registered float type (float, numpy.float32, numpy.float64,
            or a class registered with @floating_point).
        context: Optional ConversionContext; defaults to DEFAULT_CONTEXT.

    Returns:
        An instance of target.

    Raises:
        UnsupportedFloatTypeError: If target is not registered.
        UnsupportedTagError: If a binary tag cannot be decoded into a float.
        ByteLengthError: If a binary payload has the wrong size for its tag.
        MalformedTextError: If a text payload is not a float literal.
        NullValueError: For null values.

    Examples:
        >>> decode(Binary(WireTag.INT4, bytes.fromhex("0000002a")))
        42.0
        >>> decode(Text("3.14"), np.float32)
        np.float32(3.14)
    """
    info = get_float_type(target)
    context = context or DEFAULT_CONTEXT

    if isinstance(value, Binary):
        decoder = _BINARY_DECODERS.get(value.tag)
        if decoder is None:
            raise UnsupportedTagError(info.name, value.tag)
        try:
            decoded = decoder(value, context)
        except WireLengthError as e:
            raise ByteLengthError(info.name, value.tag, len(value.data)) from e
        return _to_target(decoded, target)

    if isinstance(value, Text):
        converted = _parse_float(value.string)
        if converted is None:
            raise MalformedTextError(info.name, value.string)
        return _to_target(converted, target)

    if isinstance(value, Null):
        raise NullValueError(info.name)

    raise TypeError(f"Expected a wire value, got {type(value).__name__}")


def decode_optional(value: WireValue, target: Type = float,
                    context: Optional[ConversionContext] = None):
    """Like decode, but a Null value decodes to None (for nullable columns)."""
    if isinstance(value, Null):
        get_float_type(target)
        return None
    return decode(value, target, context)


def encode(value: Union[float, np.floating], target: Optional[Type] = None) -> Binary:
    """
    Encode a float as a binary FLOAT4 or FLOAT8 wire value.

    The tag follows the bit width of the value's registered type (or of
    target, when given). NaN and infinities are encoded bit-for-bit.

    Args:
        value: Float to encode. Plain int and float values without a target
            are sent as FLOAT8.
        target: Optional registered float type to convert value to first.

    Raises:
        UnsupportedFloatTypeError: If neither value's type nor target is a
            registered float type, or if an int is too large for a float.

    Examples:
        >>> encode(np.float32(1.0))
        Binary(tag=<WireTag.FLOAT4: 700>, data=b'?\\x80\\x00\\x00')
        >>> encode(0.33).data.hex()
        '3fd51eb851eb851f'
    """
    if target is not None:
        info = get_float_type(target)
    elif is_floating_point(type(value)):
        info = get_float_type(type(value))
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        info = get_float_type(float)
    else:
        raise UnsupportedFloatTypeError(
            f"Unsupported data type: {type(value).__name__}. "
            f"Register it with @floating_point or provide a target type."
        )
    try:
        value = _to_target(value, info.float_type)
    except OverflowError:
        # ints beyond the double range
        raise UnsupportedFloatTypeError(
            f"{type(value).__name__} value is too large for {info.name}"
        ) from None
    return Binary(info.tag, to_wire_bytes(value))


# ============================================================================
# Convenience Functions for Specific Types
# ============================================================================

def encode_float4(value) -> Binary:
    """Encode a value as PostgreSQL float4."""
    return encode(value, np.float32)


def decode_float4(value: WireValue, context: Optional[ConversionContext] = None) -> np.float32:
    """Decode a wire value to numpy.float32."""
    return decode(value, np.float32, context)


def encode_float8(value) -> Binary:
    """Encode a value as PostgreSQL float8."""
    return encode(value, np.float64)


def decode_float8(value: WireValue, context: Optional[ConversionContext] = None) -> np.float64:
    """Decode a wire value to numpy.float64."""
    return decode(value, np.float64, context)
