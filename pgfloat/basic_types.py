"""
PostgreSQL Binary Scalar Types using Construct Library.

This module declares the binary wire formats that can be decoded into a
floating-point value, using the Construct library.

All types use big-endian byte order (network byte order) as required by the
PostgreSQL binary protocol. The host layout is normalized on both parse and
build, so build followed by parse is an identity on any host.

Supported Types:
    - Floating Point: PGFloat4 (32-bit IEEE 754), PGFloat8 (64-bit IEEE 754)
    - Integers: PGChar (8-bit), PGInt2, PGInt4, PGInt8 (two's complement)
"""

from typing import TypeAlias, Annotated, Any
import numpy as np
from construct import (
    Int8sb,
    Int16sb,
    Int32sb,
    Int64sb,
    Adapter, Bytes, Construct,
)

from .decorators import get_float_type
from .errors import UnsupportedFloatTypeError, WireLengthError

# ============================================================================
# Type Aliases for Type Hints
# ============================================================================

PGFloat4Type: TypeAlias = Annotated[np.float32, "PostgreSQL float4 (32-bit IEEE 754)"]
PGFloat8Type: TypeAlias = Annotated[np.float64, "PostgreSQL float8 (64-bit IEEE 754)"]
PGCharType: TypeAlias = Annotated[int, "PostgreSQL \"char\" (signed 8-bit integer)"]
PGInt2Type: TypeAlias = Annotated[int, "PostgreSQL int2 (signed 16-bit integer)"]
PGInt4Type: TypeAlias = Annotated[int, "PostgreSQL int4 (signed 32-bit integer)"]
PGInt8Type: TypeAlias = Annotated[int, "PostgreSQL int8 (signed 64-bit integer)"]


# ============================================================================
# Floating Point Types (Big-Endian IEEE 754)
# ============================================================================

class FloatAdapter(Adapter):
    """
    Adapter for IEEE 754 floats in big-endian order.

    The bytes are reinterpreted through a numpy dtype rather than through a
    Python float, so NaN payloads (signaling bits included) and infinities
    are kept bit-for-bit in both directions.
    """

    def __init__(self, dtype):
        self.native = np.dtype(dtype)
        self.wire = self.native.newbyteorder(">")
        super().__init__(Bytes(self.native.itemsize))

    def _decode(self, obj: bytes, context, path) -> np.floating:
        """Convert big-endian bytes to a numpy float scalar."""
        return np.frombuffer(obj, dtype=self.wire)[0].astype(self.native)

    def _encode(self, obj, context, path) -> bytes:
        """Convert a float to big-endian bytes."""
        return np.asarray(obj, dtype=self.native).astype(self.wire).tobytes()


PGFloat4 = FloatAdapter(np.float32)
"""PostgreSQL float4: 32-bit floating point, big-endian IEEE 754."""

PGFloat8 = FloatAdapter(np.float64)
"""PostgreSQL float8: 64-bit floating point, big-endian IEEE 754."""


# ============================================================================
# Integer Types (Big-Endian)
# ============================================================================

PGChar = Int8sb
"""PostgreSQL "char": Signed 8-bit integer."""

PGInt2 = Int16sb
"""PostgreSQL int2: Signed 16-bit integer, big-endian."""

PGInt4 = Int32sb
"""PostgreSQL int4: Signed 32-bit integer, big-endian."""

PGInt8 = Int64sb
"""PostgreSQL int8: Signed 64-bit integer, big-endian."""


_FLOATS_BY_WIDTH: dict[int, FloatAdapter] = {
    32: PGFloat4,
    64: PGFloat8,
}


# ============================================================================
# Transcoding
# ============================================================================

def unpack(fmt: Construct, data: bytes) -> Any:
    """
    Parse exactly one fixed-size scalar.

    Construct's parse ignores trailing bytes, so the length is checked first.

    Raises:
        WireLengthError: If data is not exactly fmt.sizeof() bytes long.
    """
    size = fmt.sizeof()
    if len(data) != size:
        raise WireLengthError(size, len(data))
    return fmt.parse(data)


def to_wire_bytes(value) -> bytes:
    """
    Big-endian bytes of a float, 4 or 8 bytes depending on its registered type.

    Examples:
        >>> to_wire_bytes(np.float32(1.0)).hex()
        '3f800000'
        >>> to_wire_bytes(0.33).hex()
        '3fd51eb851eb851f'
    """
    width = get_float_type(type(value)).bit_width
    return _FLOATS_BY_WIDTH[width].build(value)


def from_wire_bytes(data: bytes, bit_width: int) -> np.floating:
    """
    Reinterpret big-endian bytes as a float of the given bit width.

    Raises:
        UnsupportedFloatTypeError: If bit_width is neither 32 nor 64.
        WireLengthError: If data is not bit_width / 8 bytes long.
    """
    try:
        fmt = _FLOATS_BY_WIDTH[bit_width]
    except KeyError:
        raise UnsupportedFloatTypeError(
            f"Unsupported floating point bit width: {bit_width}"
        ) from None
    return unpack(fmt, data)
