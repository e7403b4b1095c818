"""
Type-tag resolution for floating-point host types.

A float type is transmitted as FLOAT4 or FLOAT8 depending only on its bit
width; when registered as an array element it uses _float4 or _float8.
"""

import numpy as np

from .errors import UnsupportedFloatTypeError
from .wire import WireTag


_SCALAR_TAGS: dict[int, WireTag] = {
    32: WireTag.FLOAT4,
    64: WireTag.FLOAT8,
}

_ARRAY_TAGS: dict[int, WireTag] = {
    32: WireTag.ARRAY_FLOAT4,
    64: WireTag.ARRAY_FLOAT8,
}


def bit_width(float_type: type) -> int:
    """
    Bit width of a host floating-point type.

    numpy floating types report their own width; Python floats (and their
    subclasses) are IEEE-754 doubles.

    Raises:
        UnsupportedFloatTypeError: If float_type is not a floating-point type.
    """
    if isinstance(float_type, type):
        if issubclass(float_type, np.floating):
            return np.finfo(float_type).bits
        if issubclass(float_type, float):
            return 64
    raise UnsupportedFloatTypeError(f"{float_type!r} is not a floating-point type")


def resolve_tag(width: int) -> WireTag:
    """
    Wire tag used to send and validate scalar floats of the given bit width.

    Examples:
        >>> resolve_tag(32)
        <WireTag.FLOAT4: 700>
        >>> resolve_tag(64)
        <WireTag.FLOAT8: 701>
    """
    try:
        return _SCALAR_TAGS[width]
    except KeyError:
        raise UnsupportedFloatTypeError(
            f"Unsupported floating point bit width: {width}"
        ) from None


def resolve_array_tag(width: int) -> WireTag:
    """Wire tag used when floats of the given bit width are array elements."""
    try:
        return _ARRAY_TAGS[width]
    except KeyError:
        raise UnsupportedFloatTypeError(
            f"Unsupported floating point bit width: {width}"
        ) from None
