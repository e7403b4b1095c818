"""
Registration of host floating-point types.

Only 32- and 64-bit floats can be converted to and from the wire. The check is
made once, when a type is registered with @floating_point, so a type with any
other width is rejected before a single value is decoded or encoded.
"""

from dataclasses import dataclass
from typing import Type

import numpy as np

from .errors import UnsupportedFloatTypeError
from .tags import bit_width, resolve_tag, resolve_array_tag
from .wire import WireTag


@dataclass(frozen=True)
class FloatTypeInfo:
    """Wire metadata of a registered float type."""
    float_type: type
    bit_width: int
    tag: WireTag
    array_tag: WireTag

    @property
    def name(self) -> str:
        return self.float_type.__name__


# ============================================================================
# Type Registry
# ============================================================================

_FLOAT_TYPE_REGISTRY: dict[type, FloatTypeInfo] = {}
"""Global registry mapping host float types to their wire metadata."""


def floating_point(cls: Type) -> Type:
    """
    Register a class as convertible to and from the wire float types.

    Usable as a class decorator or as a plain call. The bit width is read from
    the class (numpy.finfo for numpy types, 64 for Python float subclasses) and
    resolved to FLOAT4/FLOAT8 immediately.

    Raises:
        UnsupportedFloatTypeError: If the class is not a float, or its width is
            neither 32 nor 64 bits.

    Examples:
        >>> @floating_point
        >>> class Celsius(float):
        >>>     pass
        >>> postgres_data_type(Celsius)
        <WireTag.FLOAT8: 701>

        >>> floating_point(np.float16)
        Traceback (most recent call last):
        ...
        UnsupportedFloatTypeError: Unsupported floating point bit width: 16
    """
    width = bit_width(cls)
    info = FloatTypeInfo(
        float_type=cls,
        bit_width=width,
        tag=resolve_tag(width),
        array_tag=resolve_array_tag(width),
    )
    _FLOAT_TYPE_REGISTRY[cls] = info
    return cls


def get_float_type(cls: Type) -> FloatTypeInfo:
    """
    Lookup the wire metadata of a registered float type.

    Raises:
        UnsupportedFloatTypeError: If the class was never registered.
    """
    try:
        return _FLOAT_TYPE_REGISTRY[cls]
    except (KeyError, TypeError):
        raise UnsupportedFloatTypeError(
            f"{getattr(cls, '__name__', cls)!s} is not registered as a floating-point type"
        ) from None


def is_floating_point(cls: Type) -> bool:
    """True if the class was registered with @floating_point."""
    try:
        return cls in _FLOAT_TYPE_REGISTRY
    except TypeError:
        return False


def postgres_data_type(cls: Type) -> WireTag:
    """Wire tag used to transmit scalars of a registered float type."""
    return get_float_type(cls).tag


def postgres_array_type(cls: Type) -> WireTag:
    """Wire tag used to transmit arrays of a registered float type."""
    return get_float_type(cls).array_tag


floating_point(float)
floating_point(np.float32)
floating_point(np.float64)
