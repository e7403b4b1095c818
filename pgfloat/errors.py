"""
Errors raised by the floating-point codec.

Two families:
    - ConversionError: a single wire value could not be decoded. Recoverable,
      reported per value. Every subclass shares the "binaryFloatingPoint"
      identifier and maps to exactly one reason template.
    - UnsupportedFloatTypeError: a host type that is not a 32- or 64-bit float
      was registered or used. This is a configuration fault, raised when the
      type is registered, before any value flows through it.
"""

from typing import Any, Optional


class PGFloatError(Exception):
    """Base class for all pgfloat errors."""

    #: Stable machine-readable code
    code: str = "unknown"


# ============================================================================
# Per-value conversion errors
# ============================================================================

class ConversionError(PGFloatError):
    """A wire value could not be converted to the requested float type."""

    code = "conversion_error"
    identifier: str = "binaryFloatingPoint"

    def __init__(self, reason: str, *, target: str,
                 tag: Any = None, raw: Optional[str] = None):
        super().__init__(reason)
        self.reason = reason
        self.target = target
        self.tag = tag
        self.raw = raw

    def __str__(self) -> str:
        return self.reason

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(identifier={self.identifier!r}, reason={self.reason!r})"


class UnsupportedTagError(ConversionError):
    """The binary value carries a tag the target type cannot be decoded from."""

    code = "unsupported_tag"

    def __init__(self, target: str, tag: Any):
        super().__init__(
            f"Could not decode {target} from binary data type: {_tag_name(tag)}.",
            target=target, tag=tag,
        )


class ByteLengthError(UnsupportedTagError):
    """
    The tag is supported but the payload has the wrong number of bytes.

    Reported with the same reason as an unsupported tag.
    """

    code = "byte_length_mismatch"

    def __init__(self, target: str, tag: Any, length: int):
        super().__init__(target, tag)
        self.length = length


class MalformedTextError(ConversionError):
    """A text payload is not a floating-point literal."""

    code = "malformed_text"

    def __init__(self, target: str, raw: str):
        super().__init__(
            f"Could not decode {target} from string: {raw}.",
            target=target, raw=raw,
        )


class NullValueError(ConversionError):
    """Null cannot be represented by any float type."""

    code = "null_value"

    def __init__(self, target: str):
        super().__init__(f"Could not decode {target} from null data.", target=target)


def _tag_name(tag: Any) -> str:
    return getattr(tag, "typname", str(tag))


# ============================================================================
# Configuration faults
# ============================================================================

class UnsupportedFloatTypeError(PGFloatError, TypeError):
    """A host type is not a supported 32- or 64-bit floating-point type."""

    code = "unsupported_float_type"


class WireLengthError(PGFloatError, ValueError):
    """A byte sequence does not match the fixed size of its wire format."""

    code = "wire_length"

    def __init__(self, expected: int, actual: int):
        super().__init__(f"Expected {expected} bytes, got {actual}")
        self.expected = expected
        self.actual = actual
