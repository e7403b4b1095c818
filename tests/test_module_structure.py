"""
Tests for the module structure - ensuring all imports work correctly
"""
import pytest


def test_import_from_main_module():
    """Test importing from main pgfloat module"""
    from pgfloat import (
        decode,
        encode,
        floating_point,
        Binary,
        Text,
        NULL,
        WireTag,
        ConversionError,
        ConversionContext,
    )

    assert callable(decode)
    assert callable(encode)
    assert callable(floating_point)
    assert NULL is not None


def test_import_from_submodules():
    """Test importing from the submodules"""
    from pgfloat.api import decode, encode
    from pgfloat.basic_types import PGFloat4, PGFloat8, unpack
    from pgfloat.decorators import floating_point, get_float_type
    from pgfloat.errors import ConversionError, UnsupportedFloatTypeError
    from pgfloat.serialization import ConversionContext, DEFAULT_CONTEXT
    from pgfloat.tags import resolve_tag, resolve_array_tag
    from pgfloat.temporal import PostgresTemporalCodec, epoch_offset
    from pgfloat.wire import Binary, Text, Null, NULL, WireTag

    assert isinstance(DEFAULT_CONTEXT, ConversionContext)
    assert isinstance(NULL, Null)


def test_all_exports_exist():
    """Every name in __all__ is importable"""
    import pgfloat

    for name in pgfloat.__all__:
        assert hasattr(pgfloat, name), name


def test_wire_values_are_immutable():
    """Wire values cannot be modified once constructed"""
    from dataclasses import FrozenInstanceError
    from pgfloat import Binary, Text, WireTag

    wire = Binary(WireTag.FLOAT8, b"\x00" * 8)
    with pytest.raises(FrozenInstanceError):
        wire.tag = WireTag.FLOAT4
    with pytest.raises(FrozenInstanceError):
        Text("1").string = "2"


def test_wire_tag_names():
    """WireTag prints as the PostgreSQL type name"""
    from pgfloat import WireTag, wire_tag

    assert str(WireTag.FLOAT4) == "float4"
    assert WireTag.ARRAY_FLOAT8.typname == "_float8"
    assert wire_tag(701) is WireTag.FLOAT8
    assert wire_tag(4242) == 4242


def test_version():
    """Test version is defined"""
    import pgfloat

    assert pgfloat.__version__ == "0.1.0"
