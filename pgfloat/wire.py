"""
Wire values - tagged payloads exchanged with the transport layer.
"""
from dataclasses import dataclass
from enum import IntEnum
from typing import Union


class WireTag(IntEnum):
    """PostgreSQL type OIDs relevant to floating-point conversion"""
    BOOL = 16
    BYTEA = 17
    CHAR = 18  # "char", 1 byte signed
    INT8 = 20
    INT2 = 21
    INT4 = 23
    TEXT = 25
    FLOAT4 = 700
    FLOAT8 = 701
    ARRAY_FLOAT4 = 1021  # _float4
    ARRAY_FLOAT8 = 1022  # _float8
    VARCHAR = 1043
    DATE = 1082
    TIME = 1083
    TIMESTAMP = 1114
    TIMESTAMPTZ = 1184
    NUMERIC = 1700

    @property
    def typname(self) -> str:
        """Name of the type as PostgreSQL reports it (pg_type.typname)"""
        name = self.name.lower()
        if name.startswith("array_"):
            return "_" + name[len("array_"):]
        return name

    def __str__(self):
        return self.typname


def wire_tag(oid: Union[int, WireTag]) -> Union[WireTag, int]:
    """Returns the WireTag for an OID, or the OID itself when it is not named"""
    try:
        return WireTag(oid)
    except ValueError:
        return int(oid)


class WireValue:
    """Base for the three wire value variants"""
    __slots__ = ()


@dataclass(frozen=True)
class Binary(WireValue):
    tag: Union[WireTag, int]
    data: bytes

    def __post_init__(self):
        object.__setattr__(self, "tag", wire_tag(self.tag))
        object.__setattr__(self, "data", bytes(self.data))


@dataclass(frozen=True)
class Text(WireValue):
    string: str


@dataclass(frozen=True)
class Null(WireValue):
    pass


NULL = Null()
