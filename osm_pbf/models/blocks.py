"""PBF primitive block and group message shapes.

Plain dataclass mirrors of the ``osmformat.proto`` messages the decoder
reads. Field names match the protobuf schema, so instances generated by a
protobuf compiler can be passed to the decoder in place of these.
"""
from dataclasses import dataclass, field
from enum import IntEnum
from typing import List

# osmformat.proto defaults
DEFAULT_GRANULARITY = 100
DEFAULT_LAT_OFFSET = 0
DEFAULT_LON_OFFSET = 0
NANODEGREE = 1e-9


class MemberType(IntEnum):
    """Relation member type as stored in ``Relation.types``."""
    NODE = 0
    WAY = 1
    RELATION = 2


@dataclass
class StringTable:
    """Interned strings referenced by index; entry 0 is conventionally empty."""
    s: List[bytes] = field(default_factory=list)


@dataclass
class PbfNode:
    """Simple (non-dense) node record."""
    id: int = 0
    lat: int = 0
    lon: int = 0
    keys: List[int] = field(default_factory=list)
    vals: List[int] = field(default_factory=list)


@dataclass
class DenseNodes:
    """Dense node records.

    ``id``, ``lat`` and ``lon`` are parallel delta-coded arrays. Tags of all
    nodes are flattened into ``keys_vals`` as key/value index pairs, each
    node's run terminated by a ``0``.
    """
    id: List[int] = field(default_factory=list)
    lat: List[int] = field(default_factory=list)
    lon: List[int] = field(default_factory=list)
    keys_vals: List[int] = field(default_factory=list)


@dataclass
class PbfWay:
    """Way record with delta-coded node references."""
    id: int = 0
    refs: List[int] = field(default_factory=list)
    keys: List[int] = field(default_factory=list)
    vals: List[int] = field(default_factory=list)


@dataclass
class PbfRelation:
    """Relation record with delta-coded member ids."""
    id: int = 0
    memids: List[int] = field(default_factory=list)
    types: List[MemberType] = field(default_factory=list)
    roles_sid: List[int] = field(default_factory=list)
    keys: List[int] = field(default_factory=list)
    vals: List[int] = field(default_factory=list)


@dataclass
class PrimitiveGroup:
    """One batch of raw records sharing a block."""
    nodes: List[PbfNode] = field(default_factory=list)
    dense: DenseNodes = field(default_factory=DenseNodes)
    ways: List[PbfWay] = field(default_factory=list)
    relations: List[PbfRelation] = field(default_factory=list)


@dataclass
class PrimitiveBlock:
    """Decoding context shared by every group of a block.

    Coordinates are stored as integers in units of ``granularity``
    nanodegrees, shifted by ``lat_offset``/``lon_offset`` nanodegrees.
    """
    stringtable: StringTable = field(default_factory=StringTable)
    primitivegroup: List[PrimitiveGroup] = field(default_factory=list)
    granularity: int = DEFAULT_GRANULARITY
    lat_offset: int = DEFAULT_LAT_OFFSET
    lon_offset: int = DEFAULT_LON_OFFSET
