"""Pytest fixtures for osm_pbf tests."""
import pytest

from osm_pbf.models.blocks import (
    PrimitiveBlock, PrimitiveGroup, StringTable, PbfNode, DenseNodes,
    PbfWay, PbfRelation, MemberType
)

STRINGS = [
    b'',               # 0
    b'highway',        # 1
    b'primary',        # 2
    b'name',           # 3
    b'Main Street',    # 4
    b'amenity',        # 5
    b'cafe',           # 6
    b'restaurant',     # 7
    b'type',           # 8
    b'multipolygon',   # 9
    b'outer',          # 10
    b'inner',          # 11
    b'Caf\xc3\xa9',    # 12
    b'bad\xff\xfe',    # 13
]


@pytest.fixture
def string_table():
    """Create the shared string table."""
    return StringTable(s=list(STRINGS))


@pytest.fixture
def block(string_table):
    """Create block with default granularity and no offsets."""
    return PrimitiveBlock(stringtable=string_table)


@pytest.fixture
def offset_block(string_table):
    """Create block with non-default granularity and offsets."""
    return PrimitiveBlock(
        stringtable=string_table,
        granularity=1000,
        lat_offset=500_000_000,
        lon_offset=-250_000_000,
    )


@pytest.fixture
def mixed_group():
    """Create group with one record of every kind.

    One simple node, one dense node, one way and one relation.
    """
    return PrimitiveGroup(
        nodes=[PbfNode(id=1, lat=515_000_000, lon=-1_000_000,
                       keys=[5, 3], vals=[6, 12])],
        dense=DenseNodes(id=[2], lat=[515_100_000], lon=[-1_100_000],
                         keys_vals=[5, 7, 0]),
        ways=[PbfWay(id=100, refs=[1, 1], keys=[1], vals=[2])],
        relations=[PbfRelation(id=1000, memids=[100, -99],
                               types=[MemberType.WAY, MemberType.NODE],
                               roles_sid=[10, 0], keys=[8], vals=[9])],
    )


@pytest.fixture
def empty_group():
    """Create group without any records."""
    return PrimitiveGroup()
