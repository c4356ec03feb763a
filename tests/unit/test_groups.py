"""Tests for primitive group decoding."""
import copy

import pytest
from osm_pbf.models.blocks import (
    PrimitiveBlock, PrimitiveGroup, PbfNode, DenseNodes, PbfWay,
    PbfRelation, MemberType
)
from osm_pbf.models.elements import ElementType, Node, OsmId, OsmObj, Ref
from osm_pbf.parsing.groups import (
    PrimitiveGroupDecoder, simple_nodes, nodes, ways, relations,
    iter_objects, iter_block
)


class TestSimpleNodes:
    """Tests for simple node decoding."""

    def test_fields(self, block, mixed_group):
        """Test id, coordinates and tags are resolved."""
        (node,) = simple_nodes(mixed_group, block)

        assert node.id == 1
        assert node.lat == pytest.approx(51.5)
        assert node.lon == pytest.approx(-0.1)
        assert node.tags == {"amenity": "cafe", "name": "Café"}

    def test_coordinates_not_delta_coded(self, offset_block):
        """Test every record uses its own absolute coordinate."""
        group = PrimitiveGroup(nodes=[
            PbfNode(id=5, lat=1000, lon=2000),
            PbfNode(id=3, lat=1000, lon=2000),
        ])
        result = list(simple_nodes(group, offset_block))

        assert [n.id for n in result] == [5, 3]
        for n in result:
            assert n.lat == pytest.approx(1e-9 * (500_000_000 + 1000 * 1000))
            assert n.lon == pytest.approx(1e-9 * (-250_000_000 + 1000 * 2000))

    def test_is_lazy(self, block):
        """Test records are only resolved when pulled."""
        group = PrimitiveGroup(nodes=[
            PbfNode(id=1),
            PbfNode(id=2, keys=[999], vals=[1]),
        ])
        producer = simple_nodes(group, block)

        assert next(producer).id == 1
        with pytest.raises(IndexError):
            next(producer)


class TestNodes:
    """Tests for merged simple and dense nodes."""

    def test_simple_then_dense(self, block):
        """Test simple nodes come before dense nodes."""
        group = PrimitiveGroup(
            nodes=[PbfNode(id=50), PbfNode(id=60)],
            dense=DenseNodes(id=[1, 1], lat=[0, 0], lon=[0, 0]),
        )
        assert [n.id for n in nodes(group, block)] == [50, 60, 1, 2]


class TestWays:
    """Tests for way decoding."""

    def test_ref_deltas(self, block):
        """Test refs [3, -1, 2] decode to [3, 2, 4]."""
        group = PrimitiveGroup(ways=[PbfWay(id=7, refs=[3, -1, 2])])
        (way,) = ways(group, block)
        assert way.nodes == (3, 2, 4)

    def test_accumulator_resets_per_way(self, block):
        """Test each way starts its delta chain at zero."""
        group = PrimitiveGroup(ways=[
            PbfWay(id=1, refs=[10, 1]),
            PbfWay(id=2, refs=[10, 1]),
        ])
        assert [w.nodes for w in ways(group, block)] == [(10, 11), (10, 11)]

    def test_closed_way_repeats_ref(self, block):
        """Test self-references are kept."""
        group = PrimitiveGroup(ways=[PbfWay(id=1, refs=[1, 1, 1, -2])])
        (way,) = ways(group, block)
        assert way.nodes == (1, 2, 3, 1)
        assert way.is_closed is True

    def test_tags(self, block, mixed_group):
        """Test way tags are resolved."""
        (way,) = ways(mixed_group, block)
        assert way.id == 100
        assert way.tags == {"highway": "primary"}

    def test_empty_refs(self, block):
        """Test a way without refs."""
        group = PrimitiveGroup(ways=[PbfWay(id=1)])
        (way,) = ways(group, block)
        assert way.nodes == ()


class TestRelations:
    """Tests for relation decoding."""

    def test_member_types_and_deltas(self, block):
        """Test memids [10, -4] with NODE, WAY give Node(10), Way(6)."""
        group = PrimitiveGroup(relations=[PbfRelation(
            id=1, memids=[10, -4],
            types=[MemberType.NODE, MemberType.WAY],
            roles_sid=[0, 0],
        )])
        (rel,) = relations(group, block)

        assert [r.member for r in rel.refs] == [OsmId.node(10), OsmId.way(6)]

    def test_relation_member(self, block):
        """Test RELATION maps to a relation id."""
        group = PrimitiveGroup(relations=[PbfRelation(
            id=1, memids=[42], types=[MemberType.RELATION], roles_sid=[0],
        )])
        (rel,) = relations(group, block)
        assert rel.refs[0].member.is_relation

    def test_plain_int_types(self, block):
        """Test raw integers as produced by a protobuf decoder."""
        group = PrimitiveGroup(relations=[PbfRelation(
            id=1, memids=[1, 1, 1], types=[0, 1, 2], roles_sid=[0, 0, 0],
        )])
        (rel,) = relations(group, block)
        assert [r.member.type for r in rel.refs] == [
            ElementType.NODE, ElementType.WAY, ElementType.RELATION
        ]

    def test_roles(self, block, mixed_group):
        """Test roles resolve through the string table."""
        (rel,) = relations(mixed_group, block)

        assert list(rel.refs) == [
            Ref(member=OsmId.way(100), role="outer"),
            Ref(member=OsmId.node(1), role=""),
        ]
        assert rel.tags == {"type": "multipolygon"}

    def test_shortest_array_wins(self, block):
        """Test mismatched member arrays are cut to the common prefix."""
        group = PrimitiveGroup(relations=[PbfRelation(
            id=1, memids=[1, 2, 3],
            types=[MemberType.WAY, MemberType.WAY],
            roles_sid=[10, 11, 10],
        )])
        (rel,) = relations(group, block)
        assert [r.member.id for r in rel.refs] == [1, 3]

    def test_accumulator_resets_per_relation(self, block):
        """Test each relation starts its member chain at zero."""
        group = PrimitiveGroup(relations=[
            PbfRelation(id=1, memids=[5], types=[0], roles_sid=[0]),
            PbfRelation(id=2, memids=[5], types=[0], roles_sid=[0]),
        ])
        assert [r.refs[0].member.id for r in relations(group, block)] == [5, 5]

    def test_unknown_member_type(self, block):
        """Test a member type outside the enum raises ValueError."""
        group = PrimitiveGroup(relations=[PbfRelation(
            id=1, memids=[1], types=[7], roles_sid=[0],
        )])
        with pytest.raises(ValueError):
            list(relations(group, block))


class TestIterObjects:
    """Tests for the combined object stream."""

    def test_kind_major_order(self, block, mixed_group):
        """Test one of each record gives Node, Node, Way, Relation."""
        result = list(iter_objects(mixed_group, block))

        assert [o.type for o in result] == [
            ElementType.NODE, ElementType.NODE,
            ElementType.WAY, ElementType.RELATION
        ]
        assert [o.id for o in result] == [1, 2, 100, 1000]

    def test_dense_node_in_stream(self, block, mixed_group):
        """Test the dense node is resolved inside the stream."""
        dense = list(iter_objects(mixed_group, block))[1].node

        assert isinstance(dense, Node)
        assert dense.id == 2
        assert dense.lat == pytest.approx(51.51)
        assert dense.lon == pytest.approx(-0.11)
        assert dense.tags == {"amenity": "restaurant"}

    def test_empty_group(self, block, empty_group):
        """Test an empty group gives an empty stream."""
        assert list(iter_objects(empty_group, block)) == []

    def test_idempotent(self, block, mixed_group):
        """Test decoding twice gives equal results."""
        assert list(iter_objects(mixed_group, block)) == \
            list(iter_objects(mixed_group, block))

    def test_inputs_not_modified(self, block, mixed_group):
        """Test block and group are left untouched."""
        block_before = copy.deepcopy(block)
        group_before = copy.deepcopy(mixed_group)

        list(iter_objects(mixed_group, block))

        assert block == block_before
        assert mixed_group == group_before

    def test_partial_consumption(self, block, mixed_group):
        """Test the stream can be abandoned early."""
        stream = iter_objects(mixed_group, block)
        first = next(stream)
        assert first == OsmObj.from_node(first.node)


class TestIterBlock:
    """Tests for decoding every group of a block."""

    def test_groups_in_order(self, string_table, mixed_group):
        """Test groups are decoded one after another."""
        second = PrimitiveGroup(ways=[PbfWay(id=200, refs=[1])])
        block = PrimitiveBlock(stringtable=string_table,
                               primitivegroup=[mixed_group, second])

        assert [o.id for o in iter_block(block)] == [1, 2, 100, 1000, 200]

    def test_no_groups(self, block):
        """Test a block without groups."""
        assert list(iter_block(block)) == []


class TestPrimitiveGroupDecoder:
    """Tests for the block-bound decoder."""

    def test_delegates(self, block, mixed_group):
        """Test decoder methods match the module functions."""
        decoder = PrimitiveGroupDecoder(block)

        assert list(decoder.nodes(mixed_group)) == list(nodes(mixed_group, block))
        assert list(decoder.ways(mixed_group)) == list(ways(mixed_group, block))
        assert list(decoder.relations(mixed_group)) == \
            list(relations(mixed_group, block))
        assert list(decoder.objects(mixed_group)) == \
            list(iter_objects(mixed_group, block))

    def test_objects_in_block(self, string_table, mixed_group):
        """Test whole-block decoding through the decoder."""
        block = PrimitiveBlock(stringtable=string_table,
                               primitivegroup=[mixed_group])
        decoder = PrimitiveGroupDecoder(block)
        assert len(list(decoder.objects_in_block())) == 4
