"""Primitive group decoding.

Turns the compact records of a PBF primitive group into resolved Node, Way
and Relation objects. Every producer is a lazy, single-pass iterator; delta
accumulators live only inside one pass and the block and group are never
modified, so the same inputs can be decoded any number of times.

Malformed input is handled leniently: mismatched parallel arrays are cut to
their common prefix and truncated dense streams simply end the sequence.
"""
from itertools import chain
from typing import Iterator

from osm_pbf.models.blocks import MemberType
from osm_pbf.models.elements import Node, Way, Relation, Ref, OsmId, OsmObj
from osm_pbf.parsing.primitives import make_string, make_lat, make_lon, make_tags

_MEMBER_IDS = {
    MemberType.NODE: OsmId.node,
    MemberType.WAY: OsmId.way,
    MemberType.RELATION: OsmId.relation,
}


def simple_nodes(group, block) -> Iterator[Node]:
    """Decode the non-dense nodes of a group.

    Args:
        group: PrimitiveGroup-like object
        block: PrimitiveBlock-like object owning the group

    Yields:
        Node objects in record order
    """
    for n in group.nodes:
        yield Node(
            id=n.id,
            lat=make_lat(n.lat, block),
            lon=make_lon(n.lon, block),
            tags=make_tags(n.keys, n.vals, block),
        )


def dense_nodes(group, block) -> Iterator[Node]:
    """Decode the dense nodes of a group.

    Ids and coordinates are running sums over the whole group. Tags are read
    from the shared ``keys_vals`` stream, one ``0``-terminated run of
    key/value pairs per node.

    Args:
        group: PrimitiveGroup-like object
        block: PrimitiveBlock-like object owning the group

    Yields:
        Node objects in record order
    """
    dense = group.dense
    keys_vals = iter(dense.keys_vals)
    cur_id = cur_lat = cur_lon = 0

    # zip stops at the shortest delta array
    for did, dlat, dlon in zip(dense.id, dense.lat, dense.lon):
        cur_id += did
        cur_lat += dlat
        cur_lon += dlon

        tags = {}
        while True:
            k = next(keys_vals, None)
            if k is None or k == 0:
                break
            v = next(keys_vals, None)
            if v is None:
                break  # dangling key
            tags[make_string(k, block)] = make_string(v, block)

        yield Node(
            id=cur_id,
            lat=make_lat(cur_lat, block),
            lon=make_lon(cur_lon, block),
            tags=dict(sorted(tags.items())),
        )


def nodes(group, block) -> Iterator[Node]:
    """Decode all nodes of a group: simple nodes first, then dense nodes."""
    return chain(simple_nodes(group, block), dense_nodes(group, block))


def ways(group, block) -> Iterator[Way]:
    """Decode the ways of a group.

    Node references are delta coded within each way; the running sum
    restarts at zero for every way.

    Args:
        group: PrimitiveGroup-like object
        block: PrimitiveBlock-like object owning the group

    Yields:
        Way objects in record order
    """
    for w in group.ways:
        node_ids = []
        n = 0
        for dn in w.refs:
            n += dn
            node_ids.append(n)
        yield Way(
            id=w.id,
            nodes=tuple(node_ids),
            tags=make_tags(w.keys, w.vals, block),
        )


def relations(group, block) -> Iterator[Relation]:
    """Decode the relations of a group.

    Member ids are delta coded within each relation. ``memids``, ``types``
    and ``roles_sid`` are read in parallel up to the shortest of them.

    Args:
        group: PrimitiveGroup-like object
        block: PrimitiveBlock-like object owning the group

    Yields:
        Relation objects in record order

    Raises:
        ValueError: If a member type is not NODE, WAY or RELATION
    """
    for rel in group.relations:
        refs = []
        m = 0
        for dm, t, role in zip(rel.memids, rel.types, rel.roles_sid):
            m += dm
            refs.append(Ref(
                member=_MEMBER_IDS[MemberType(t)](m),
                role=make_string(role, block),
            ))
        yield Relation(
            id=rel.id,
            refs=tuple(refs),
            tags=make_tags(rel.keys, rel.vals, block),
        )


def iter_objects(group, block) -> Iterator[OsmObj]:
    """Decode a whole group as one stream.

    Yields every node (simple, then dense), then every way, then every
    relation, each wrapped in an OsmObj.
    """
    return chain(
        map(OsmObj.from_node, nodes(group, block)),
        map(OsmObj.from_way, ways(group, block)),
        map(OsmObj.from_relation, relations(group, block)),
    )


def iter_block(block) -> Iterator[OsmObj]:
    """Decode every group of a block, in group order."""
    return chain.from_iterable(
        iter_objects(group, block) for group in block.primitivegroup
    )


class PrimitiveGroupDecoder:
    """Decoder bound to one primitive block.

    Holds only a reference to the block; each call starts a fresh pass.
    """

    def __init__(self, block):
        """Initialize decoder.

        Args:
            block: PrimitiveBlock-like object providing the string table,
                granularity and coordinate offsets
        """
        self.block = block

    def nodes(self, group) -> Iterator[Node]:
        return nodes(group, self.block)

    def ways(self, group) -> Iterator[Way]:
        return ways(group, self.block)

    def relations(self, group) -> Iterator[Relation]:
        return relations(group, self.block)

    def objects(self, group) -> Iterator[OsmObj]:
        """Decode one group of this block as a single object stream."""
        return iter_objects(group, self.block)

    def objects_in_block(self) -> Iterator[OsmObj]:
        """Decode every group of this block as a single object stream."""
        return iter_block(self.block)
