"""Primitive group decoding modules."""

from osm_pbf.parsing.groups import (
    PrimitiveGroupDecoder, simple_nodes, dense_nodes, nodes, ways,
    relations, iter_objects, iter_block
)
from osm_pbf.parsing.primitives import (
    make_string, make_lat, make_lon, make_tags, denormalize
)

__all__ = [
    'PrimitiveGroupDecoder', 'simple_nodes', 'dense_nodes', 'nodes',
    'ways', 'relations', 'iter_objects', 'iter_block',
    'make_string', 'make_lat', 'make_lon', 'make_tags', 'denormalize',
]
