"""
OSM PBF - Primitive group decoding for OpenStreetMap PBF data.

This package turns already-deserialized PBF primitive blocks and groups
into resolved nodes, ways and relations, with statistics and export on
top of the decoded element stream.
"""

__version__ = "0.1.0"

# Data models
from osm_pbf.models.blocks import (
    PrimitiveBlock, PrimitiveGroup, StringTable, PbfNode, DenseNodes,
    PbfWay, PbfRelation, MemberType
)
from osm_pbf.models.elements import (
    ElementType, Node, Way, Relation, Ref, OsmId, OsmObj
)
from osm_pbf.models.statistics import DecodeStats, collect_stats

# Decoding
from osm_pbf.parsing.groups import (
    PrimitiveGroupDecoder, simple_nodes, dense_nodes, nodes, ways,
    relations, iter_objects, iter_block
)

# Export
from osm_pbf.export.json_exporter import GeoJSONExporter
from osm_pbf.export.xml_exporter import XMLExporter

__all__ = [
    # Version
    '__version__',
    # Input messages
    'PrimitiveBlock', 'PrimitiveGroup', 'StringTable', 'PbfNode',
    'DenseNodes', 'PbfWay', 'PbfRelation', 'MemberType',
    # Models
    'ElementType', 'Node', 'Way', 'Relation', 'Ref', 'OsmId', 'OsmObj',
    'DecodeStats', 'collect_stats',
    # Decoding
    'PrimitiveGroupDecoder', 'simple_nodes', 'dense_nodes', 'nodes',
    'ways', 'relations', 'iter_objects', 'iter_block',
    # Export
    'GeoJSONExporter', 'XMLExporter',
]
