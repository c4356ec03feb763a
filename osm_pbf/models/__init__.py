"""Data models for PBF input messages, decoded elements and statistics."""

from osm_pbf.models.blocks import (
    PrimitiveBlock, PrimitiveGroup, StringTable, PbfNode, DenseNodes,
    PbfWay, PbfRelation, MemberType
)
from osm_pbf.models.elements import (
    ElementType, Node, Way, Relation, Ref, OsmId, OsmObj, Tags
)
from osm_pbf.models.statistics import DecodeStats, collect_stats

__all__ = [
    'PrimitiveBlock', 'PrimitiveGroup', 'StringTable', 'PbfNode',
    'DenseNodes', 'PbfWay', 'PbfRelation', 'MemberType',
    'ElementType', 'Node', 'Way', 'Relation', 'Ref', 'OsmId', 'OsmObj',
    'Tags', 'DecodeStats', 'collect_stats',
]
