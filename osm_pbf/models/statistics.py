"""Decode statistics data model."""
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable

from osm_pbf.models.elements import ElementType, OsmObj


@dataclass
class DecodeStats:
    """Counts gathered from one pass over a decoded element stream.

    Simple and dense nodes are counted together; the stream does not expose
    which encoding a node came from.
    """
    elements: Counter = field(default_factory=Counter)
    tag_keys: Counter = field(default_factory=Counter)
    way_node_refs: int = 0
    relation_members: Counter = field(default_factory=Counter)

    @property
    def nodes(self) -> int:
        return self.elements[ElementType.NODE]

    @property
    def ways(self) -> int:
        return self.elements[ElementType.WAY]

    @property
    def relations(self) -> int:
        return self.elements[ElementType.RELATION]

    @property
    def total_elements(self) -> int:
        return sum(self.elements.values())

    def add(self, obj: OsmObj) -> None:
        """Account for one decoded element."""
        self.elements[obj.type] += 1
        self.tag_keys.update(obj.tags.keys())
        if obj.type is ElementType.WAY:
            self.way_node_refs += len(obj.way.nodes)
        elif obj.type is ElementType.RELATION:
            self.relation_members.update(
                ref.member.type for ref in obj.relation.refs
            )

    def to_dict(self) -> Dict[str, Any]:
        """Plain representation keyed by OSM element names."""
        return {
            'elements': {t.value: self.elements[t] for t in ElementType},
            'tag_keys': dict(self.tag_keys.most_common()),
            'way_node_refs': self.way_node_refs,
            'relation_members': {
                t.value: self.relation_members[t] for t in ElementType
            },
        }


def collect_stats(objects: Iterable[OsmObj]) -> DecodeStats:
    """Consume an element stream and count what it holds.

    Args:
        objects: Decoded elements, e.g. from ``iter_objects``

    Returns:
        DecodeStats for the stream
    """
    stats = DecodeStats()
    for obj in objects:
        stats.add(obj)
    return stats
