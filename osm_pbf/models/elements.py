"""OSM Element data models."""
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple, Any, Optional, Union

Tags = Mapping[str, str]


def _frozen_tags(tags: Tags) -> Tags:
    """Read-only view over a private copy of the tags."""
    return MappingProxyType(dict(tags))


class ElementType(Enum):
    """Kind of an OSM element; the value is the OSM XML element name."""
    NODE = 'node'
    WAY = 'way'
    RELATION = 'relation'


@dataclass(frozen=True)
class Node:
    """OSM Node with location and tags.

    Represents a point feature in OpenStreetMap with latitude/longitude
    coordinates in degrees and associated tags.

    Tags are a read-only mapping and take no part in hashing.
    """
    id: int
    lat: float
    lon: float
    tags: Tags = field(default_factory=dict, hash=False)

    def __post_init__(self):
        object.__setattr__(self, 'tags', _frozen_tags(self.tags))

    def to_geojson_feature(self) -> Dict[str, Any]:
        """Convert to GeoJSON Feature.

        Returns:
            GeoJSON Feature dict with Point geometry
        """
        return {
            "type": "Feature",
            "geometry": {
                "type": "Point",
                "coordinates": [self.lon, self.lat]
            },
            "properties": {
                "id": self.id,
                "osm_type": "node",
                **self.tags
            }
        }


@dataclass(frozen=True)
class Way:
    """OSM Way with node references and tags.

    Node ids are kept in stored order; duplicates and references to nodes
    that are not part of the dataset are allowed.
    """
    id: int
    nodes: Tuple[int, ...] = ()
    tags: Tags = field(default_factory=dict, hash=False)

    def __post_init__(self):
        object.__setattr__(self, 'nodes', tuple(self.nodes))
        object.__setattr__(self, 'tags', _frozen_tags(self.tags))

    @property
    def is_closed(self) -> bool:
        """Check if this way forms a closed loop."""
        return (len(self.nodes) >= 4 and
                self.nodes[0] == self.nodes[-1])

    @property
    def is_area(self) -> bool:
        """Check if this way represents an area (building, landuse, etc.)."""
        area_tags = {'building', 'landuse', 'natural', 'area', 'leisure',
                     'amenity', 'shop', 'tourism'}
        return self.is_closed and any(tag in self.tags for tag in area_tags)

    def to_geojson_feature(self, node_coords: Dict[int, Tuple[float, float]]) -> Dict[str, Any]:
        """Convert to GeoJSON Feature with coordinates.

        Args:
            node_coords: Dict mapping node IDs to (lat, lon) tuples

        Returns:
            GeoJSON Feature dict with LineString or Polygon geometry
        """
        coordinates = []
        for node_id in self.nodes:
            if node_id in node_coords:
                lat, lon = node_coords[node_id]
                coordinates.append([lon, lat])  # GeoJSON uses [lon, lat]

        if self.is_area and len(coordinates) >= 4:
            geometry = {
                "type": "Polygon",
                "coordinates": [coordinates]
            }
        else:
            geometry = {
                "type": "LineString",
                "coordinates": coordinates
            }

        return {
            "type": "Feature",
            "geometry": geometry,
            "properties": {
                "id": self.id,
                "osm_type": "way",
                "node_count": len(self.nodes),
                **self.tags
            }
        }


@dataclass(frozen=True)
class OsmId:
    """Typed reference to another element (node, way or relation id)."""
    type: ElementType
    id: int

    @classmethod
    def node(cls, id: int) -> 'OsmId':
        return cls(ElementType.NODE, id)

    @classmethod
    def way(cls, id: int) -> 'OsmId':
        return cls(ElementType.WAY, id)

    @classmethod
    def relation(cls, id: int) -> 'OsmId':
        return cls(ElementType.RELATION, id)

    @property
    def is_node(self) -> bool:
        return self.type is ElementType.NODE

    @property
    def is_way(self) -> bool:
        return self.type is ElementType.WAY

    @property
    def is_relation(self) -> bool:
        return self.type is ElementType.RELATION


@dataclass(frozen=True)
class Ref:
    """Relation member: a typed id plus a role, which may be empty."""
    member: OsmId
    role: str = ''


@dataclass(frozen=True)
class Relation:
    """OSM Relation with members and tags.

    Represents a logical grouping of elements (nodes, ways, other relations)
    with roles and associated tags.
    """
    id: int
    refs: Tuple[Ref, ...] = ()
    tags: Tags = field(default_factory=dict, hash=False)

    def __post_init__(self):
        object.__setattr__(self, 'refs', tuple(self.refs))
        object.__setattr__(self, 'tags', _frozen_tags(self.tags))

    @property
    def member_count(self) -> int:
        """Get the number of members in this relation."""
        return len(self.refs)

    def get_members_by_type(self, member_type: ElementType) -> List[Ref]:
        """Get all members of a specific type.

        Args:
            member_type: ElementType.NODE, WAY or RELATION

        Returns:
            List of refs matching the type
        """
        return [r for r in self.refs if r.member.type is member_type]

    def get_members_by_role(self, role: str) -> List[Ref]:
        """Get all members with a specific role.

        Args:
            role: The role to filter by (e.g., 'outer', 'inner', 'stop')

        Returns:
            List of refs with the specified role
        """
        return [r for r in self.refs if r.role == role]


Element = Union[Node, Way, Relation]


@dataclass(frozen=True)
class OsmObj:
    """One decoded element tagged with its kind.

    Exactly one of ``node``, ``way`` and ``relation`` is not None.
    """
    type: ElementType
    element: Element

    @classmethod
    def from_node(cls, node: Node) -> 'OsmObj':
        return cls(ElementType.NODE, node)

    @classmethod
    def from_way(cls, way: Way) -> 'OsmObj':
        return cls(ElementType.WAY, way)

    @classmethod
    def from_relation(cls, relation: Relation) -> 'OsmObj':
        return cls(ElementType.RELATION, relation)

    @property
    def node(self) -> Optional[Node]:
        return self.element if self.type is ElementType.NODE else None

    @property
    def way(self) -> Optional[Way]:
        return self.element if self.type is ElementType.WAY else None

    @property
    def relation(self) -> Optional[Relation]:
        return self.element if self.type is ElementType.RELATION else None

    @property
    def id(self) -> int:
        return self.element.id

    @property
    def tags(self) -> Tags:
        return self.element.tags

    @property
    def osm_id(self) -> OsmId:
        """Typed id of the wrapped element."""
        return OsmId(self.type, self.element.id)
