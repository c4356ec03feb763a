"""GeoJSON export functionality."""
import json
from typing import Dict, Any, Iterable, List, Tuple

from osm_pbf.export.base import BaseExporter, ExportCounter
from osm_pbf.models.elements import ElementType, OsmObj


class GeoJSONExporter(BaseExporter):
    """Export decoded elements as a GeoJSON FeatureCollection.

    Nodes become Points, ways become LineStrings or Polygons. Way geometry
    is resolved from the coordinates of nodes seen earlier in the stream;
    references to unseen nodes are skipped. Relations are counted but have
    no geometry of their own.

    The coordinate lookup keeps one entry per node seen, so memory grows
    with the number of nodes in the stream, unlike the decoder itself.
    Export one group or block at a time to bound it.
    """

    def __init__(self, include_untagged_nodes: bool = False):
        """Initialize GeoJSON exporter.

        Args:
            include_untagged_nodes: If True, also export nodes without tags
                (usually way vertices)
        """
        self.include_untagged_nodes = include_untagged_nodes

    def get_format_name(self) -> str:
        return 'geojson'

    def export(self, objects: Iterable[OsmObj],
               output_file: str) -> Dict[str, Any]:
        """Export to GeoJSON FeatureCollection.

        Args:
            objects: Decoded element stream
            output_file: Output file path

        Returns:
            Result dict with metadata
        """
        self.check_output_path(output_file)
        counter = ExportCounter()
        node_coords: Dict[int, Tuple[float, float]] = {}
        features: List[Dict[str, Any]] = []

        for obj in objects:
            counter.count(obj)
            if obj.type is ElementType.NODE:
                node = obj.node
                node_coords[node.id] = (node.lat, node.lon)
                if node.tags or self.include_untagged_nodes:
                    features.append(node.to_geojson_feature())
            elif obj.type is ElementType.WAY:
                features.append(obj.way.to_geojson_feature(node_coords))

        geojson = {
            'type': 'FeatureCollection',
            'features': features,
            'properties': {
                'generator': 'osm_pbf',
                'feature_count': len(features)
            }
        }

        with open(output_file, 'w', encoding='utf-8') as f:
            json.dump(geojson, f, indent=2)

        return {
            'metadata': counter.build_metadata(
                format=self.get_format_name(),
                output_file=output_file,
                features_exported=len(features)
            )
        }
