"""OSM XML export functionality."""
from typing import Dict, Any, Iterable, TextIO

from osm_pbf.export.base import BaseExporter, ExportCounter
from osm_pbf.models.elements import ElementType, OsmObj, Tags
from osm_pbf.utils.xml_utils import xml_escape


class XMLExporter(BaseExporter):
    """Export decoded elements to OSM XML 0.6."""

    def get_format_name(self) -> str:
        return 'osm_xml'

    def export(self, objects: Iterable[OsmObj],
               output_file: str) -> Dict[str, Any]:
        """Export to OSM XML format.

        Args:
            objects: Decoded element stream
            output_file: Output file path

        Returns:
            Result dict with metadata
        """
        self.check_output_path(output_file)
        counter = ExportCounter()

        with open(output_file, 'w', encoding='utf-8') as f:
            f.write('<?xml version="1.0" encoding="UTF-8"?>\n')
            f.write('<osm version="0.6" generator="osm_pbf">\n')

            for obj in objects:
                counter.count(obj)
                if obj.type is ElementType.NODE:
                    node = obj.node
                    head = f'  <node id="{node.id}" lat="{node.lat:.7f}" lon="{node.lon:.7f}"'
                    if node.tags:
                        f.write(head + '>\n')
                        self._write_tags(f, node.tags)
                        f.write('  </node>\n')
                    else:
                        f.write(head + '/>\n')
                elif obj.type is ElementType.WAY:
                    way = obj.way
                    f.write(f'  <way id="{way.id}">\n')
                    for node_ref in way.nodes:
                        f.write(f'    <nd ref="{node_ref}"/>\n')
                    self._write_tags(f, way.tags)
                    f.write('  </way>\n')
                else:
                    relation = obj.relation
                    f.write(f'  <relation id="{relation.id}">\n')
                    for ref in relation.refs:
                        f.write(f'    <member type="{ref.member.type.value}" '
                                f'ref="{ref.member.id}" role="{xml_escape(ref.role)}"/>\n')
                    self._write_tags(f, relation.tags)
                    f.write('  </relation>\n')

            f.write('</osm>\n')

        return {
            'metadata': counter.build_metadata(
                format=self.get_format_name(),
                output_file=output_file
            )
        }

    @staticmethod
    def _write_tags(f: TextIO, tags: Tags) -> None:
        for k, v in tags.items():
            f.write(f'    <tag k="{xml_escape(k)}" v="{xml_escape(v)}"/>\n')
