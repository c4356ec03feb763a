"""Export functionality for decoded element streams."""

from osm_pbf.export.base import BaseExporter, ExportCounter
from osm_pbf.export.json_exporter import GeoJSONExporter
from osm_pbf.export.xml_exporter import XMLExporter

__all__ = ['BaseExporter', 'ExportCounter', 'GeoJSONExporter', 'XMLExporter']
