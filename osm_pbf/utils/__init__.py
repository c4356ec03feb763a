"""Utility functions for OSM processing."""

from osm_pbf.utils.xml_utils import xml_escape

__all__ = ['xml_escape']
