"""Base classes for export functionality.

Exporters consume a decoded element stream (``OsmObj`` items, for example
from ``iter_block``) in a single pass and write one output file.
"""
import os
import time
from abc import ABC, abstractmethod
from typing import Dict, Any, Iterable, TYPE_CHECKING

if TYPE_CHECKING:
    from osm_pbf.models.elements import OsmObj


class ExportCounter:
    """Element counts and timing for one export run."""

    def __init__(self):
        self.start_time = time.time()
        self.counts = {'nodes': 0, 'ways': 0, 'relations': 0}

    def count(self, obj: 'OsmObj') -> None:
        self.counts[obj.type.value + 's'] += 1

    @property
    def total_elements(self) -> int:
        """Get total number of elements."""
        return sum(self.counts.values())

    def build_metadata(self, **extras) -> Dict[str, Any]:
        """Build common metadata structure.

        Args:
            **extras: Additional metadata fields

        Returns:
            Metadata dictionary
        """
        processing_time = time.time() - self.start_time
        return {
            'processing_time_seconds': processing_time,
            'elements': {**self.counts, 'total': self.total_elements},
            **extras
        }


class BaseExporter(ABC):
    """Abstract base class for exporters."""

    @abstractmethod
    def export(self, objects: Iterable['OsmObj'],
               output_file: str) -> Dict[str, Any]:
        """Export data to file.

        Args:
            objects: Decoded element stream
            output_file: Output file path

        Returns:
            Metadata dictionary
        """
        pass

    @abstractmethod
    def get_format_name(self) -> str:
        """Get the format name (e.g., 'geojson', 'osm_xml').

        Returns:
            Format name string
        """
        pass

    @staticmethod
    def check_output_path(output_file: str) -> None:
        """Fail early when the output directory does not exist."""
        directory = os.path.dirname(os.path.abspath(output_file))
        if not os.path.isdir(directory):
            raise FileNotFoundError(f"Output directory not found: {directory}")
