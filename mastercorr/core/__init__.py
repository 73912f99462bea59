"""
Core handling of master correlation scan output.

This module provides:
- Typed scan metadata attached to obspy traces
- Match tables filtered by correlation threshold
- Segment collections cut around triggers
"""

from .records import (
    MasterSnippet,
    ScanMetadata,
    attach_scan_metadata,
    get_scan_metadata,
    has_scan_metadata,
    strip_scan_metadata,
    flatten_records,
)
from .match_table import MatchTable
from .segments import SegmentCollection
from .extract import extract, gather_matches, cut_segments

__all__ = [
    'MasterSnippet',
    'ScanMetadata',
    'attach_scan_metadata',
    'get_scan_metadata',
    'has_scan_metadata',
    'strip_scan_metadata',
    'flatten_records',
    'MatchTable',
    'SegmentCollection',
    'extract',
    'gather_matches',
    'cut_segments',
]
