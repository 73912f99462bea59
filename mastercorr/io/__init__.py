"""
I/O modules for mastercorr.

Provides:
- Blank BOB time series files
- CSV storage of match tables
"""

from .bob_file import allocate_blank_series, read_blank_series, expected_size
from .tables import write_match_table, read_match_table

__all__ = [
    'allocate_blank_series',
    'read_blank_series',
    'expected_size',
    'write_match_table',
    'read_match_table',
]
