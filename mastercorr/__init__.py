"""
mastercorr - post-processing for master waveform correlation scans

This package provides:
- Extraction of correlation matches into a table, with optional
  waveform segments cut around each trigger
- CSV storage and summary plots of matches
- Blank BOB (raw float32) time series files for RSAM archives
"""

__version__ = "0.1.0"
__author__ = "mastercorr Development Team"

from . import core
from . import io

__all__ = ['core', 'io']
