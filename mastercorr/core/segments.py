"""
Collection of waveform segments cut around correlation triggers.
"""

import logging
import os

import numpy as np
from obspy import Stream, UTCDateTime

logger = logging.getLogger(__name__)


class SegmentCollection:
    """
    Ordered segments paired with the trigger time each was cut around.

    Parameters
    ----------
    segments : obspy.Stream or list of obspy.Trace, optional
        Segmented waveforms
    triggers : array-like, optional
        Trigger times (epoch seconds), one per segment
    """

    def __init__(self, segments=None, triggers=None):
        self.stream = Stream(traces=list(segments) if segments is not None else [])
        self.triggers = np.asarray(triggers if triggers is not None else [], dtype=np.float64).ravel()
        if len(self.stream) != len(self.triggers):
            raise ValueError(f"{len(self.stream)} segments but {len(self.triggers)} triggers")

    def __len__(self):
        return len(self.stream)

    def __iter__(self):
        return iter(zip(self.triggers, self.stream))

    def __repr__(self):
        return f"SegmentCollection({len(self)} segments)"

    def is_empty(self):
        return len(self) == 0

    def trigger_times(self):
        return [UTCDateTime(t) for t in self.triggers]

    def write(self, path, format='MSEED'):
        """Write all segments to a single waveform file with obspy."""
        if self.is_empty():
            raise ValueError("Cannot write an empty segment collection")
        out_dir = os.path.dirname(path)
        if out_dir:
            os.makedirs(out_dir, exist_ok=True)
        self.stream.write(path, format=format)
        logger.info(f"Wrote {len(self)} segments to {path}")
        return path
