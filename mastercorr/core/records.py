"""
Scan metadata attached to waveform records.

A correlation scan leaves four pieces of information on each trace it
processes: the trigger times, the peak correlation at each trigger, the
largest adjacent-peak correlation, and the master snippet used as the
template. They are kept together as a ``ScanMetadata`` object stored under
``trace.stats.mastercorr``.
"""

from dataclasses import dataclass
from typing import List, Tuple

import numpy as np
from obspy import Stream, Trace, UTCDateTime

SCAN_KEY = 'mastercorr'


@dataclass
class MasterSnippet:
    """Master template waveform and the trigger time it was picked at."""

    trace: Trace
    trigger: UTCDateTime

    def __post_init__(self):
        self.trigger = UTCDateTime(self.trigger)

    @property
    def start(self) -> UTCDateTime:
        return self.trace.stats.starttime

    @property
    def end(self) -> UTCDateTime:
        return self.trace.stats.endtime

    def window(self) -> Tuple[float, float]:
        """Return (pre, post) trigger offsets in seconds.

        ``pre`` is normally negative since the snippet starts before its
        trigger.
        """
        return float(self.start - self.trigger), float(self.end - self.trigger)


@dataclass(eq=False)
class ScanMetadata:
    """
    Per-trace output of a master correlation scan.

    Parameters
    ----------
    triggers : array-like
        Trigger times as epoch seconds (UTCDateTime values are accepted)
    corr : array-like
        Peak correlation value at each trigger
    adjacent_corr : array-like
        Largest correlation of an adjacent peak for each trigger. Useful to
        spot events detected more than once through cycle skipping.
    snippet : MasterSnippet
        Master template used for the scan
    """

    triggers: np.ndarray
    corr: np.ndarray
    adjacent_corr: np.ndarray
    snippet: MasterSnippet

    def __post_init__(self):
        self.triggers = _as_epoch_array(self.triggers)
        self.corr = np.asarray(self.corr, dtype=np.float64).ravel()
        self.adjacent_corr = np.asarray(self.adjacent_corr, dtype=np.float64).ravel()
        n = len(self.triggers)
        if len(self.corr) != n or len(self.adjacent_corr) != n:
            raise ValueError(
                f"Scan fields must have equal length: {n} triggers, "
                f"{len(self.corr)} correlations, {len(self.adjacent_corr)} adjacent correlations")

    def __len__(self):
        return len(self.triggers)

    def passing(self, threshold):
        """Boolean mask of triggers whose correlation meets ``threshold``."""
        return self.corr >= threshold


def _as_epoch_array(values):
    values = [values] if isinstance(values, UTCDateTime) else values
    out = [v.timestamp if isinstance(v, UTCDateTime) else v for v in values]
    return np.asarray(out, dtype=np.float64).ravel()


def attach_scan_metadata(trace, metadata):
    """Store scan metadata on a trace, replacing any existing scan."""
    if not isinstance(metadata, ScanMetadata):
        raise TypeError(f"Expected ScanMetadata, got {type(metadata).__name__}")
    trace.stats[SCAN_KEY] = metadata
    return trace


def has_scan_metadata(trace):
    return SCAN_KEY in trace.stats


def get_scan_metadata(trace) -> ScanMetadata:
    """
    Return the scan metadata of a trace.

    Raises
    ------
    ValueError
        If the trace has not been through a correlation scan
    """
    if not has_scan_metadata(trace):
        raise ValueError(f"Trace {trace.id} carries no mastercorr scan metadata")
    return trace.stats[SCAN_KEY]


def strip_scan_metadata(trace):
    """Remove scan metadata, which is meaningless on a sliced segment."""
    if has_scan_metadata(trace):
        del trace.stats[SCAN_KEY]
    return trace


def flatten_records(records) -> List[Trace]:
    """
    Flatten a trace, a Stream, or nested sequences of them into a list.

    Input order is preserved, row by row for matrix-like nesting.
    """
    if isinstance(records, Trace):
        return [records]
    if isinstance(records, (Stream, list, tuple)):
        flat = []
        for item in records:
            flat.extend(flatten_records(item))
        return flat
    raise TypeError(f"Expected an obspy Trace, got {type(records).__name__}")
