"""
Extraction of master correlation matches.

Intended to run after a master correlation scan has attached its results
to each trace (see ``mastercorr.core.records``). ``extract`` collects the
triggers into a ``MatchTable`` and can also cut a segment of waveform around
every trigger for downstream correlation work.

Passing many traces (for example a day split into hourly traces) gives a
single table and a single segment collection. Mixing channels or master
snippets across the input is allowed but rarely what is wanted. Large inputs
can produce collections of many thousands of segments.
"""

import logging

import numpy as np
from obspy import UTCDateTime

from .match_table import MatchTable
from .records import (
    attach_scan_metadata,
    flatten_records,
    get_scan_metadata,
    strip_scan_metadata,
)
from .segments import SegmentCollection

logger = logging.getLogger(__name__)


def _check_arguments(pre_trig, post_trig, threshold):
    if threshold < -1 or threshold > 1:
        raise ValueError(f"Correlation threshold must be between -1 and 1, got {threshold}")
    if (pre_trig is None) != (post_trig is None):
        raise ValueError("pre_trig and post_trig must be given together")


def gather_matches(traces):
    """
    Concatenate scan results from traces into an unfiltered MatchTable.

    With a single trace the identifier lists hold one entry each. With
    several traces every identifier is repeated once per trigger of its
    trace.
    """
    scans = [get_scan_metadata(tr) for tr in traces]

    if len(traces) == 1:
        tr, scan = traces[0], scans[0]
        return MatchTable(
            trig=scan.triggers.copy(),
            corr_value=scan.corr.copy(),
            corr_value_adj=scan.adjacent_corr.copy(),
            network=[tr.stats.network],
            station=[tr.stats.station],
            channel=[tr.stats.channel],
            location=[tr.stats.location],
        )

    table = MatchTable(
        trig=np.concatenate([s.triggers for s in scans]),
        corr_value=np.concatenate([s.corr for s in scans]),
        corr_value_adj=np.concatenate([s.adjacent_corr for s in scans]),
    )
    for tr, scan in zip(traces, scans):
        n = len(scan)
        table.network.extend([tr.stats.network] * n)
        table.station.extend([tr.stats.station] * n)
        table.channel.extend([tr.stats.channel] * n)
        table.location.extend([tr.stats.location] * n)
    return table


def cut_segments(trace, pre_trig, post_trig, threshold):
    """
    Slice a trace around each of its triggers meeting ``threshold``.

    Returns
    -------
    triggers : ndarray
        Trigger times (epoch seconds) that were kept
    segments : list of obspy.Trace
        One slice per kept trigger spanning
        [trigger + pre_trig, trigger + post_trig], scan metadata removed.
        Each segment owns its samples.
    """
    scan = get_scan_metadata(trace)
    triggers = scan.triggers[scan.passing(threshold)]

    # detach the scan so slicing does not copy it into every segment
    strip_scan_metadata(trace)
    try:
        segments = [
            trace.slice(UTCDateTime(t + pre_trig), UTCDateTime(t + post_trig)).copy()
            for t in triggers
        ]
    finally:
        attach_scan_metadata(trace, scan)
    return triggers, segments


def extract(records, pre_trig=None, post_trig=None, threshold=-1, *,
            with_segments=False, report=None):
    """
    Extract matches to the master waveform from scanned traces.

    Parameters
    ----------
    records : obspy.Trace, obspy.Stream or (nested) list of Trace
        Traces carrying master correlation scan metadata
    pre_trig, post_trig : float, optional
        Segment window in seconds relative to each trigger. Both or neither
        must be given. When omitted, each trace uses the window of its own
        master snippet.
    threshold : float
        Minimum correlation value, between -1 and 1
    with_segments : bool
        Also cut waveform segments around the surviving triggers
    report : callable, optional
        Called with one progress line per trace while cutting segments.
        Defaults to logging at INFO level.

    Returns
    -------
    table : MatchTable
        Triggers meeting the threshold
    segments : SegmentCollection or None
        Segments around the same triggers, or None unless requested
    """
    _check_arguments(pre_trig, post_trig, threshold)
    traces = flatten_records(records)
    if len(traces) == 0:
        raise ValueError("No traces given")

    table = gather_matches(traces).filtered(threshold)

    if not with_segments:
        return table, None

    if report is None:
        report = logger.info
    use_trig_args = pre_trig is not None

    report("Extracting waveforms from:")
    all_triggers = []
    all_segments = []
    for tr in traces:
        if use_trig_args:
            pre, post = float(pre_trig), float(post_trig)
        else:
            pre, post = get_scan_metadata(tr).snippet.window()

        s = tr.stats
        report(f"   {s.network}_{s.station}_{s.channel}_{s.location}   "
               f"{s.starttime} through {s.endtime}   "
               f"(pre/post trigger: {pre:g}, {post:g}s)")

        triggers, segments = cut_segments(tr, pre, post, threshold)
        all_triggers.extend(triggers)
        all_segments.extend(segments)

    if not all_segments:
        return table, SegmentCollection()
    return table, SegmentCollection(all_segments, all_triggers)
