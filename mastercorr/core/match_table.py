"""
Match table produced by ``extract``.

The table is a record of arrays. The trigger, correlation and adjacent
correlation arrays are always index aligned. The identifier lists are not
threshold filtered: with a single input record they hold one entry each,
with several records they hold one entry per unfiltered trigger.
"""

import logging
from dataclasses import dataclass, field
from typing import List

import numpy as np
import pandas as pd
from obspy import UTCDateTime

logger = logging.getLogger(__name__)

ID_FIELDS = ('network', 'station', 'channel', 'location')


@dataclass(eq=False)
class MatchTable:
    trig: np.ndarray = field(default_factory=lambda: np.array([], dtype=np.float64))
    corr_value: np.ndarray = field(default_factory=lambda: np.array([], dtype=np.float64))
    corr_value_adj: np.ndarray = field(default_factory=lambda: np.array([], dtype=np.float64))
    network: List[str] = field(default_factory=list)
    station: List[str] = field(default_factory=list)
    channel: List[str] = field(default_factory=list)
    location: List[str] = field(default_factory=list)

    def __post_init__(self):
        self.trig = np.asarray(self.trig, dtype=np.float64)
        self.corr_value = np.asarray(self.corr_value, dtype=np.float64)
        self.corr_value_adj = np.asarray(self.corr_value_adj, dtype=np.float64)

    def __len__(self):
        return len(self.trig)

    def filtered(self, threshold):
        """Return a copy keeping triggers with ``corr_value >= threshold``.

        Identifier lists are carried over unchanged.
        """
        keep = np.flatnonzero(self.corr_value >= threshold)
        return MatchTable(
            trig=self.trig[keep],
            corr_value=self.corr_value[keep],
            corr_value_adj=self.corr_value_adj[keep],
            network=list(self.network),
            station=list(self.station),
            channel=list(self.channel),
            location=list(self.location),
        )

    def trigger_times(self):
        return [UTCDateTime(t) for t in self.trig]

    def to_dataframe(self):
        """
        Convert to a pandas DataFrame with one row per trigger.

        Identifier columns are broadcast from a single entry or copied when
        they line up with the triggers. Otherwise they cannot be attributed
        to rows and are left out.
        """
        df = pd.DataFrame({
            'trig': self.trig,
            'time': [str(t) for t in self.trigger_times()],
            'corr_value': self.corr_value,
            'corr_value_adj': self.corr_value_adj,
        })
        for name in ID_FIELDS:
            values = getattr(self, name)
            if len(values) == len(df):
                df[name] = list(values)
            elif len(values) == 1:
                df[name] = values[0]
            elif len(values) > 0:
                logger.warning(f"{name}: {len(values)} entries do not line up with "
                               f"{len(df)} triggers; column omitted")
        return df

    @classmethod
    def from_dataframe(cls, df):
        ids = {}
        for name in ID_FIELDS:
            if name in df.columns:
                ids[name] = ['' if pd.isna(v) else str(v) for v in df[name]]
        return cls(
            trig=df['trig'].to_numpy(dtype=np.float64),
            corr_value=df['corr_value'].to_numpy(dtype=np.float64),
            corr_value_adj=df['corr_value_adj'].to_numpy(dtype=np.float64),
            **ids,
        )
