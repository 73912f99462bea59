"""
CSV storage for match tables.
"""

import logging
import os

import pandas as pd

from ..core.match_table import MatchTable

logger = logging.getLogger(__name__)


def write_match_table(table, path):
    """
    Save a MatchTable as CSV, one row per trigger.

    Parameters
    ----------
    table : MatchTable
        Table to save
    path : str
        Output CSV path; its directory is created if missing

    Returns
    -------
    path : str
    """
    out_dir = os.path.dirname(path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)

    df = table.to_dataframe()
    df.to_csv(path, index=False, float_format='%.6f')
    logger.info(f"Saved {len(df)} matches to {path}")
    return path


def read_match_table(path):
    """
    Load a CSV written by ``write_match_table``.

    Empty fields and SEED codes such as ``NA`` are read as strings.

    Notes
    -----
    The CSV holds one row per trigger, so a single identifier that
    ``to_dataframe`` broadcast across rows comes back as one entry per
    trigger. The one-entry identifier lists of a single-record table are
    not restored.
    """
    df = pd.read_csv(path, keep_default_na=False,
                     dtype={'network': str, 'station': str,
                            'channel': str, 'location': str})
    return MatchTable.from_dataframe(df)
