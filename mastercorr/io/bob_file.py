"""
Blank BOB files.

A BOB file is a headerless run of float32 samples, the raw format used for
RSAM archives. A blank file is written once as a placeholder and filled in
place by other tools.
"""

import logging
import math
import os

import numpy as np

from ..config import DEFAULT_SAMPLES_PER_DAY

logger = logging.getLogger(__name__)

SAMPLE_DTYPE = np.float32


def _sample_count(days, samples_per_day):
    for name, value in (('days', days), ('samples_per_day', samples_per_day)):
        if not math.isfinite(value):
            raise ValueError(f"{name} must be finite, got {value}")
    count = int(round(days)) * int(round(samples_per_day))
    if count < 0:
        raise ValueError(f"Negative sample count from days={days}, "
                         f"samples_per_day={samples_per_day}")
    return count


def expected_size(days, samples_per_day=DEFAULT_SAMPLES_PER_DAY):
    """Size in bytes of a blank file for the given duration."""
    return _sample_count(days, samples_per_day) * np.dtype(SAMPLE_DTYPE).itemsize


def allocate_blank_series(path, days, samples_per_day=DEFAULT_SAMPLES_PER_DAY):
    """
    Write a zero-filled float32 time series file.

    Parameters
    ----------
    path : str
        Output file. Its directory is created if missing and an existing
        file is overwritten.
    days : float
        Duration in days, rounded to the nearest integer
    samples_per_day : float
        Sample rate in samples per day, rounded to the nearest integer

    Returns
    -------
    n_samples : int
        Number of samples written
    """
    n_samples = _sample_count(days, samples_per_day)

    out_dir = os.path.dirname(path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)

    np.zeros(n_samples, dtype=SAMPLE_DTYPE).tofile(path)
    logger.info(f"Wrote blank series of {n_samples} samples to {path}")
    return n_samples


def read_blank_series(path):
    """Read a BOB file back as a float32 array."""
    return np.fromfile(path, dtype=SAMPLE_DTYPE)
