import os

import numpy as np
import pytest

from mastercorr.io.bob_file import allocate_blank_series, expected_size, read_blank_series


def test_blank_series_sample_count(tmp_path):
    out = tmp_path / 'blank.bob'
    n = allocate_blank_series(str(out), 2, 1440)

    assert n == 2 * 1440
    assert os.path.getsize(out) == 2 * 1440 * 4
    data = read_blank_series(str(out))
    assert data.dtype == np.float32
    assert len(data) == 2880
    assert not data.any()


def test_inputs_are_rounded(tmp_path):
    out = tmp_path / 'rounded.bob'
    n = allocate_blank_series(str(out), 2.6, 99.7)
    assert n == 3 * 100
    assert os.path.getsize(out) == expected_size(2.6, 99.7)


def test_missing_directory_is_created(tmp_path):
    out = tmp_path / 'rsam' / '2020' / 'STA.bob'
    allocate_blank_series(str(out), 1, 10)
    assert out.parent.is_dir()
    assert len(read_blank_series(str(out))) == 10


def test_existing_file_is_overwritten(tmp_path):
    out = tmp_path / 'over.bob'
    out.write_bytes(b'\x01' * 1000)
    allocate_blank_series(str(out), 1, 5)
    assert os.path.getsize(out) == 20


def test_zero_days_gives_empty_file(tmp_path):
    out = tmp_path / 'empty.bob'
    assert allocate_blank_series(str(out), 0.2, 1440) == 0
    assert os.path.getsize(out) == 0


@pytest.mark.parametrize('days,spd', [(-1, 1440), (float('nan'), 1440), (1, float('inf'))])
def test_invalid_sizes(tmp_path, days, spd):
    with pytest.raises(ValueError):
        allocate_blank_series(str(tmp_path / 'bad.bob'), days, spd)


def test_unwritable_destination(tmp_path):
    blocker = tmp_path / 'blocker'
    blocker.write_text('not a directory')
    with pytest.raises(OSError):
        allocate_blank_series(str(blocker / 'out.bob'), 1, 10)
