import os

from obspy import UTCDateTime

from mastercorr.core.match_table import MatchTable
from mastercorr.visualization import plot_match_stats


def test_plot_match_stats(tmp_path):
    t0 = UTCDateTime(2020, 1, 1).timestamp
    table = MatchTable(trig=[t0, t0 + 30, t0 + 3600, t0 + 7200],
                       corr_value=[0.9, 0.85, 0.7, 0.95],
                       corr_value_adj=[0.2, 0.8, 0.1, 0.3])
    outfile = plot_match_stats(table, outfile=str(tmp_path / 'plots' / 'stats.png'))
    assert os.path.exists(outfile)


def test_plot_empty_table(tmp_path):
    outfile = plot_match_stats(MatchTable(), outfile=str(tmp_path / 'empty.png'))
    assert os.path.exists(outfile)


def test_file_output_backend():
    import matplotlib
    assert matplotlib.get_backend().lower() == 'agg'
