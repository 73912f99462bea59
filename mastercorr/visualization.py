"""
Summary plots for master correlation matches.

``plot_match_stats`` shows three panels:
- correlation value of each match through time
- time to the previous match, which exposes events picked more than once
  through cycle skipping
- adjacent peak correlation against peak correlation
"""

import os

import numpy as np
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import matplotlib.dates as mdates


def plot_match_stats(table, outfile=None, title=None):
    """
    Plot summary statistics of a MatchTable.

    Parameters
    ----------
    table : MatchTable
        Output of ``extract``
    outfile : str, optional
        If given the figure is saved there and closed
    title : str, optional
        Figure title

    Returns
    -------
    outfile or fig : str or matplotlib.figure.Figure
    """
    times = [t.datetime for t in table.trigger_times()]

    fig, axes = plt.subplots(3, 1, figsize=(10, 10))
    ax_corr, ax_spacing, ax_adj = axes

    ax_corr.plot(times, table.corr_value, 'k.', markersize=4)
    ax_corr.set_ylabel('Correlation')
    ax_corr.set_ylim(-1.05, 1.05)
    ax_corr.xaxis.set_major_formatter(mdates.DateFormatter('%Y-%m-%d\n%H:%M'))

    if len(table) > 1:
        spacing_hours = np.diff(table.trig) / 3600.0
        # zero spacing cannot be shown on a log axis
        spacing_hours = np.where(spacing_hours > 0, spacing_hours, np.nan)
        ax_spacing.plot(times[1:], spacing_hours, 'b.', markersize=4)
        ax_spacing.set_yscale('log')
    ax_spacing.set_ylabel('Time since previous match (h)')
    ax_spacing.xaxis.set_major_formatter(mdates.DateFormatter('%Y-%m-%d\n%H:%M'))

    ax_adj.plot(table.corr_value, table.corr_value_adj, 'r.', markersize=4)
    ax_adj.plot([-1, 1], [-1, 1], color='0.6', linewidth=0.8)
    ax_adj.set_xlabel('Peak correlation')
    ax_adj.set_ylabel('Adjacent peak correlation')

    fig.suptitle(title or f'{len(table)} matches')
    fig.tight_layout()

    if outfile is None:
        return fig

    out_dir = os.path.dirname(outfile)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    fig.savefig(outfile, dpi=100)
    plt.close(fig)
    return outfile
