import os
from matplotlib.ticker import StrMethodFormatter
import matplotlib.pyplot as plt

# Run-length histograms are only drawn below this many bins
MAX_RUN_LENGTH_BINS = 2000

def bin_colors(counts):
    """Empty bins are transparent, small ones grey and the rest steelblue."""
    return ['none' if count == 0 else 'lightgray' if count < 1000 else 'steelblue'
            for count in counts]

def plot_frequency_map(freq, title="", y_max=20000, ax=None):
    """
    Draws a frequency map as a bar chart, one bar per symbol of the domain.

    freq: FrequencyMap, it is only read
    y_max: upper limit of the y axis, None to fit the largest count
    ax: matplotlib axes to draw into, a new figure is created if omitted

    returns
        fig: the matplotlib figure
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(9.28, 5.0))
    else:
        fig = ax.figure

    symbols = freq.symbols
    counts = freq.counts
    ax.bar(symbols, counts, width=0.9, color=bin_colors(counts))

    top = y_max if y_max is not None else max(int(counts.max()) if len(counts) else 1, 1)
    ax.set_ylim(0, top)
    ax.set_xticks(symbols[::16])
    ax.tick_params(axis='x', labelrotation=90)
    ax.yaxis.set_major_formatter(StrMethodFormatter('{x:,.0f}'))
    ax.set_xlabel("Value")
    ax.set_ylabel("Count")
    ax.set_title(title)
    fig.tight_layout()
    return fig

def save_histograms(report, directory, y_max=20000):
    """
    Writes one PNG per channel and frequency map of a CompressionReport.

    returns
        paths: list of written file paths
    """
    os.makedirs(directory, exist_ok=True)
    paths = []
    for channel in report.channels:
        for key, freq in channel.maps.items():
            if len(freq) == 0:
                continue
            if key == "run_lengths" and len(freq) >= MAX_RUN_LENGTH_BINS:
                continue
            fig = plot_frequency_map(freq, title=f"{channel.name}: {key}", y_max=y_max)
            path = os.path.join(directory, f"{channel.name}_{key}.png")
            fig.savefig(path)
            plt.close(fig)
            paths.append(path)
    return paths
