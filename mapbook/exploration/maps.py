import logging
from pathlib import Path

import pandas as pd
import matplotlib as mpl
import matplotlib.pyplot as plt
import matplotlib.ticker as ticker
from matplotlib import colors as mcolors
from matplotlib.patches import Rectangle
import seaborn as sns
import contextily as ctx

from mapbook.config import Config
from mapbook.constants import PALETTES
from mapbook.models.shape import compute_breaks, recommend_binning
from mapbook.utils.formatting import with_commas

logger = logging.getLogger(__name__)

# Set global formatting: No scientific notation
mpl.rcParams['axes.formatter.useoffset'] = False
mpl.rcParams['axes.formatter.limits'] = [-20, 20]

DEFAULT_SCHEMES = ["okabe_ito", "tableau", "heat", "ocean", "red_blue", "viridis", "YlOrRd", "RdYlBu_r"]


def _save_plot(filename: str, output_dir=None, fig=None):
    """Internal helper to standardize how plots are saved."""
    if not filename:
        return None
    if not filename.endswith(('.png', '.jpg', '.pdf', '.svg')):
        filename += '.png'

    if output_dir:
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
    else:
        Config.initialize_folders()
        output_dir = Config.OUTPUT_DIR_FIGURES

    save_path = output_dir / filename
    fig = fig or plt.gcf()
    fig.tight_layout()
    fig.savefig(save_path, dpi=Config.FIGURE_DPI, bbox_inches='tight')
    logger.info(f"Plot saved to {save_path}")
    return save_path


def _resolve_colors(colors, n_colors=None):
    """A palette name (book palette, seaborn or matplotlib) or an explicit list of colours."""
    if isinstance(colors, str):
        if colors in PALETTES:
            colors = PALETTES[colors]
            return colors[:n_colors] if n_colors else list(colors)
        return [mcolors.to_hex(c) for c in sns.color_palette(colors, n_colors)]
    return [mcolors.to_hex(c) for c in colors]


def plot_palette(colors, title=None, ax=None, show_hex=True):
    """Draws one row of colour swatches."""
    hex_colors = _resolve_colors(colors)
    if ax is None:
        _, ax = plt.subplots(figsize=(max(len(hex_colors), 2) * 0.9, 1.2))

    for i, color in enumerate(hex_colors):
        ax.add_patch(Rectangle((i, 0), 1, 1, facecolor=color, edgecolor='white'))
        if show_hex:
            # Dark text on light swatches
            r, g, b = mcolors.to_rgb(color)
            text_color = 'black' if (0.299 * r + 0.587 * g + 0.114 * b) > 0.5 else 'white'
            ax.text(i + 0.5, 0.5, color.upper(), ha='center', va='center',
                    fontsize=6, color=text_color)

    ax.set_xlim(0, len(hex_colors))
    ax.set_ylim(0, 1)
    ax.axis('off')
    if title is None and isinstance(colors, str):
        title = colors
    if title:
        ax.set_title(title, loc='left', fontsize=10, fontweight='bold')
    return ax


def plot_color_schemes(schemes=None, n_colors=7, filename=None, output_dir=None):
    """One swatch row per named scheme, to compare candidates for a map."""
    schemes = schemes or DEFAULT_SCHEMES
    fig, axes = plt.subplots(len(schemes), 1, figsize=(8, 0.9 * len(schemes)), squeeze=False)

    for ax, name in zip(axes[:, 0], schemes):
        plot_palette(_resolve_colors(name, n_colors), title=name, ax=ax, show_hex=False)

    _save_plot(filename, output_dir, fig)
    return fig


def plot_distribution(values, scheme=None, k=5, filename=None, output_dir=None):
    """Histogram of a mapped variable with the class breaks the scheme would draw."""
    series = pd.Series(values, dtype="float64").dropna()
    scheme = scheme or recommend_binning(series)
    breaks = compute_breaks(series, scheme=scheme, k=k)

    fig, ax = plt.subplots(figsize=(10, 6))
    sns.set_style("whitegrid")
    sns.histplot(series, bins=min(30, max(len(series) // 2, 5)), color='#4E79A7', ax=ax)

    for b in breaks[:-1]:
        ax.axvline(b, color='#E15759', linestyle='--', linewidth=1)

    ax.set_title(f"Distribution with {scheme} breaks (k={len(breaks)})", fontsize=14, fontweight='bold')
    ax.set_xlabel(series.name or "Value")
    ax.set_ylabel("Count")
    ax.yaxis.set_major_formatter(ticker.FuncFormatter(lambda y, _: with_commas(y)))

    _save_plot(filename, output_dir, fig)
    return fig


def plot_choropleth(gdf, column, scheme=None, k=5, cmap="YlOrRd", basemap=False,
                    filename=None, output_dir=None):
    """
    Classed choropleth of `column`. Without a scheme, the one recommended for the
    column's distribution is used.
    """
    if column not in gdf.columns:
        raise KeyError(f"Column not found in GeoDataFrame: {column!r}")

    scheme = scheme or recommend_binning(gdf[column])
    k = min(k, int(gdf[column].nunique()))

    fig, ax = plt.subplots(figsize=(12, 12))
    gdf.plot(column=column, scheme=scheme, k=k, cmap=cmap, legend=True,
             edgecolor='white', linewidth=0.3, ax=ax,
             legend_kwds={'loc': 'lower right', 'fmt': '{:,.0f}'})
    ax.set_title(f"{column} ({scheme}, k={k})", fontsize=16, fontweight='bold', loc='left')
    ax.set_axis_off()

    if basemap:
        try:
            ctx.add_basemap(ax, crs=gdf.crs.to_string(), source=ctx.providers.CartoDB.Positron, alpha=0.6)
        except Exception as e:
            logger.warning(f"Could not add basemap: {e}")

    _save_plot(filename, output_dir, fig)
    return fig, ax
