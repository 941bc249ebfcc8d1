"""Matplotlib rendering of drawings for interactive display."""

import matplotlib.pyplot as plt
from matplotlib import patches
from matplotlib.lines import Line2D

from .renderer import Circle, Drawing, Line


def _circle_patch(shape: Circle, offset: float) -> patches.Circle:
    # SVG circles without a fill attribute are filled black
    fill = shape.fill if shape.fill is not None else "black"
    return patches.Circle(
        (shape.cx + offset, shape.cy + offset),
        shape.r,
        facecolor=fill,
        edgecolor=shape.stroke if shape.stroke is not None else "none",
        linewidth=1.0,
    )


def _line_artist(shape: Line, offset: float) -> Line2D:
    return Line2D(
        [shape.x1 + offset, shape.x2 + offset],
        [shape.y1 + offset, shape.y2 + offset],
        color=shape.stroke,
        linewidth=1.0,
    )


def plot_drawing(drawing: Drawing, ax=None):
    """
    Draw a Drawing onto a matplotlib Axes.

    The axes are set up like the SVG canvas: square, ``size`` units wide, with
    the y axis pointing down. Existing artists on ``ax`` are cleared.

    Args:
        drawing: Rendered drawing
        ax: Target axes; a new figure is created when omitted

    Returns:
        The axes that were drawn on
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(6, 6))

    ax.clear()
    offset = drawing.offset

    for zorder, shape in enumerate(drawing.elements):
        if isinstance(shape, Circle):
            artist = _circle_patch(shape, offset)
            artist.set_zorder(zorder)
            ax.add_patch(artist)
        else:
            artist = _line_artist(shape, offset)
            artist.set_zorder(zorder)
            ax.add_line(artist)

    ax.set_xlim(0, drawing.size)
    ax.set_ylim(drawing.size, 0)
    ax.set_aspect("equal")
    ax.set_xticks([])
    ax.set_yticks([])
    return ax
