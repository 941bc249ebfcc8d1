"""Tests for matplotlib rendering."""

import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
import pytest
from py_sunflower.core.plotting import plot_drawing
from py_sunflower.core.renderer import StyleParameters, render_dot_arrangement


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


class TestPlotDrawing:
    """Test drawing onto matplotlib axes."""

    def test_artist_counts(self):
        """Test that every circle and line becomes an artist."""
        points = np.array([[0.0, 0.0], [5.0, 5.0], [-5.0, 2.5]])
        drawing = render_dot_arrangement(points, 2, 40, StyleParameters(crosshair=True))

        ax = plot_drawing(drawing)
        assert len(ax.patches) == 3
        assert len(ax.lines) == 6

    def test_canvas_orientation(self):
        """Test that the axes match the SVG canvas with y pointing down."""
        drawing = render_dot_arrangement(np.array([[1.0, 2.0]]), 2, 40)
        ax = plot_drawing(drawing)

        assert ax.get_xlim() == (0, 40)
        assert ax.get_ylim() == (40, 0)
        # Translated to the canvas center
        assert tuple(ax.patches[0].center) == (21.0, 22.0)

    def test_redraw_clears(self):
        """Test that drawing twice on the same axes does not accumulate artists."""
        drawing = render_dot_arrangement(np.array([[1.0, 2.0], [3.0, 4.0]]), 2, 40)
        _, ax = plt.subplots()
        plot_drawing(drawing, ax)
        plot_drawing(drawing, ax)
        assert len(ax.patches) == 2
