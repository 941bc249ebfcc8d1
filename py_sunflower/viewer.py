"""
Interactive control panel built from matplotlib widgets.

Sliders, radio buttons and check boxes stand in for the live control panel.
Every widget change takes a fresh ControlSettings snapshot and rebuilds the
whole scene; nothing is updated incrementally.
"""

import textwrap
from typing import Dict

import matplotlib.pyplot as plt
import structlog
from matplotlib.widgets import CheckButtons, RadioButtons, Slider

from .config import settings
from .config.controls import CONTROL_RANGES, ControlSettings, clamp_control
from .core.plotting import plot_drawing
from .core.point_generator import GenMode
from .scene import ATTRIBUTION_TEXT, ATTRIBUTION_URL, Scene, build_scene, format_stats

logger = structlog.get_logger()

SLIDER_LABELS = {
    "n": "n",
    "alpha": "alpha",
    "layers": "layers",
    "n_per_layer": "nPerLayer",
    "size": "size",
    "radius": "radius",
    "twist": "twist",
}

TOGGLE_LABELS = {
    "svg": "svg",
    "center": "center",
    "crosshair": "crosshair",
    "adjust_size_to_fit_radius": "adjustSizeToFitRadius",
}

MARKUP_PREVIEW_CHARS = 3000


class ControlPanelViewer:
    """Figure with the arrangement on the left and its controls below and right."""

    def __init__(self, controls: ControlSettings = None, stats_method: str = "auto", figure=None):
        controls = controls or ControlSettings()
        self.stats_method = stats_method
        self.scene: Scene = None

        self.figure = figure or plt.figure(
            figsize=(settings.figure_size, settings.figure_size), dpi=settings.figure_dpi
        )
        self.ax = self.figure.add_axes([0.04, 0.36, 0.58, 0.6])
        self.stats_text = self.figure.text(0.66, 0.62, "", family="monospace", fontsize=8, va="top")
        self.figure.text(0.66, 0.36, f"{ATTRIBUTION_TEXT}\n{ATTRIBUTION_URL}", fontsize=7, color="blue")

        self.sliders: Dict[str, Slider] = {}
        for row, (field, label) in enumerate(SLIDER_LABELS.items()):
            spec = CONTROL_RANGES[field]
            slider_ax = self.figure.add_axes([0.15, 0.29 - row * 0.04, 0.45, 0.025])
            slider = Slider(
                slider_ax,
                label,
                spec.minimum,
                spec.maximum,
                valinit=getattr(controls, field),
                valstep=spec.step,
            )
            slider.on_changed(self.refresh)
            self.sliders[field] = slider

        modes = [mode.value for mode in GenMode]
        mode_ax = self.figure.add_axes([0.68, 0.74, 0.28, 0.14])
        self.mode_buttons = RadioButtons(mode_ax, modes, active=modes.index(controls.mode.value))
        self.mode_buttons.on_clicked(self.refresh)

        toggle_ax = self.figure.add_axes([0.68, 0.05, 0.28, 0.2])
        self.toggle_buttons = CheckButtons(
            toggle_ax,
            list(TOGGLE_LABELS.values()),
            [getattr(controls, field) for field in TOGGLE_LABELS],
        )
        self.toggle_buttons.on_clicked(self.refresh)

        self.refresh()

    def snapshot(self) -> ControlSettings:
        """Read the current widget state into a control snapshot."""
        values = {
            field: clamp_control(field, slider.val)
            for field, slider in self.sliders.items()
        }
        values["mode"] = self.mode_buttons.value_selected
        for field, active in zip(TOGGLE_LABELS, self.toggle_buttons.get_status()):
            values[field] = active
        return ControlSettings(**values)

    def refresh(self, _event=None) -> Scene:
        """Rebuild the scene from the widgets and redraw it."""
        scene = build_scene(self.snapshot(), stats_method=self.stats_method)

        if scene.markup is not None:
            self.ax.clear()
            self.ax.set_axis_off()
            preview = scene.markup[:MARKUP_PREVIEW_CHARS]
            self.ax.text(
                0, 1, textwrap.fill(preview, 90),
                family="monospace", fontsize=5, va="top", transform=self.ax.transAxes,
            )
        else:
            plot_drawing(scene.drawing, self.ax)

        # Stats and drawing come from the same scene
        self.stats_text.set_text(format_stats(scene.stats))
        self.scene = scene
        self.figure.canvas.draw_idle()
        return scene


def run_viewer(controls: ControlSettings = None, stats_method: str = "auto") -> ControlPanelViewer:
    """Open the viewer window and block until it is closed."""
    viewer = ControlPanelViewer(controls, stats_method=stats_method)
    logger.info("Viewer opened", mode=viewer.scene.controls.mode.value)
    plt.show()
    return viewer
