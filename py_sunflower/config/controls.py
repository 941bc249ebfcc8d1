"""
Control surface configuration.

ControlSettings is one snapshot of the control panel. Its bounds are the
panel's slider ranges; anything outside them is rejected here so the
generator and statistics never see it.
"""

import math
from typing import Dict, NamedTuple

from pydantic import BaseModel, Field, field_validator

from ..core.point_generator import MODE_ALIASES, GenMode, GenerationParameters


class ControlRange(NamedTuple):
    """Slider range for a numeric control."""
    minimum: float
    maximum: float
    step: float
    default: float


CONTROL_RANGES: Dict[str, ControlRange] = {
    "n": ControlRange(1, 2000, 1, 50),
    "alpha": ControlRange(0, 3, 0.01, 2),
    "layers": ControlRange(1, 42, 1, 5),
    "n_per_layer": ControlRange(0, 20, 0.1, 6),
    "size": ControlRange(10, 1000, 1, 500),
    "radius": ControlRange(0, 100, 0.1, 4.5),
    "twist": ControlRange(0, 0.5, 0.01, 0),
}

TOGGLES = ("svg", "center", "crosshair", "adjust_size_to_fit_radius")


def clamp_control(name: str, value: float) -> float:
    """
    Clamp a value into the named control's range and snap it to the step grid.

    Raises:
        KeyError: If ``name`` is not a numeric control
    """
    spec = CONTROL_RANGES[name]
    value = min(max(value, spec.minimum), spec.maximum)
    steps = round((value - spec.minimum) / spec.step)
    snapped = spec.minimum + steps * spec.step
    # Keep as many decimals as the step has
    decimals = max(0, -math.floor(math.log10(spec.step)))
    snapped = round(min(snapped, spec.maximum), decimals)
    if float(spec.step).is_integer():
        return int(snapped)
    return snapped


class ControlSettings(BaseModel):
    """Configuration snapshot supplied by the control panel."""

    mode: GenMode = Field(default=GenMode.SUNFLOWER, description="Generation mode")
    n: int = Field(default=50, ge=1, le=2000, description="Number of points")
    alpha: float = Field(default=2.0, ge=0, le=3, description="Boundary smoothness")
    layers: int = Field(default=5, ge=1, le=42, description="Ring count for lattice mode")
    n_per_layer: float = Field(
        default=6.0, ge=0, le=20, alias="nPerLayer", description="Ring density growth"
    )
    size: float = Field(default=500.0, ge=10, le=1000, description="Canvas size")
    radius: float = Field(default=4.5, ge=0, le=100, description="Dot radius")
    twist: float = Field(default=0.0, ge=0, le=0.5, description="Per-ring rotation factor")
    svg: bool = Field(default=False, description="Export markup instead of drawing")
    center: bool = Field(default=False, description="Draw center markers")
    crosshair: bool = Field(default=False, description="Draw crosshairs")
    adjust_size_to_fit_radius: bool = Field(
        default=False,
        alias="adjustSizeToFitRadius",
        description="Shrink the generation circle so boundary dots are not clipped",
    )

    class Config:
        populate_by_name = True
        frozen = True

    @field_validator("mode", mode="before")
    @classmethod
    def resolve_mode_alias(cls, value):
        if isinstance(value, str):
            return MODE_ALIASES.get(value, value)
        return value

    @property
    def generation_size(self) -> float:
        """Diameter handed to the generator."""
        if self.adjust_size_to_fit_radius:
            return self.size - self.radius * 2
        return self.size

    def to_generation_parameters(self) -> GenerationParameters:
        return GenerationParameters(
            n=self.n,
            alpha=self.alpha,
            mode=self.mode,
            size=self.generation_size,
            layers=self.layers,
            n_per_layer=self.n_per_layer,
            twist=self.twist,
        )
