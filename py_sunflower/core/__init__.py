"""
Core point generation, statistics and rendering functionality.
"""

from .point_generator import GenMode, GenerationParameters, generate_points, generate_sunflower_points, generate_lattice_points
from .point_stats import PointStats, compute_point_stats, nearest_neighbor_distances
from .renderer import StyleParameters, Drawing, Circle, Line, render_dot_arrangement
from .markup_exporter import export_svg_markup

__all__ = ['GenMode', 'GenerationParameters', 'generate_points', 'generate_sunflower_points',
           'generate_lattice_points', 'PointStats', 'compute_point_stats', 'nearest_neighbor_distances',
           'StyleParameters', 'Drawing', 'Circle', 'Line', 'render_dot_arrangement', 'export_svg_markup']
