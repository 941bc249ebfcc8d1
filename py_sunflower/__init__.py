"""Sunflower and ring-lattice point arrangements."""

__version__ = "0.1.0"
