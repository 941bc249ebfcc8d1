#!/usr/bin/env python3
"""
Simple demo script comparing the generation modes.
"""

import numpy as np
from py_sunflower.core import GenerationParameters, GenMode, generate_points, compute_point_stats
from py_sunflower.logging_config import configure_logging


def main():
    """Print packing statistics for each mode."""
    configure_logging()

    print("Py-Sunflower Arrangement Demo")
    print("=" * 40)

    size = 500
    for mode in GenMode:
        params = GenerationParameters(n=300, alpha=2, mode=mode, size=size, layers=10, n_per_layer=6)
        points = generate_points(params)
        stats = compute_point_stats(points, size)

        radii = np.hypot(points[:, 0], points[:, 1])

        print(f"\n{mode.value.upper()}:")
        print("-" * 30)
        print(f"  Points: {len(points)}")
        print(f"  Max radius: {radii.max():.2f} (boundary at {size / 2})")
        print(f"  Nearest neighbor min/avg/max: "
              f"{stats.minimum:.4f} / {stats.average:.4f} / {stats.maximum:.4f}")
        print(f"  Max deviation from average: {stats.max_diff_from_average_norm:.1%}")


if __name__ == "__main__":
    main()
