"""
Visualization module.

Turns a computed power analysis into plot data: sampled H0 and
alternative densities and the shaded alpha, beta and power regions.

Public API:
    build_visualization(solution)        - Everything a chart needs
    sample_density(mean, se)             - Evenly sampled Normal density
    sample_area_under_curve(mean, se, a, b) - Density samples over [a, b]
    build_area_sets(solution, h0, ha)    - Alpha, beta and power AreaSets
"""

from powerviz.visualization._common import (
    DistributionPoint,
    DensityCurve,
    AreaRegion,
    AreaSet,
    AreaSets,
    SamplingConfig,
    DEFAULT_SAMPLING,
)
from powerviz.visualization._sampling import sample_density, sample_area_under_curve
from powerviz.visualization._areas import build_area_sets
from powerviz.visualization.solution import Visualization
from powerviz.visualization.solvers import build_visualization

__all__ = [
    "build_visualization",
    "sample_density",
    "sample_area_under_curve",
    "build_area_sets",
    "DistributionPoint",
    "DensityCurve",
    "AreaRegion",
    "AreaSet",
    "AreaSets",
    "SamplingConfig",
    "DEFAULT_SAMPLING",
    "Visualization",
]
