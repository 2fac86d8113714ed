"""
powerviz: Type I / Type II error and power explorer engine.

Computes critical values, beta and power for one-sample mean and
proportion z-tests, and the plot data (density curves and shaded
alpha / beta / power regions) for an interactive visualizer.

Submodules:
    power: compute() and PowerDesign
    visualization: build_visualization() and curve sampling
"""

__version__ = "0.1.0"

from powerviz import power
from powerviz import visualization
from powerviz.power import compute, PowerDesign, PowerSolution
from powerviz.visualization import build_visualization, Visualization

__all__ = [
    "__version__",
    "power",
    "visualization",
    "compute",
    "build_visualization",
    "PowerDesign",
    "PowerSolution",
    "Visualization",
]
