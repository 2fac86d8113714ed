"""
Power analysis module.

Type I / Type II error and power of one-sample z-tests under the Normal
approximation.

Public API:
    compute(...)                      - Critical values, beta and power
    PowerDesign.for_mean_test(...)    - Validated mean-test parameters
    PowerDesign.for_proportion_test() - Validated proportion-test parameters
    alpha_from_confidence_level(pct)  - 95 -> 0.05
"""

from powerviz.power.solvers import compute
from powerviz.power.design import PowerDesign, alpha_from_confidence_level
from powerviz.power._common import PowerParams, PowerError
from powerviz.power.solution import PowerSolution

__all__ = [
    "compute",
    "alpha_from_confidence_level",
    "PowerDesign",
    "PowerParams",
    "PowerError",
    "PowerSolution",
]
