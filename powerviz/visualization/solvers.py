"""
Entry point for plot data.

build_visualization() samples the H0 and alternative densities of a
computed test and derives the shaded alpha, beta and power areas.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from powerviz.core.exceptions import ValidationError
from powerviz.visualization._common import SamplingConfig, DEFAULT_SAMPLING
from powerviz.visualization._sampling import sample_density
from powerviz.visualization._areas import build_area_sets
from powerviz.visualization.solution import Visualization

if TYPE_CHECKING:
    from powerviz.power.solution import PowerSolution


def build_visualization(
    solution: PowerSolution,
    *,
    sampling: SamplingConfig | None = None,
) -> Visualization:
    """
    Plot data for a computed power analysis.

    Parameters
    ----------
    solution : PowerSolution
        Result of compute(). Must be successful.
    sampling : SamplingConfig or None
        Resolution and layout constants; DEFAULT_SAMPLING if None.

    Returns
    -------
    Visualization
        H0 and alternative density curves plus alpha, beta and power areas.

    Raises
    ------
    ValidationError
        If `solution` is a failed computation. Use Visualization.empty()
        in that case.

    Examples
    --------
    >>> solution = compute(test_family="mean", h0_value=100, actual_param=105,
    ...                    sample_size=30, std_dev=15, alpha=0.05)
    >>> viz = build_visualization(solution)
    >>> viz.alpha_area.kind
    'two'
    """
    if not solution.ok:
        raise ValidationError(
            f"cannot visualize a failed computation [{solution.error.kind}]: "
            f"{solution.error.message}"
        )
    cfg = DEFAULT_SAMPLING if sampling is None else sampling
    d = solution.design

    h0_points = sample_density(
        d.h0_value, solution.standard_error_h0,
        cfg.density_points, cfg.range_multiplier,
        spike_epsilon=cfg.spike_epsilon, spike_height=cfg.spike_height,
    )
    ha_points = sample_density(
        d.actual_param, solution.standard_error_ha,
        cfg.density_points, cfg.range_multiplier,
        spike_epsilon=cfg.spike_epsilon, spike_height=cfg.spike_height,
    )
    areas = build_area_sets(solution, h0_points, ha_points, sampling=cfg)

    return Visualization(
        h0_points=h0_points,
        ha_points=ha_points,
        alpha_area=areas.alpha,
        beta_area=areas.beta,
        power_area=areas.power,
        h0_value=d.h0_value,
        actual_param=d.actual_param,
        critical_value_1=solution.critical_value_1,
        critical_value_2=solution.critical_value_2,
        sampling=cfg,
    )
