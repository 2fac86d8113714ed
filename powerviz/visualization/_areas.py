"""
Shaded alpha, beta and power regions.

alpha: H0 density over the rejection region.
beta:  alternative density over the acceptance region.
power: alternative density over the rejection region.

Two-sided tests have a rejection region made of two tails, so alpha and
power come back as AreaSet.two(left, right); everything else is a single
region.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from powerviz.core.exceptions import ValidationError
from powerviz.visualization._common import (
    AreaSet,
    AreaSets,
    DensityCurve,
    SamplingConfig,
    DEFAULT_SAMPLING,
)
from powerviz.visualization._sampling import sample_area_under_curve

if TYPE_CHECKING:
    from powerviz.power.solution import PowerSolution


def plot_range(
    solution: PowerSolution,
    h0_curve: DensityCurve,
    ha_curve: DensityCurve,
    plot_extent: float = DEFAULT_SAMPLING.plot_extent,
) -> tuple[float, float]:
    """
    Shading range covering both distributions.

    Union of h0 +/- plot_extent * se_h0, actual +/- plot_extent * se_ha
    (when se_ha > 0) and the x-extent of both sampled curves.
    """
    d = solution.design
    se_h0 = solution.standard_error_h0
    se_ha = solution.standard_error_ha

    lo = d.h0_value - plot_extent * se_h0
    hi = d.h0_value + plot_extent * se_h0
    if se_ha > 0.0:
        lo = min(lo, d.actual_param - plot_extent * se_ha)
        hi = max(hi, d.actual_param + plot_extent * se_ha)
    for curve in (h0_curve, ha_curve):
        if not curve.is_empty:
            lo = min(lo, curve.x_min)
            hi = max(hi, curve.x_max)
    return lo, hi


def build_area_sets(
    solution: PowerSolution,
    h0_curve: DensityCurve,
    ha_curve: DensityCurve,
    *,
    sampling: SamplingConfig | None = None,
) -> AreaSets:
    """
    Build the alpha, beta and power areas for a computed test.

    Parameters
    ----------
    solution : PowerSolution
        A successful engine result (carries the design).
    h0_curve, ha_curve : DensityCurve
        The sampled H0 and alternative densities; only their x-extent is
        used, to make sure the shading reaches the ends of the curves.
    sampling : SamplingConfig or None
        Resolution and extent; DEFAULT_SAMPLING if None.

    Returns
    -------
    AreaSets
        Regions whose bounds collapse are empty rather than an error.

    Raises
    ------
    ValidationError
        If `solution` is a failed computation.
    """
    if not solution.ok:
        raise ValidationError(
            f"cannot build areas for a failed computation: {solution.error.message}"
        )
    cfg = DEFAULT_SAMPLING if sampling is None else sampling
    d = solution.design

    lo, hi = plot_range(solution, h0_curve, ha_curve, cfg.plot_extent)
    cv1 = solution.critical_value_1
    cv2 = solution.critical_value_2

    def under_h0(x_min: float, x_max: float):
        return sample_area_under_curve(
            d.h0_value, solution.standard_error_h0, x_min, x_max, cfg.area_points
        )

    def under_ha(x_min: float, x_max: float):
        return sample_area_under_curve(
            d.actual_param, solution.standard_error_ha, x_min, x_max, cfg.area_points
        )

    if d.alternative == "two.sided":
        alpha = AreaSet.two(under_h0(lo, cv1), under_h0(cv2, hi))
        beta = AreaSet.one(under_ha(cv1, cv2))
        power = AreaSet.two(under_ha(lo, cv1), under_ha(cv2, hi))
    elif d.alternative == "greater":
        alpha = AreaSet.one(under_h0(cv1, hi))
        beta = AreaSet.one(under_ha(lo, cv1))
        power = AreaSet.one(under_ha(cv1, hi))
    else:
        alpha = AreaSet.one(under_h0(lo, cv1))
        beta = AreaSet.one(under_ha(cv1, hi))
        power = AreaSet.one(under_ha(lo, cv1))

    return AreaSets(alpha=alpha, beta=beta, power=power)
