"""
Sampling of Normal densities for plotting.

Both functions are pure and vectorised: the points are an evenly spaced
numpy grid and the density comes from scipy.stats.norm.pdf.
"""

from __future__ import annotations

import math

import numpy as np
from scipy import stats as sp_stats

from powerviz.core.exceptions import ValidationError
from powerviz.core.validation import (
    check_scalar,
    check_finite_scalar,
    check_positive,
    check_positive_integer,
)
from powerviz.visualization._common import (
    DensityCurve,
    AreaRegion,
    DEFAULT_SAMPLING,
)


def is_valid_std_error(std_error) -> bool:
    """A standard error a density can be drawn with: positive and finite."""
    try:
        se = check_scalar(std_error, "std_error")
    except ValidationError:
        return False
    return math.isfinite(se) and se > 0.0


def _spike(mean: float, eps: float, height: float) -> DensityCurve:
    return DensityCurve(
        x=np.array([mean - eps, mean, mean + eps], dtype=np.float64),
        y=np.array([0.0, height, 0.0], dtype=np.float64),
    )


def sample_density(
    mean: float,
    std_error: float,
    num_points: int = DEFAULT_SAMPLING.density_points,
    range_multiplier: float = DEFAULT_SAMPLING.range_multiplier,
    *,
    spike_epsilon: float = DEFAULT_SAMPLING.spike_epsilon,
    spike_height: float = DEFAULT_SAMPLING.spike_height,
) -> DensityCurve:
    """
    Sample the N(mean, std_error) density on an even grid.

    Parameters
    ----------
    mean : float
        Centre of the distribution. Must be finite.
    std_error : float
        Standard deviation of the distribution.
    num_points : int
        Number of intervals; num_points + 1 points are returned.
    range_multiplier : float
        The grid spans mean +/- range_multiplier * std_error.
    spike_epsilon, spike_height : float
        Half-width and height of the spike drawn instead of a density.

    Returns
    -------
    DensityCurve
        x-ascending points. If std_error is zero, negative or not finite,
        or the grid bounds overflow, a 3-point spike (mean - eps, 0),
        (mean, height), (mean + eps, 0) so there is still something to draw.
    """
    mu = check_scalar(mean, "mean")
    check_finite_scalar(mu, "mean")
    n = check_positive_integer(num_points, "num_points")
    k = check_scalar(range_multiplier, "range_multiplier")
    check_positive(k, "range_multiplier")

    eps = check_scalar(spike_epsilon, "spike_epsilon")
    check_positive(eps, "spike_epsilon")
    height = check_scalar(spike_height, "spike_height")
    check_positive(height, "spike_height")

    if not is_valid_std_error(std_error):
        return _spike(mu, eps, height)

    se = float(std_error)
    lo, hi = mu - k * se, mu + k * se
    if not math.isfinite(hi - lo):
        return _spike(mu, eps, height)
    x = np.linspace(lo, hi, n + 1)
    y = sp_stats.norm.pdf(x, loc=mu, scale=se)
    return DensityCurve(x=x, y=y)


def sample_area_under_curve(
    mean: float,
    std_error: float,
    x_min: float,
    x_max: float,
    num_points: int = DEFAULT_SAMPLING.area_points,
) -> AreaRegion:
    """
    Sample the N(mean, std_error) density over [x_min, x_max] for shading.

    Parameters
    ----------
    mean, std_error : float
        The distribution being shaded.
    x_min, x_max : float
        Bounds of the region.
    num_points : int
        Number of intervals; num_points + 1 points are returned.

    Returns
    -------
    AreaRegion
        Empty if x_min >= x_max (or the width x_max - x_min is
        not finite) or the standard
        error is not positive and finite. The baseline closure at x_min and
        x_max is added by AreaRegion.polygon(). This is a picture of the
        integral; the analytic beta and power come from the engine.
    """
    n = check_positive_integer(num_points, "num_points")
    lo = check_scalar(x_min, "x_min")
    hi = check_scalar(x_max, "x_max")

    if not (lo < hi and math.isfinite(hi - lo)):
        return AreaRegion()
    if not is_valid_std_error(std_error):
        return AreaRegion()

    mu = check_scalar(mean, "mean")
    check_finite_scalar(mu, "mean")

    x = np.linspace(lo, hi, n + 1)
    y = sp_stats.norm.pdf(x, loc=mu, scale=float(std_error))
    return AreaRegion(x=x, y=y)
