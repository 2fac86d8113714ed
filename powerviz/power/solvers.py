"""
Solver dispatch for power analysis.

compute() is the engine's entry point: it validates a parameter snapshot,
runs the backend, and returns a PowerSolution that is either a result or
a tagged error. Input failures never escape as exceptions.
"""

from __future__ import annotations

from powerviz.core.exceptions import ValidationError, PowerInputError
from powerviz.power.design import PowerDesign
from powerviz.power.solution import PowerSolution
from powerviz.power.backends.cpu import CPUPowerBackend


def _get_backend(backend: str = 'cpu'):
    """Select backend for power computations. Only the CPU reference exists."""
    if backend in ('cpu', 'auto'):
        return CPUPowerBackend()
    raise ValidationError(
        f"Unknown backend: {backend!r}. Use 'cpu'."
    )


def compute(
    design: PowerDesign | None = None,
    *,
    test_family: str | None = None,
    h0_value: float | None = None,
    alternative: str = "two.sided",
    actual_param: float | None = None,
    sample_size: int | None = None,
    std_dev: float | None = None,
    alpha: float = 0.05,
    backend: str = 'cpu',
) -> PowerSolution:
    """
    Power of a one-sample mean or proportion z-test.

    Parameters
    ----------
    design : PowerDesign or None
        Pre-built parameter snapshot. If given, the keyword parameters
        are ignored.
    test_family : str
        "mean" or "proportion".
    h0_value : float
        Hypothesized parameter (mu0 or p0).
    alternative : str
        "two.sided" (default), "greater" or "less".
    actual_param : float
        True parameter centring the alternative distribution.
    sample_size : int
        Number of observations, > 0.
    std_dev : float or None
        Population standard deviation; required for mean tests, ignored
        for proportion tests.
    alpha : float
        Significance level in (0, 1). Default 0.05.
    backend : str
        'cpu' (default).

    Returns
    -------
    PowerSolution
        On success: standard errors, z_alpha, critical value(s), beta and
        power. On invalid input: `ok` is False and `error` carries the
        taxonomy tag and message; no numeric field is populated.

    Raises
    ------
    ValidationError
        Only for programming errors: an unknown test family, alternative
        or backend name.
    """
    be = _get_backend(backend)

    try:
        if design is None:
            if test_family is None:
                raise ValidationError(
                    "test_family is required when no PowerDesign is given"
                )
            design = PowerDesign.from_params(
                test_family=test_family,
                h0_value=h0_value,
                alternative=alternative,
                actual_param=actual_param,
                sample_size=sample_size,
                std_dev=std_dev,
                alpha=alpha,
            )
        result = be.solve(design)
    except PowerInputError as exc:
        return PowerSolution.failed(exc)

    return PowerSolution(_result=result, _design=design)
