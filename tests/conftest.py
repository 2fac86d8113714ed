"""
pytest configuration and shared fixtures.
"""

import pytest

from powerviz.power import PowerDesign, compute


@pytest.fixture
def mean_two_sided_design():
    """Explorer default: mu0=100, mu_a=105, sigma=15, n=30, alpha=0.05, two-sided."""
    return PowerDesign.for_mean_test(
        100.0, 105.0, sample_size=30, std_dev=15.0, alpha=0.05,
        alternative="two.sided",
    )


@pytest.fixture
def proportion_greater_design():
    """p0=0.5, p_a=0.6, n=100, alpha=0.05, right-tailed."""
    return PowerDesign.for_proportion_test(
        0.5, 0.6, sample_size=100, alpha=0.05, alternative="greater",
    )


@pytest.fixture
def mean_two_sided(mean_two_sided_design):
    return compute(mean_two_sided_design)


@pytest.fixture
def proportion_greater(proportion_greater_design):
    return compute(proportion_greater_design)


@pytest.fixture(params=["two.sided", "greater", "less"])
def alternative(request):
    return request.param
