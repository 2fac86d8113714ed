"""
Tests for compute(): critical values, beta and power.

Reference values come from the Normal power formula, evaluated
independently with scipy.stats.norm where a closed form is used.
"""

import math

import pytest
from scipy import stats

from powerviz.power import compute, PowerDesign, PowerSolution
from powerviz.core.exceptions import ValidationError


def _mean(**overrides):
    kwargs = dict(
        test_family="mean", h0_value=100.0, alternative="two.sided",
        actual_param=105.0, sample_size=30, std_dev=15.0, alpha=0.05,
    )
    kwargs.update(overrides)
    return compute(**kwargs)


def _proportion(**overrides):
    kwargs = dict(
        test_family="proportion", h0_value=0.5, alternative="greater",
        actual_param=0.6, sample_size=100, alpha=0.05,
    )
    kwargs.update(overrides)
    return compute(**kwargs)


class TestMeanScenario:
    """mu0=100, sigma=15, n=30, alpha=0.05, mu_a=105, two-sided."""

    def test_standard_errors(self, mean_two_sided):
        assert mean_two_sided.ok
        assert mean_two_sided.standard_error_h0 == pytest.approx(2.7386, abs=1e-4)
        assert mean_two_sided.standard_error_ha == mean_two_sided.standard_error_h0

    def test_z_alpha(self, mean_two_sided):
        assert mean_two_sided.z_alpha == pytest.approx(1.9600, abs=1e-4)

    def test_critical_values(self, mean_two_sided):
        assert mean_two_sided.critical_value_1 == pytest.approx(94.633, abs=1e-3)
        assert mean_two_sided.critical_value_2 == pytest.approx(105.367, abs=1e-3)

    def test_power_matches_normal_formula(self, mean_two_sided):
        """
        beta = Phi((cv2 - mu_a)/se) - Phi((cv1 - mu_a)/se)
             ~ 0.5533, power ~ 0.4467
        """
        se = 15.0 / math.sqrt(30)
        z = stats.norm.ppf(0.975)
        cv1, cv2 = 100 - z * se, 100 + z * se
        beta = stats.norm.cdf((cv2 - 105) / se) - stats.norm.cdf((cv1 - 105) / se)

        assert mean_two_sided.beta == pytest.approx(beta, rel=1e-12)
        assert mean_two_sided.power == pytest.approx(1 - beta, rel=1e-12)
        assert mean_two_sided.power == pytest.approx(0.4467, abs=1e-3)

    def test_keyword_entry_matches_design_entry(self, mean_two_sided):
        assert _mean().to_dict() == mean_two_sided.to_dict()


class TestProportionScenario:
    """p0=0.5, n=100, alpha=0.05, p_a=0.6, greater."""

    def test_values(self, proportion_greater):
        s = proportion_greater
        assert s.ok
        assert s.standard_error_h0 == pytest.approx(0.05, rel=1e-12)
        assert s.standard_error_ha == pytest.approx(math.sqrt(0.24 / 100), rel=1e-12)
        assert s.standard_error_ha == pytest.approx(0.049, abs=1e-3)
        assert s.critical_value_1 == pytest.approx(0.5822, abs=1e-4)
        assert s.critical_value_2 is None

    def test_power(self, proportion_greater):
        se_ha = math.sqrt(0.24 / 100)
        cv = 0.5 + stats.norm.ppf(0.95) * 0.05
        expected = stats.norm.sf((cv - 0.6) / se_ha)
        assert proportion_greater.power == pytest.approx(expected, rel=1e-12)
        assert proportion_greater.power == pytest.approx(0.64, abs=0.01)

    def test_no_normality_warning_with_large_n(self, proportion_greater):
        assert proportion_greater.warnings == ()


class TestAlternatives:
    """Critical-value placement and beta for each alternative shape."""

    def test_critical_value_2_only_for_two_sided(self, alternative):
        s = _mean(alternative=alternative)
        if alternative == "two.sided":
            assert s.critical_value_2 is not None
        else:
            assert s.critical_value_2 is None

    def test_two_sided_ordering(self):
        s = _mean()
        assert s.critical_value_1 < s.critical_value_2

    def test_greater_cv_above_h0(self):
        s = _mean(alternative="greater")
        assert s.critical_value_1 == pytest.approx(
            100 + stats.norm.ppf(0.95) * 15 / math.sqrt(30), rel=1e-12
        )
        assert s.z_alpha == pytest.approx(1.6448536269514722, rel=1e-12)

    def test_less_cv_below_h0(self):
        s = _mean(alternative="less", actual_param=95.0)
        se = 15 / math.sqrt(30)
        cv = 100 - stats.norm.ppf(0.95) * se
        assert s.critical_value_1 == pytest.approx(cv, rel=1e-12)
        assert s.beta == pytest.approx(1 - stats.norm.cdf((cv - 95) / se), rel=1e-10)

    def test_symmetry_greater_vs_less(self):
        """Mirrored effects give the same power."""
        up = _mean(alternative="greater", actual_param=106.0)
        down = _mean(alternative="less", actual_param=94.0)
        assert up.power == pytest.approx(down.power, rel=1e-10)

    def test_wrong_direction_has_low_power(self):
        s = _mean(alternative="greater", actual_param=95.0)
        assert s.power < 0.05

    def test_null_true_power_equals_alpha(self, alternative):
        """When the actual parameter equals h0, power is the size of the test."""
        s = _mean(actual_param=100.0, alternative=alternative)
        assert s.power == pytest.approx(0.05, rel=1e-10)

    @pytest.mark.parametrize("alias,canonical", [
        ("≠", "two.sided"), ("!=", "two.sided"), (">", "greater"), ("<", "less"),
        ("two-sided", "two.sided"), ("larger", "greater"), ("smaller", "less"),
    ])
    def test_aliases(self, alias, canonical):
        assert _mean(alternative=alias).to_dict() == _mean(alternative=canonical).to_dict()


class TestInvariants:
    """beta + power == 1 and both in [0, 1] across a spread of inputs."""

    @pytest.mark.parametrize("family,h0,actual,sd", [
        ("mean", 100.0, 105.0, 15.0),
        ("mean", 0.0, -3.0, 2.0),
        ("mean", 10.0, 10.0, 0.5),
        ("mean", -50.0, 200.0, 1.0),
        ("proportion", 0.5, 0.6, None),
        ("proportion", 0.1, 0.02, None),
        ("proportion", 0.97, 0.999, None),
    ])
    @pytest.mark.parametrize("n", [1, 30, 10_000])
    @pytest.mark.parametrize("alpha", [1e-6, 0.05, 0.5, 0.999])
    def test_beta_power(self, family, h0, actual, sd, n, alpha, alternative):
        s = compute(
            test_family=family, h0_value=h0, actual_param=actual,
            sample_size=n, std_dev=sd, alpha=alpha, alternative=alternative,
        )
        assert s.ok
        assert 0.0 <= s.beta <= 1.0
        assert 0.0 <= s.power <= 1.0
        assert s.beta + s.power == pytest.approx(1.0, abs=1e-9)
        assert s.standard_error_h0 > 0
        assert s.standard_error_ha >= 0
        if alternative == "two.sided":
            assert s.critical_value_1 < s.critical_value_2

    def test_power_grows_with_sample_size(self):
        powers = [_mean(sample_size=n).power for n in (10, 30, 100, 300)]
        assert powers == sorted(powers)


class TestErrors:
    """Invalid inputs come back as tagged failures, never partial results."""

    def _assert_failed(self, s, kind):
        assert isinstance(s, PowerSolution)
        assert not s.ok
        assert s.error.kind == kind
        d = s.to_dict()
        numeric = {k: v for k, v in d.items() if k not in ("error", "error_kind")}
        assert all(v is None for v in numeric.values())
        assert d["error_kind"] == kind

    def test_sample_size_zero(self):
        s = _mean(sample_size=0)
        self._assert_failed(s, "InvalidSampleSize")
        assert "sample size must be positive" in s.error.message
        assert s.error.parameter == "sample_size"

    def test_negative_std_dev(self):
        s = _mean(std_dev=-1.0)
        self._assert_failed(s, "InvalidStdDev")
        assert "standard deviation must be positive" in s.error.message

    def test_missing_std_dev(self):
        self._assert_failed(_mean(std_dev=None), "InvalidStdDev")

    @pytest.mark.parametrize("alpha", [0.0, 1.0, -0.2, 1.7, float("nan")])
    def test_alpha_out_of_range(self, alpha):
        s = _mean(alpha=alpha)
        self._assert_failed(s, "InvalidAlpha")
        assert "alpha out of range" in s.error.message

    @pytest.mark.parametrize("field,value", [
        ("h0_value", 0.0), ("h0_value", 1.0), ("actual_param", 0.0),
        ("actual_param", 1.0), ("actual_param", 1.2),
    ])
    def test_proportion_out_of_range(self, field, value):
        s = _proportion(**{field: value})
        self._assert_failed(s, "InvalidProportion")
        assert "proportion out of range" in s.error.message

    def test_actual_zero_never_reaches_point_mass_branch(self):
        """p_a = 0 would give se_ha = 0; validation rejects it first."""
        s = _proportion(actual_param=0.0)
        self._assert_failed(s, "InvalidProportion")
        assert s.standard_error_ha is None

    @pytest.mark.parametrize("std_dev", [float("inf"), float("nan")])
    def test_non_finite_standard_error(self, std_dev):
        s = _mean(std_dev=std_dev)
        self._assert_failed(s, "InvalidStandardError")
        assert "standard error invalid" in s.error.message

    def test_standard_error_underflow(self):
        s = _mean(std_dev=5e-324, sample_size=100)
        self._assert_failed(s, "InvalidStandardError")

    @pytest.mark.parametrize("family", ["mean", "proportion"])
    def test_sample_size_beyond_float_range(self, family):
        """A valid int that float() cannot hold fails as a tagged error."""
        make = _mean if family == "mean" else _proportion
        s = make(sample_size=10**400)
        self._assert_failed(s, "InvalidStandardError")
        assert s.error.parameter == "sample_size"

    def test_critical_values_overflow(self):
        """se = 1e308 is finite, but h0 +/- 1.96 se is not."""
        s = _mean(h0_value=0.0, actual_param=1.0, sample_size=1, std_dev=1e308)
        self._assert_failed(s, "InvalidStandardError")
        assert "critical value" in s.error.message

    def test_critical_values_not_distinct(self):
        """z * se below the spacing of floats near h0 collapses cv1 onto cv2."""
        s = _mean(h0_value=1e17, actual_param=1e17, sample_size=1, std_dev=1.0)
        self._assert_failed(s, "InvalidStandardError")
        assert "not distinct" in s.error.message

    def test_large_sample_size_still_computes(self):
        s = _proportion(sample_size=10**12)
        assert s.ok
        assert s.power == pytest.approx(1.0)

    def test_non_finite_mean(self):
        self._assert_failed(_mean(h0_value=float("nan")), "InvalidHypothesisValue")

    def test_validation_order(self):
        """Sample size is reported before alpha and std_dev."""
        s = _mean(sample_size=0, std_dev=-1, alpha=2)
        assert s.error.kind == "InvalidSampleSize"
        s = _mean(std_dev=-1, alpha=2)
        assert s.error.kind == "InvalidStdDev"

    def test_std_dev_ignored_for_proportion(self):
        s = _proportion(std_dev=-3.0)
        assert s.ok
        assert s.design.std_dev is None


class TestProgrammingErrors:
    """Unknown names are bugs in the caller and raise."""

    def test_unknown_family(self):
        with pytest.raises(ValidationError, match="test_family"):
            _mean(test_family="median")

    def test_missing_family(self):
        with pytest.raises(ValidationError, match="test_family is required"):
            compute(h0_value=1.0, actual_param=2.0, sample_size=3, std_dev=1.0)

    def test_unknown_alternative(self):
        with pytest.raises(ValidationError, match="alternative"):
            _mean(alternative="sideways")

    def test_unknown_backend(self):
        with pytest.raises(ValidationError, match="Unknown backend"):
            compute(PowerDesign.default(), backend="gpu")


class TestMetadata:

    def test_backend_and_timing(self, mean_two_sided):
        assert mean_two_sided.backend_name == "cpu_normal"
        timing = mean_two_sided.timing
        for key in ("total_seconds", "standard_error", "critical_values", "power"):
            assert key in timing

    def test_info(self, proportion_greater):
        assert proportion_greater.info["test_family"] == "proportion"
        assert proportion_greater.info["alternative"] == "greater"

    def test_normality_warning_small_sample(self):
        s = _proportion(sample_size=20, h0_value=0.1, actual_param=0.5)
        assert s.ok
        assert len(s.warnings) == 1
        assert "Normality assumption for H0" in s.warnings[0]
        assert "n*p=2.00" in s.warnings[0]
