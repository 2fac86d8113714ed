"""
PowerDesign: validated snapshot of the test parameters.

Uses factory classmethods per test family. The `test_family` field
identifies which fields are populated. Immutable after construction; a
parameter change produces a new design via replace().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from powerviz.core.exceptions import (
    ValidationError,
    InvalidSampleSize,
    InvalidStdDev,
    InvalidAlpha,
    InvalidProportion,
    InvalidHypothesisValue,
)
from powerviz.core.validation import (
    check_scalar,
    check_finite_scalar,
    check_open_interval,
    check_positive_integer,
)
from powerviz.power._common import (
    VALID_TEST_FAMILIES,
    VALID_ALTERNATIVES,
    ALTERNATIVE_ALIASES,
)


TEST_FAMILY_ALIASES = {
    "one-sample-mean": "mean",
    "one-sample-proportion": "proportion",
    "means": "mean",
    "proportions": "proportion",
}

# Initial parameter snapshots of the interactive explorer, per family.
FAMILY_DEFAULTS: dict[str, dict[str, Any]] = {
    "mean": {
        "h0_value": 100.0,
        "actual_param": 105.0,
        "std_dev": 15.0,
    },
    "proportion": {
        "h0_value": 0.5,
        "actual_param": 0.6,
        "std_dev": None,
    },
}
DEFAULT_ALTERNATIVE = "two.sided"
DEFAULT_SAMPLE_SIZE = 30
DEFAULT_ALPHA = 0.05


def _validate_test_family(test_family: str) -> str:
    """Validate and return the canonical test family name."""
    if not isinstance(test_family, str):
        raise ValidationError(
            f"test_family must be a string, got {type(test_family).__name__}"
        )
    family = TEST_FAMILY_ALIASES.get(test_family, test_family)
    if family not in VALID_TEST_FAMILIES:
        raise ValidationError(
            f"test_family must be one of {VALID_TEST_FAMILIES}, got {test_family!r}"
        )
    return family


def _validate_alternative(alternative: str) -> str:
    """Validate and return the canonical alternative hypothesis string."""
    if not isinstance(alternative, str):
        raise ValidationError(
            f"alternative must be a string, got {type(alternative).__name__}"
        )
    canonical = ALTERNATIVE_ALIASES.get(alternative.strip(), alternative.strip())
    if canonical not in VALID_ALTERNATIVES:
        raise ValidationError(
            f"alternative must be one of {VALID_ALTERNATIVES}, got {alternative!r}"
        )
    return canonical


def _validate_sample_size(sample_size) -> int:
    try:
        return check_positive_integer(sample_size, "sample_size")
    except ValidationError as e:
        raise InvalidSampleSize(
            f"sample size must be positive, got {sample_size!r}",
            name="sample_size", value=sample_size,
        ) from e


def _validate_std_dev(std_dev) -> float:
    """
    Only non-positive values are rejected here. NaN and infinity pass and
    surface later as an invalid standard error.
    """
    if std_dev is None:
        raise InvalidStdDev(
            "standard deviation must be positive, got None (required for a mean test)",
            name="std_dev", value=None,
        )
    try:
        value = check_scalar(std_dev, "std_dev")
    except ValidationError as e:
        raise InvalidStdDev(
            f"standard deviation must be positive, got {std_dev!r}",
            name="std_dev", value=std_dev,
        ) from e
    if value <= 0.0:
        raise InvalidStdDev(
            f"standard deviation must be positive, got {value}",
            name="std_dev", value=std_dev,
        )
    return value


def _validate_alpha(alpha) -> float:
    try:
        value = check_scalar(alpha, "alpha")
        check_open_interval(value, 0.0, 1.0, "alpha")
    except ValidationError as e:
        raise InvalidAlpha(
            f"alpha out of range: must be in (0, 1), got {alpha!r}",
            name="alpha", value=alpha,
        ) from e
    return value


def _validate_proportion(value, name: str) -> float:
    try:
        p = check_scalar(value, name)
        check_open_interval(p, 0.0, 1.0, name)
    except ValidationError as e:
        raise InvalidProportion(
            f"proportion out of range: {name} must be in (0, 1), got {value!r}",
            name=name, value=value,
        ) from e
    return p


def _validate_mean_value(value, name: str) -> float:
    try:
        mu = check_scalar(value, name)
        check_finite_scalar(mu, name)
    except ValidationError as e:
        raise InvalidHypothesisValue(
            f"{name} must be a finite number, got {value!r}",
            name=name, value=value,
        ) from e
    return mu


def alpha_from_confidence_level(level_percent: float) -> float:
    """
    Convert a confidence level in percent to a significance level.

    ``alpha_from_confidence_level(95) == 0.05`` (up to rounding).

    Raises
    ------
    InvalidAlpha
        If the level is not strictly between 0 and 100.
    """
    try:
        level = check_scalar(level_percent, "confidence_level")
        check_open_interval(level, 0.0, 100.0, "confidence_level")
    except ValidationError as e:
        raise InvalidAlpha(
            f"alpha out of range: confidence level must be in (0, 100) percent, "
            f"got {level_percent!r}",
            name="confidence_level", value=level_percent,
        ) from e
    return 1.0 - level / 100.0


@dataclass(frozen=True)
class PowerDesign:
    """
    Test parameters for a one-sample z-test power computation.

    Uses a tagged-union approach: `test_family` identifies whether
    `std_dev` is populated ("mean") or not ("proportion"). Factory
    classmethods validate inputs and raise a PowerInputError subclass on
    the first failing check, in the order sample size, standard deviation,
    alpha, proportions, means.

    Do not construct directly; use factory classmethods.
    """
    test_family: str
    _h0_value: float
    _actual_param: float
    _alternative: str
    _sample_size: int
    _alpha: float
    _std_dev: float | None = None

    # --- Properties ---

    @property
    def h0_value(self) -> float:
        """Hypothesized parameter (mu0 or p0)."""
        return self._h0_value

    @property
    def actual_param(self) -> float:
        """True parameter that centres the alternative distribution."""
        return self._actual_param

    @property
    def alternative(self) -> str:
        return self._alternative

    @property
    def sample_size(self) -> int:
        return self._sample_size

    @property
    def alpha(self) -> float:
        return self._alpha

    @property
    def std_dev(self) -> float | None:
        """Population standard deviation; None for proportion tests."""
        return self._std_dev

    @property
    def is_two_sided(self) -> bool:
        return self._alternative == "two.sided"

    @property
    def metadata(self) -> dict[str, Any]:
        return {
            'test_family': self.test_family,
            'alternative': self._alternative,
            'n': self._sample_size,
            'alpha': self._alpha,
        }

    # --- Factories ---

    @classmethod
    def for_mean_test(
        cls,
        h0_value: float,
        actual_param: float,
        *,
        sample_size: int,
        std_dev: float,
        alpha: float = DEFAULT_ALPHA,
        alternative: str = DEFAULT_ALTERNATIVE,
    ) -> PowerDesign:
        """
        One-sample mean z-test with known population standard deviation.

        Parameters
        ----------
        h0_value : float
            Hypothesized mean mu0.
        actual_param : float
            True mean mu_a used for the alternative distribution.
        sample_size : int
            Number of observations, > 0.
        std_dev : float
            Population standard deviation, > 0.
        alpha : float
            Significance level in (0, 1). Default 0.05.
        alternative : str
            "two.sided" (default), "greater" or "less".
        """
        alternative = _validate_alternative(alternative)
        n = _validate_sample_size(sample_size)
        sd = _validate_std_dev(std_dev)
        a = _validate_alpha(alpha)
        mu0 = _validate_mean_value(h0_value, "h0_value")
        mu_a = _validate_mean_value(actual_param, "actual_param")

        return cls(
            test_family="mean",
            _h0_value=mu0,
            _actual_param=mu_a,
            _alternative=alternative,
            _sample_size=n,
            _alpha=a,
            _std_dev=sd,
        )

    @classmethod
    def for_proportion_test(
        cls,
        h0_value: float,
        actual_param: float,
        *,
        sample_size: int,
        alpha: float = DEFAULT_ALPHA,
        alternative: str = DEFAULT_ALTERNATIVE,
    ) -> PowerDesign:
        """
        One-sample proportion z-test (Normal approximation).

        Parameters
        ----------
        h0_value : float
            Hypothesized proportion p0, strictly inside (0, 1).
        actual_param : float
            True proportion p_a, strictly inside (0, 1).
        sample_size : int
            Number of trials, > 0.
        alpha : float
            Significance level in (0, 1). Default 0.05.
        alternative : str
            "two.sided" (default), "greater" or "less".
        """
        alternative = _validate_alternative(alternative)
        n = _validate_sample_size(sample_size)
        a = _validate_alpha(alpha)
        p0 = _validate_proportion(h0_value, "h0_value")
        p_a = _validate_proportion(actual_param, "actual_param")

        return cls(
            test_family="proportion",
            _h0_value=p0,
            _actual_param=p_a,
            _alternative=alternative,
            _sample_size=n,
            _alpha=a,
        )

    @classmethod
    def from_params(
        cls,
        *,
        test_family: str,
        h0_value: float,
        alternative: str,
        actual_param: float,
        sample_size: int,
        alpha: float,
        std_dev: float | None = None,
    ) -> PowerDesign:
        """
        Build a design from a flat parameter snapshot.

        Dispatches on `test_family`; `std_dev` is ignored for proportion
        tests.
        """
        family = _validate_test_family(test_family)
        if family == "mean":
            return cls.for_mean_test(
                h0_value, actual_param,
                sample_size=sample_size,
                std_dev=std_dev,
                alpha=alpha,
                alternative=alternative,
            )
        return cls.for_proportion_test(
            h0_value, actual_param,
            sample_size=sample_size,
            alpha=alpha,
            alternative=alternative,
        )

    @classmethod
    def default(cls, test_family: str = "mean") -> PowerDesign:
        """Initial parameter snapshot for the given test family."""
        family = _validate_test_family(test_family)
        return cls.from_params(
            test_family=family,
            alternative=DEFAULT_ALTERNATIVE,
            sample_size=DEFAULT_SAMPLE_SIZE,
            alpha=DEFAULT_ALPHA,
            **FAMILY_DEFAULTS[family],
        )

    # --- Snapshots ---

    def to_params(self) -> dict[str, Any]:
        """Flat parameter snapshot accepted by from_params()."""
        return {
            'test_family': self.test_family,
            'h0_value': self._h0_value,
            'alternative': self._alternative,
            'actual_param': self._actual_param,
            'sample_size': self._sample_size,
            'alpha': self._alpha,
            'std_dev': self._std_dev,
        }

    def replace(self, **changes: Any) -> PowerDesign:
        """
        Return a new validated design with some parameters changed.

        Switching `test_family` fills h0_value, actual_param and std_dev
        from the new family's defaults unless they are part of `changes`.

        Raises
        ------
        ValidationError
            For unknown parameter names or invalid values.
        """
        params = self.to_params()
        unknown = set(changes) - set(params)
        if unknown:
            raise ValidationError(
                f"unknown parameter(s): {sorted(unknown)}; "
                f"expected a subset of {sorted(params)}"
            )

        if 'test_family' in changes:
            family = _validate_test_family(changes['test_family'])
            if family != self.test_family:
                params.update(FAMILY_DEFAULTS[family])
            changes = {**changes, 'test_family': family}

        params.update(changes)
        return type(self).from_params(**params)
