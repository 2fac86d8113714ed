"""
Common types for power analysis.

Defines PowerParams (the engine's numeric payload), PowerError (the tagged
failure carried by a PowerSolution) and the vocabulary of test families
and alternatives.
"""

from __future__ import annotations

from dataclasses import dataclass


VALID_TEST_FAMILIES = ("mean", "proportion")
VALID_ALTERNATIVES = ("two.sided", "less", "greater")

# Spellings accepted from form controls and other libraries.
ALTERNATIVE_ALIASES = {
    "≠": "two.sided",
    "!=": "two.sided",
    "two-sided": "two.sided",
    "two_sided": "two.sided",
    ">": "greater",
    "larger": "greater",
    "<": "less",
    "smaller": "less",
}


@dataclass(frozen=True)
class PowerParams:
    """
    Parameter payload for a power computation.

    Attributes
    ----------
    standard_error_h0 : float
        Standard error of the statistic under H0.
    standard_error_ha : float
        Standard error of the statistic under the actual parameter. May be
        0 only in the point-mass case.
    z_alpha : float
        Magnitude of the critical z-score (1.96 for a two-sided 5% test).
    critical_value_1 : float
        Lower critical value for two-sided tests, the only one otherwise.
    critical_value_2 : float or None
        Upper critical value; populated only for two-sided tests.
    beta : float
        Type II error probability, in [0, 1].
    power : float
        1 - beta.
    """
    standard_error_h0: float
    standard_error_ha: float
    z_alpha: float
    critical_value_1: float
    critical_value_2: float | None
    beta: float
    power: float


@dataclass(frozen=True)
class PowerError:
    """
    Tagged failure of a power computation.

    Attributes
    ----------
    kind : str
        One of the taxonomy tags: "InvalidSampleSize", "InvalidStdDev",
        "InvalidAlpha", "InvalidProportion", "InvalidHypothesisValue",
        "InvalidStandardError".
    message : str
        Human-readable description including the offending value.
    parameter : str or None
        Name of the parameter that failed, when known.
    """
    kind: str
    message: str
    parameter: str | None = None

    def __str__(self) -> str:
        return self.message
