"""
Exception hierarchy for powerviz.

All exceptions inherit from PowerVizError to allow catching any
library-specific error. The power-analysis input taxonomy lives here as
subclasses of ValidationError so that every input failure can be caught
with a single except clause.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from __future__ import annotations

from typing import Any


class PowerVizError(Exception):
    """Base exception for all powerviz errors."""
    pass


class ValidationError(PowerVizError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class PowerInputError(ValidationError):
    """
    A test parameter is outside its admissible range.

    Base of the power-analysis error taxonomy. Every subclass carries a
    stable ``kind`` tag that callers can branch on without isinstance
    checks (the tag travels inside a failed PowerSolution).

    Attributes:
        name: Parameter that failed validation
        value: The offending value
    """
    kind = "InvalidInput"

    def __init__(
        self,
        message: str,
        name: str | None = None,
        value: Any = None,
    ):
        super().__init__(message)
        self.name = name
        self.value = value


class InvalidSampleSize(PowerInputError):
    """Sample size is not a positive integer."""
    kind = "InvalidSampleSize"


class InvalidStdDev(PowerInputError):
    """Population standard deviation of a mean test is missing or not positive."""
    kind = "InvalidStdDev"


class InvalidAlpha(PowerInputError):
    """Significance level is outside the open interval (0, 1)."""
    kind = "InvalidAlpha"


class InvalidProportion(PowerInputError):
    """A proportion (p0 or the actual p) is outside the open interval (0, 1)."""
    kind = "InvalidProportion"


class InvalidHypothesisValue(PowerInputError):
    """Hypothesized or actual mean is NaN or infinite."""
    kind = "InvalidHypothesisValue"


class InvalidStandardError(PowerInputError):
    """
    A derived standard error is zero, NaN or infinite.

    The only zero standard error the engine tolerates is the alternative
    distribution's, which is handled as a point mass.
    """
    kind = "InvalidStandardError"
