"""
Core infrastructure for powerviz.

Shared abstractions and utilities used by the domain submodules
(power, visualization).

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy, including the power input taxonomy
    validation: Scalar input validators
    compute: Timing utilities
"""

from powerviz.core.protocols import Backend
from powerviz.core.result import Result
from powerviz.core.exceptions import (
    PowerVizError,
    ValidationError,
    PowerInputError,
    InvalidSampleSize,
    InvalidStdDev,
    InvalidAlpha,
    InvalidProportion,
    InvalidHypothesisValue,
    InvalidStandardError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PowerVizError",
    "ValidationError",
    "PowerInputError",
    "InvalidSampleSize",
    "InvalidStdDev",
    "InvalidAlpha",
    "InvalidProportion",
    "InvalidHypothesisValue",
    "InvalidStandardError",
]
