"""
Power analysis solution types.

PowerSolution wraps either Result[PowerParams] (success) or a PowerError
(failure). Callers check `ok` / `error` before reading numeric fields;
on failure every numeric property is None.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from powerviz.core.exceptions import PowerInputError
from powerviz.core.result import Result
from powerviz.power._common import PowerParams, PowerError

if TYPE_CHECKING:
    from powerviz.power.design import PowerDesign


_ALTERNATIVE_TEXT = {
    "two.sided": "is not equal to",
    "less": "is less than",
    "greater": "is greater than",
}
_PARAMETER_NAME = {"mean": "mean", "proportion": "proportion"}


@dataclass
class PowerSolution:
    """
    User-facing power computation results.

    Exactly one of `_result` and `_error` is populated. Build failures
    with PowerSolution.failed().
    """
    _result: Result[PowerParams] | None
    _design: 'PowerDesign | None'
    _error: PowerError | None = None

    @classmethod
    def failed(cls, exc: PowerInputError) -> PowerSolution:
        """Tagged failure from a taxonomy exception; no numeric fields."""
        return cls(
            _result=None,
            _design=None,
            _error=PowerError(kind=exc.kind, message=str(exc), parameter=exc.name),
        )

    # --- Status ---

    @property
    def ok(self) -> bool:
        return self._error is None

    @property
    def error(self) -> PowerError | None:
        return self._error

    @property
    def design(self) -> 'PowerDesign | None':
        return self._design

    def _param(self, name: str):
        if self._result is None:
            return None
        return getattr(self._result.params, name)

    # --- Numeric fields ---

    @property
    def standard_error_h0(self) -> float | None:
        """Standard error under H0."""
        return self._param('standard_error_h0')

    @property
    def standard_error_ha(self) -> float | None:
        """Standard error under the actual parameter."""
        return self._param('standard_error_ha')

    @property
    def z_alpha(self) -> float | None:
        """Magnitude of the critical z-score."""
        return self._param('z_alpha')

    @property
    def critical_value_1(self) -> float | None:
        return self._param('critical_value_1')

    @property
    def critical_value_2(self) -> float | None:
        """Upper critical value (two-sided tests only)."""
        return self._param('critical_value_2')

    @property
    def beta(self) -> float | None:
        """Type II error probability."""
        return self._param('beta')

    @property
    def power(self) -> float | None:
        """1 - beta."""
        return self._param('power')

    @property
    def params(self) -> PowerParams | None:
        return None if self._result is None else self._result.params

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return {} if self._result is None else self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return None if self._result is None else self._result.timing

    @property
    def backend_name(self) -> str | None:
        return None if self._result is None else self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return () if self._result is None else self._result.warnings

    # --- Export ---

    def to_dict(self) -> dict[str, Any]:
        """
        Flat snapshot for a state store.

        On failure all numeric entries are None and 'error' holds the
        message; 'error_kind' holds the taxonomy tag.
        """
        return {
            'power': self.power,
            'beta': self.beta,
            'critical_value_1': self.critical_value_1,
            'critical_value_2': self.critical_value_2,
            'z_alpha': self.z_alpha,
            'standard_error_h0': self.standard_error_h0,
            'standard_error_ha': self.standard_error_ha,
            'error': None if self._error is None else self._error.message,
            'error_kind': None if self._error is None else self._error.kind,
        }

    # --- Formatting ---

    def summary(self) -> str:
        """
        Format as a plain-text report.

        Produces output like:
            One-sample mean z-test: power analysis

        H0: true mean is equal to 100
        Ha: true mean is not equal to 100 (actual value 105)
        n = 30, sigma = 15, alpha = 0.05
        standard error (H0) = 2.738613, standard error (Ha) = 2.738613
        z_alpha = 1.959964
        critical values: 94.63240  105.3676
        beta (Type II error) = 0.5533111
        power (1 - beta)     = 0.4466889
        """
        if self._error is not None:
            return f"Power analysis failed [{self._error.kind}]: {self._error.message}\n"

        d = self._design
        p = self._result.params
        noun = _PARAMETER_NAME[d.test_family]
        lines = []

        lines.append(f"\tOne-sample {d.test_family} z-test: power analysis")
        lines.append("")
        lines.append(f"H0: true {noun} is equal to {d.h0_value:g}")
        lines.append(
            f"Ha: true {noun} {_ALTERNATIVE_TEXT[d.alternative]} {d.h0_value:g} "
            f"(actual value {d.actual_param:g})"
        )

        design_parts = [f"n = {d.sample_size}"]
        if d.std_dev is not None:
            design_parts.append(f"sigma = {d.std_dev:g}")
        design_parts.append(f"alpha = {d.alpha:g}")
        lines.append(", ".join(design_parts))

        lines.append(
            f"standard error (H0) = {p.standard_error_h0:.7g}, "
            f"standard error (Ha) = {p.standard_error_ha:.7g}"
        )
        lines.append(f"z_alpha = {p.z_alpha:.7g}")
        if p.critical_value_2 is not None:
            lines.append(
                f"critical values: {p.critical_value_1:.7g}  {p.critical_value_2:.7g}"
            )
        else:
            lines.append(f"critical value: {p.critical_value_1:.7g}")
        lines.append(f"beta (Type II error) = {p.beta:.7g}")
        lines.append(f"power (1 - beta)     = {p.power:.7g}")

        for w in self.warnings:
            lines.append(f"Warning: {w}")

        lines.append("")
        return "\n".join(lines)

    def __repr__(self) -> str:
        if self._error is not None:
            return f"PowerSolution(error={self._error.kind!r})"
        p = self._result.params
        return (
            f"PowerSolution(test_family={self._design.test_family!r}, "
            f"alternative={self._design.alternative!r}, "
            f"power={p.power:.4g}, beta={p.beta:.4g})"
        )
