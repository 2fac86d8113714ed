"""
Visualization solution type.

Visualization bundles everything a chart widget needs to draw a power
plot: both density curves, the three shaded areas, and the reference
values for the mean and critical-value lines.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from powerviz.visualization._common import (
    AreaSet,
    DensityCurve,
    SamplingConfig,
    DEFAULT_SAMPLING,
)


@dataclass(frozen=True)
class Visualization:
    """
    Plot data for one parameter snapshot.

    Build with build_visualization(); use Visualization.empty() when the
    engine reported an error.
    """
    h0_points: DensityCurve
    ha_points: DensityCurve
    alpha_area: AreaSet
    beta_area: AreaSet
    power_area: AreaSet
    h0_value: float | None = None
    actual_param: float | None = None
    critical_value_1: float | None = None
    critical_value_2: float | None = None
    sampling: SamplingConfig = field(default=DEFAULT_SAMPLING)

    @classmethod
    def empty(cls) -> Visualization:
        """Nothing to draw (the engine returned an error)."""
        return cls(
            h0_points=DensityCurve(),
            ha_points=DensityCurve(),
            alpha_area=AreaSet.empty(),
            beta_area=AreaSet.empty(),
            power_area=AreaSet.empty(),
        )

    @property
    def is_empty(self) -> bool:
        return self.h0_points.is_empty and self.ha_points.is_empty

    @property
    def critical_values(self) -> tuple[float, ...]:
        return tuple(
            cv for cv in (self.critical_value_1, self.critical_value_2)
            if cv is not None
        )

    def x_domain(self) -> tuple[float, float] | None:
        """
        Chart x-axis domain.

        Extent of both curves, widened to include the critical values,
        then padded by `sampling.domain_padding` of the range on each side.
        None when there are no curves.
        """
        curves = [c for c in (self.h0_points, self.ha_points) if not c.is_empty]
        if not curves:
            return None
        lo = min(c.x_min for c in curves)
        hi = max(c.x_max for c in curves)
        for cv in self.critical_values:
            lo = min(lo, cv)
            hi = max(hi, cv)
        pad = (hi - lo) * self.sampling.domain_padding
        return lo - pad, hi + pad

    def y_domain(
        self,
        *,
        show_h0: bool = True,
        show_ha: bool = True,
        show_alpha: bool = True,
        show_beta: bool = True,
        show_power: bool = True,
    ) -> tuple[float, float]:
        """
        Chart y-axis domain for the currently visible layers.

        Scales to the tallest visible curve; if no curve is visible, to the
        tallest visible area. Falls back to (0, 0.1) when nothing visible
        has height.
        """
        peaks = []
        if show_h0 and not self.h0_points.is_empty:
            peaks.append(self.h0_points.y_max)
        if show_ha and not self.ha_points.is_empty:
            peaks.append(self.ha_points.y_max)
        if not peaks:
            for shown, area in ((show_alpha, self.alpha_area),
                                (show_beta, self.beta_area),
                                (show_power, self.power_area)):
                if shown and area.y_max is not None:
                    peaks.append(area.y_max)

        top = max(peaks, default=0.0)
        if top > 0.0:
            return 0.0, top * self.sampling.y_headroom
        return 0.0, 0.1

    def to_dict(self) -> dict[str, Any]:
        """Plain Python structure for a chart widget or JSON encoder."""
        return {
            'h0_points': self.h0_points.to_list(),
            'ha_points': self.ha_points.to_list(),
            'alpha_area': self.alpha_area.to_dict(),
            'beta_area': self.beta_area.to_dict(),
            'power_area': self.power_area.to_dict(),
            'h0_value': self.h0_value,
            'actual_param': self.actual_param,
            'critical_value_1': self.critical_value_1,
            'critical_value_2': self.critical_value_2,
        }

    def __repr__(self) -> str:
        return (
            f"Visualization(h0_points={len(self.h0_points)}, "
            f"ha_points={len(self.ha_points)}, "
            f"alpha={self.alpha_area.kind!r}, beta={self.beta_area.kind!r}, "
            f"power={self.power_area.kind!r})"
        )
