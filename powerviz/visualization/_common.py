"""
Common types for distribution visualization.

DensityCurve and AreaRegion are immutable, x-ascending point sequences
backed by numpy arrays. AreaSet is a tagged union ("empty", "one", "two")
so a renderer never has to guess how many regions a shaded area has.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Iterator, NamedTuple

import numpy as np
from numpy.typing import NDArray

from powerviz.core.exceptions import ValidationError


AREA_KINDS = ("empty", "one", "two")


class DistributionPoint(NamedTuple):
    """One sample of a density curve."""
    x: float
    y: float


def _empty_array() -> NDArray[np.floating[Any]]:
    return np.empty(0, dtype=np.float64)


@dataclass(frozen=True, eq=False)
class _PointSequence:
    """x-ascending (x, y) samples with y >= 0."""
    x: NDArray[np.floating[Any]] = field(default_factory=_empty_array)
    y: NDArray[np.floating[Any]] = field(default_factory=_empty_array)

    def __len__(self) -> int:
        return int(self.x.shape[0])

    def __iter__(self) -> Iterator[DistributionPoint]:
        for xi, yi in zip(self.x.tolist(), self.y.tolist()):
            yield DistributionPoint(xi, yi)

    def __bool__(self) -> bool:
        return len(self) > 0

    @property
    def is_empty(self) -> bool:
        return len(self) == 0

    @property
    def x_min(self) -> float | None:
        return float(self.x[0]) if len(self) else None

    @property
    def x_max(self) -> float | None:
        return float(self.x[-1]) if len(self) else None

    @property
    def y_max(self) -> float | None:
        return float(self.y.max()) if len(self) else None

    def to_list(self) -> list[dict[str, float]]:
        """Plain [{'x': ..., 'y': ...}, ...] for a chart widget."""
        return [{'x': p.x, 'y': p.y} for p in self]


@dataclass(frozen=True, eq=False)
class DensityCurve(_PointSequence):
    """Sampled Normal density (or a 3-point spike for a degenerate SE)."""
    pass


@dataclass(frozen=True, eq=False)
class AreaRegion(_PointSequence):
    """
    Density samples over [x_min, x_max] for fill rendering.

    The region is understood to close at the baseline (y = 0) at both
    ends; polygon() returns that closed outline.
    """

    def polygon(self) -> list[DistributionPoint]:
        """Baseline-then-curve outline: (x_min, 0), curve..., (x_max, 0)."""
        if self.is_empty:
            return []
        return [
            DistributionPoint(self.x_min, 0.0),
            *self,
            DistributionPoint(self.x_max, 0.0),
        ]


@dataclass(frozen=True)
class AreaSet:
    """
    Shaded area made of zero, one or two regions.

    Uses a tagged-union approach: `kind` says how to read `regions`.
        "empty": no regions
        "one":   regions == (region,)
        "two":   regions == (left, right); either slot may be an empty
                 region when its bounds collapsed

    Do not construct directly; use factory classmethods.
    """
    kind: str
    regions: tuple[AreaRegion, ...] = ()

    def __post_init__(self):
        if self.kind not in AREA_KINDS:
            raise ValidationError(f"kind must be one of {AREA_KINDS}, got {self.kind!r}")
        expected = AREA_KINDS.index(self.kind)
        if len(self.regions) != expected:
            raise ValidationError(
                f"AreaSet of kind {self.kind!r} needs {expected} region(s), "
                f"got {len(self.regions)}"
            )

    @classmethod
    def empty(cls) -> AreaSet:
        return cls(kind="empty")

    @classmethod
    def one(cls, region: AreaRegion) -> AreaSet:
        """Single region; an empty region gives AreaSet.empty()."""
        if region.is_empty:
            return cls.empty()
        return cls(kind="one", regions=(region,))

    @classmethod
    def two(cls, left: AreaRegion, right: AreaRegion) -> AreaSet:
        """Left and right tail regions; both empty gives AreaSet.empty()."""
        if left.is_empty and right.is_empty:
            return cls.empty()
        return cls(kind="two", regions=(left, right))

    @property
    def is_empty(self) -> bool:
        return self.kind == "empty"

    @property
    def left(self) -> AreaRegion | None:
        return self.regions[0] if self.kind == "two" else None

    @property
    def right(self) -> AreaRegion | None:
        return self.regions[1] if self.kind == "two" else None

    @property
    def region(self) -> AreaRegion | None:
        return self.regions[0] if self.kind == "one" else None

    def non_empty_regions(self) -> tuple[AreaRegion, ...]:
        return tuple(r for r in self.regions if not r.is_empty)

    @property
    def y_max(self) -> float | None:
        peaks = [r.y_max for r in self.non_empty_regions()]
        return max(peaks) if peaks else None

    def to_dict(self) -> dict[str, Any]:
        return {
            'kind': self.kind,
            'regions': [r.to_list() for r in self.regions],
        }


@dataclass(frozen=True)
class AreaSets:
    """The three shaded areas of a power plot."""
    alpha: AreaSet
    beta: AreaSet
    power: AreaSet


@dataclass(frozen=True)
class SamplingConfig:
    """
    Resolution and layout constants for curve sampling.

    Attributes:
        density_points: Intervals per density curve (points = intervals + 1)
        range_multiplier: Half-width of a density curve in standard errors
        area_points: Intervals per shaded region
        plot_extent: Half-width of the shading range in standard errors
        spike_epsilon: Half-width of the spike drawn for a degenerate SE
        spike_height: Height of that spike
        domain_padding: Fraction of the x-range added on each side of x_domain()
        y_headroom: Factor applied to the tallest curve in y_domain()
    """
    density_points: int = 200
    range_multiplier: float = 4.0
    area_points: int = 50
    plot_extent: float = 5.0
    spike_epsilon: float = 1e-3
    spike_height: float = 1.0
    domain_padding: float = 0.05
    y_headroom: float = 1.1

    def __post_init__(self):
        for name in ("density_points", "area_points"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value < 1:
                raise ValidationError(f"{name}: must be a positive integer, got {value!r}")
        for name in ("range_multiplier", "plot_extent", "spike_epsilon",
                     "spike_height", "y_headroom"):
            value = getattr(self, name)
            if not (math.isfinite(value) and value > 0):
                raise ValidationError(f"{name}: must be positive and finite, got {value!r}")
        if not (math.isfinite(self.domain_padding) and self.domain_padding >= 0):
            raise ValidationError(
                f"domain_padding: must be non-negative and finite, got {self.domain_padding!r}"
            )


DEFAULT_SAMPLING = SamplingConfig()
