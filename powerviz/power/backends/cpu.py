"""
CPU reference backend for power analysis.

Dispatches to the z-test implementation based on design.test_family.
"""

from __future__ import annotations

from powerviz.core.result import Result
from powerviz.core.compute.timing import Timer
from powerviz.power._common import PowerParams
from powerviz.power.design import PowerDesign


class CPUPowerBackend:
    """CPU reference backend: Normal approximation via scipy.stats.norm."""

    @property
    def name(self) -> str:
        return 'cpu_normal'

    def solve(self, design: PowerDesign) -> Result[PowerParams]:
        """
        Compute standard errors, critical values, beta and power.

        Raises
        ------
        InvalidStandardError
            If a derived standard error is unusable.
        """
        timer = Timer()
        timer.start()

        test_family = design.test_family

        if test_family in ("mean", "proportion"):
            from powerviz.power.backends._z_test import z_test_power
            params, warnings_list = z_test_power(design, timer)
        else:
            raise ValueError(f"Unknown test_family: {test_family!r}")

        timer.stop()

        return Result(
            params=params,
            info={
                'test_family': test_family,
                'alternative': design.alternative,
                'method': f"one-sample {test_family} z-test (Normal approximation)",
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
