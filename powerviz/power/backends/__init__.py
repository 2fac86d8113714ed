"""Computational backends for power analysis."""

from powerviz.power.backends.cpu import CPUPowerBackend

__all__ = ["CPUPowerBackend"]
