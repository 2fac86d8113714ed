"""
Core protocols for powerviz.

These define structural interfaces that domain-specific implementations must
satisfy. Protocol (structural typing) is used rather than ABC so backends do
not need to inherit from anything.
"""

from typing import Protocol, TypeVar, runtime_checkable

D = TypeVar('D', contravariant=True)  # Design type
P = TypeVar('P', covariant=True)      # Parameter payload type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend knows how to take a domain-specific design and produce
    a domain-specific parameter payload wrapped in a Result.

    Backends are stateless: all configuration is passed via the design
    or at construction time. This makes them easy to test and swap.
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}', e.g. 'cpu_normal'.
        """
        ...

    def solve(self, design: D) -> 'Result[P]':
        """
        Execute the computation.

        Raises:
            ValidationError: If the design cannot be solved (for power
                analysis, a degenerate standard error)
        """
        ...
