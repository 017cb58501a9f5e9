"""
Core protocols for polyplot.

Backends are described structurally (Protocol) rather than nominally (ABC)
so the QR and closed-form strategies share a contract without a common
base class.
"""

from typing import Protocol, TypeVar, runtime_checkable

from polyplot.core.result import Result

# Type variables for generic payloads
P = TypeVar('P', covariant=True)  # Parameter payload type
D = TypeVar('D', contravariant=True)  # Design type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for fitting backends.

    Each backend takes a validated design and produces a parameter
    payload wrapped in a Result. Backends are stateless: all inputs come
    through the design, which makes them easy to test and swap.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}'
        Examples: 'cpu_qr', 'cpu_closed_form'
        """
        ...

    def solve(self, design: D) -> Result[P]:
        """
        Execute the fit.

        Raises:
            NumericalError: If numerical issues prevent a solution
            ValidationError: If the design is invalid for this backend
        """
        ...
