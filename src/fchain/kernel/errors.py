"""Error types for chain contract violations.

A partial function declining an input is never an error; these exceptions
only cover misuse by the caller.
"""

from __future__ import annotations


class ChainContractError(TypeError):
    """Raised when a chain member does not honour the chain's contract.

    Covers non-callable members and results that do not match the
    chain's absence convention.
    """

    def __init__(self, message: str, member: object = None) -> None:
        self.member = member
        super().__init__(message)

    def __repr__(self) -> str:
        return f"ChainContractError({super().__repr__()}, member={self.member!r})"


class AbsentValueError(ValueError):
    """Raised when the value of an absent result is requested."""
