"""Combinators - first-match-wins composition of partial functions."""

from fchain.combinators.chain import Chain, build
from fchain.combinators.runner import run, run_range

__all__ = [
    "Chain",
    "build",
    "run",
    "run_range",
]
