"""Schema-backed and exception-backed partial functions.

Lets code that signals failure by raising take part in a chain.
"""

from .lift import attempt, from_schema
from .schema import CallableSchema, OutputSchema, PydanticSchema

__all__ = [
    "OutputSchema",
    "CallableSchema",
    "PydanticSchema",
    "attempt",
    "from_schema",
]
