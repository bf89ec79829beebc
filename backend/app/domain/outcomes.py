"""Results produced by request handlers.

Each handler operation returns exactly one of the variants below. The
controller layer turns them into HTTP responses; handlers never raise for
absence, bad input or a rejected key.
"""
from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass(frozen=True)
class Outcome:
    pass


@dataclass(frozen=True)
class Ok(Outcome):
    payload: Any


@dataclass(frozen=True)
class NotFound(Outcome):
    message: str


@dataclass(frozen=True)
class BadRequest(Outcome):
    message: str


@dataclass(frozen=True)
class Unauthorized(Outcome):
    message: str


@dataclass(frozen=True)
class Created(Outcome):
    """A new resource exists; `action` names the route that reads it back."""
    action: str
    route_values: Dict[str, Any] = field(default_factory=dict)
    payload: Any = None
