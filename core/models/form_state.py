"""Results returned by the invoice form handlers.

A handler either hands back new form state for the page to render, or a
Redirect. A Redirect is terminal: the handler has finished all of its work
and the caller navigates.
"""

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel


class FormState(BaseModel):
    """What the invoice form renders after a submission."""

    errors: dict[str, list[str]] | None = None
    message: str | None = None


class StateKind(str, Enum):
    """Why a handler returned state instead of redirecting."""

    INVALID = "invalid"  # field errors, nothing written
    FAILED = "failed"  # storage error, nothing written
    DONE = "done"


@dataclass(frozen=True)
class StateUpdate:
    state: FormState
    kind: StateKind

    @classmethod
    def invalid(cls, errors: dict[str, list[str]], message: str) -> "StateUpdate":
        return cls(state=FormState(errors=errors, message=message), kind=StateKind.INVALID)

    @classmethod
    def failed(cls, message: str) -> "StateUpdate":
        return cls(state=FormState(message=message), kind=StateKind.FAILED)

    @classmethod
    def done(cls, message: str) -> "StateUpdate":
        return cls(state=FormState(message=message), kind=StateKind.DONE)


@dataclass(frozen=True)
class Redirect:
    """Navigate to path. Nothing in the handler runs after this is returned."""

    path: str


ActionResult = Redirect | StateUpdate
