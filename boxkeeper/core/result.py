"""Success/Failure values returned by command handlers.

Handlers never raise for expected outcomes such as a missing box, a blank
title or an exhausted identifier space. They return ``Failure(error=BoxError)``
and the caller matches on the result:

    match handler.handle(ProvisionBox(title="Inbox")):
        case Success(value=box):
            show(box)
        case Failure(error=error) if error.code is ErrorCode.BOX_NOT_FOUND:
            ...
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class Success[T]:
    """Outcome of a command that completed; ``value`` is its product."""

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure[E]:
    """Outcome of a command that was rejected; ``error`` says why."""

    error: E


type Result[T, E] = Success[T] | Failure[E]
