"""Execution context protocol.

An execution context decides where and when a delivery runs: inline on the
publishing thread, or deferred onto a queue owned by another thread (for
example the thread that owns the UI).

Implementations:
    - SynchronousContext: inline
    - QueueExecutionContext: FIFO queue drained by its owner
    - AsyncioLoopContext: an asyncio event loop
"""

from collections.abc import Callable
from typing import Protocol


class ExecutionContextProtocol(Protocol):
    """Place where subscription deliveries are executed."""

    @property
    def name(self) -> str:
        """Human-readable context name (used in logs)."""
        ...

    def submit(self, fn: Callable[[], None]) -> None:
        """Run ``fn`` in this context."""
        ...
