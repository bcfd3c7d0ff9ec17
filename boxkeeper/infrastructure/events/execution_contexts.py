"""Execution contexts for event delivery.

A subscription may name the context its deliveries run in:

    - SynchronousContext: inline, before ``publish`` returns (the default)
    - QueueExecutionContext: appended to a FIFO queue; the owning thread
      runs them with ``run_pending()`` (e.g., a UI main loop)
    - AsyncioLoopContext: scheduled on an asyncio event loop with
      ``call_soon_threadsafe``

Deferred contexts never run the delivery inside ``publish``; it runs on the
context's own thread after ``publish`` returned control to its caller.
"""

import asyncio
import threading
from collections import deque
from collections.abc import Callable


class SynchronousContext:
    """Run deliveries inline on the publishing thread."""

    def __init__(self, name: str = "sync") -> None:
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def submit(self, fn: Callable[[], None]) -> None:
        fn()


class QueueExecutionContext:
    """FIFO queue of deliveries drained by the thread that owns it.

    Thread Safety:
        - ``submit`` may be called from any thread
        - ``run_pending`` is meant to be called by the owning thread only

    Example:
        >>> main_queue = QueueExecutionContext("main")
        >>> bus.subscribe(BoxProvisioned, view.on_box_provisioned, context=main_queue)
        >>> bus.publish(event)      # nothing delivered yet
        >>> main_queue.run_pending()  # view.on_box_provisioned runs here
        1
    """

    def __init__(self, name: str = "main") -> None:
        self._name = name
        self._queue: deque[Callable[[], None]] = deque()
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        return self._name

    @property
    def pending(self) -> int:
        """Number of queued deliveries."""
        with self._lock:
            return len(self._queue)

    def submit(self, fn: Callable[[], None]) -> None:
        with self._lock:
            self._queue.append(fn)

    def run_pending(self) -> int:
        """Run queued deliveries in FIFO order until the queue is empty.

        Deliveries queued while draining (e.g., a handler that publishes) run
        in the same call.

        Returns:
            Number of deliveries executed.
        """
        executed = 0
        while True:
            with self._lock:
                if not self._queue:
                    return executed
                fn = self._queue.popleft()
            fn()
            executed += 1


class AsyncioLoopContext:
    """Schedule deliveries on an asyncio event loop.

    Safe to use from any thread; the callback always runs on the loop's
    thread on a later iteration.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop, name: str = "asyncio") -> None:
        self._loop = loop
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def submit(self, fn: Callable[[], None]) -> None:
        self._loop.call_soon_threadsafe(fn)
