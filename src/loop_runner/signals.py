from __future__ import annotations

import asyncio
import logging
import threading

from loop_runner.types import IterationOutcome

logger = logging.getLogger(__name__)


class IterationSignal:
    """Completion signal for a single iteration.

    `next` and `stop` are the capabilities handed to the executer. Only the
    first settlement counts; calls from a thread other than the event loop's
    are marshalled onto the loop.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop, iteration: int):
        self.iteration = iteration
        self._loop = loop
        self._future: asyncio.Future[IterationOutcome] = loop.create_future()
        self._settled = False
        self._outcome: IterationOutcome | None = None
        self._lock = threading.Lock()

    @property
    def settled(self) -> bool:
        return self._settled

    def next(self) -> None:
        """Finish the iteration and let the loop continue."""

        self.settle(IterationOutcome.CONTINUE)

    def stop(self) -> None:
        """Finish the iteration and end the loop."""

        self.settle(IterationOutcome.TERMINATE)

    def settle(self, outcome: IterationOutcome) -> bool:
        """Record the outcome; returns False if one was already recorded."""

        with self._lock:
            if self._settled:
                log = logger.debug if outcome is self._outcome else logger.warning
                log(
                    "Ignoring %s for iteration %d: already settled as %s",
                    outcome.value,
                    self.iteration,
                    self._outcome.value,
                )
                return False
            self._settled = True
            self._outcome = outcome

        if _on_loop_thread(self._loop):
            self._set_result(outcome)
        else:
            self._loop.call_soon_threadsafe(self._set_result, outcome)
        return True

    async def wait(self) -> IterationOutcome:
        return await self._future

    def _set_result(self, outcome: IterationOutcome) -> None:
        if not self._future.done():
            self._future.set_result(outcome)


def _on_loop_thread(loop: asyncio.AbstractEventLoop) -> bool:
    try:
        return asyncio.get_running_loop() is loop
    except RuntimeError:
        return False
