from __future__ import annotations

import asyncio
import inspect
import logging
from time import perf_counter
from typing import Any, Mapping

from loop_runner.signals import IterationSignal
from loop_runner.types import (
    IterationOutcome,
    IterationState,
    LoopConfig,
    LoopState,
    validate_delay,
)

logger = logging.getLogger(__name__)


class LoopRunner:
    """Run a task repeatedly, one iteration at a time.

    Each iteration waits for the current delay, invokes the executer and then
    waits for it to signal completion before the condition is checked again.
    The first iteration never waits. Executer failures end the loop quietly.

    Exceptions raised by `condition` are not caught: they propagate out of
    `run()` and end the loop.
    """

    def __init__(self, config: LoopConfig):
        self.config = config
        self._state = IterationState()
        self._active = False

    @property
    def state(self) -> LoopState:
        return self._state.state

    @property
    def iterations(self) -> int:
        """Number of iterations started by the current or last run."""

        return self._state.iterations

    @property
    def delay(self) -> int:
        """Wait in milliseconds before the next iteration."""

        return self._state.delay

    async def run(self) -> None:
        """Drive the loop until the condition fails or the executer stops it."""

        if self._active:
            raise RuntimeError("LoopRunner is already running")

        self._active = True
        state = self._state = IterationState(next_delay=self.config.delay)
        logger.info("Starting loop (delay=%dms)", self.config.delay)
        try:
            while await self._should_continue(state):
                state.state = LoopState.WAITING
                await asyncio.sleep(state.delay / 1000)

                state.iterations += 1
                logger.debug(
                    "Iteration %d starting (waited %dms)", state.iterations, state.delay
                )
                start = perf_counter()
                outcome = await self.iterate(state)
                logger.debug(
                    "Iteration %d finished with %s in %.3fs",
                    state.iterations,
                    outcome.value,
                    perf_counter() - start,
                )

                if outcome is IterationOutcome.TERMINATE:
                    state.running = False
                else:
                    state.delay = state.next_delay
        finally:
            state.running = False
            state.state = LoopState.TERMINATED
            self._active = False

        logger.info("Loop terminated after %d iteration(s)", state.iterations)

    async def iterate(self, state: IterationState) -> IterationOutcome:
        """Invoke the executer once and wait for its outcome.

        A coroutine executer settles the iteration when it returns: with its
        returned `IterationOutcome`, or `CONTINUE` otherwise. A `next()` or
        `stop()` it schedules to run after returning arrives too late and is
        ignored with a warning.
        """

        executer = self.config.executer
        if executer is None:
            return IterationOutcome.CONTINUE

        state.state = LoopState.EXECUTING
        signal = IterationSignal(asyncio.get_running_loop(), state.iterations)

        def set_delay(delay: int) -> None:
            try:
                state.next_delay = validate_delay(delay)
            except ValueError:
                logger.error(
                    "Invalid delay %r on iteration %d; stopping loop",
                    delay,
                    state.iterations,
                )
                signal.stop()
                raise

        try:
            result = executer(self.config.data, signal.next, signal.stop, set_delay)
            if inspect.isawaitable(result):
                result = await result
                if not isinstance(result, IterationOutcome) and not signal.settled:
                    result = IterationOutcome.CONTINUE
            if isinstance(result, IterationOutcome):
                signal.settle(result)
        except Exception:
            logger.exception(
                "Executer failed on iteration %d; stopping loop", state.iterations
            )
            signal.settle(IterationOutcome.TERMINATE)

        return await signal.wait()

    async def _should_continue(self, state: IterationState) -> bool:
        if not state.running:
            return False

        condition = self.config.condition
        if condition is None:
            return True

        result = condition(self.config.data)
        if inspect.isawaitable(result):
            result = await result
        return bool(result)


async def run_loop(
    config: LoopConfig | Mapping[str, Any] | None = None, **options: Any
) -> None:
    """Run a loop from a LoopConfig, a mapping, or keyword options.

    Example:
        await run_loop(delay=500, data=state, condition=check, executer=task)
    """

    if config is not None and options:
        raise TypeError("Pass either a config or keyword options, not both")
    if config is None:
        config = LoopConfig(**options)
    elif isinstance(config, Mapping):
        config = LoopConfig(**config)

    await LoopRunner(config).run()
