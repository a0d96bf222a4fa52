from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Awaitable, Callable, Union

from pydantic import BaseModel, ConfigDict, Field


class IterationOutcome(str, Enum):
    """How a single iteration finished."""

    CONTINUE = "continue"
    TERMINATE = "terminate"


class LoopState(str, Enum):
    IDLE = "idle"
    WAITING = "waiting"
    EXECUTING = "executing"
    TERMINATED = "terminated"


SignalFn = Callable[[], None]
SetDelayFn = Callable[[int], None]
ConditionFn = Callable[[Any], Union[bool, Awaitable[bool]]]
ExecuterFn = Callable[[Any, SignalFn, SignalFn, SetDelayFn], Any]


class LoopConfig(BaseModel):
    """Options for a single loop run.

    `data` is handed to `condition` and `executer` as-is and is never copied,
    so both callables can use it to share state across iterations.
    """

    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)

    delay: int = Field(
        default=0,
        ge=0,
        description="Milliseconds to wait between iterations (not before the first).",
    )
    data: Any = Field(
        default=None,
        description="Caller-owned value passed to condition and executer.",
    )
    condition: ConditionFn | None = Field(
        default=None,
        description="Predicate over data; None means always continue.",
    )
    executer: ExecuterFn | None = Field(
        default=None,
        description="Task called as executer(data, next, stop, set_delay).",
    )


@dataclass
class IterationState:
    """Mutable state for one run of the loop.

    `delay` is the wait before the upcoming iteration; `next_delay` is what it
    becomes after a successful iteration and is what `set_delay` changes.
    """

    delay: int = 0
    next_delay: int = 0
    running: bool = True
    iterations: int = 0
    state: LoopState = LoopState.IDLE


def validate_delay(delay: Any) -> int:
    """Check a delay in milliseconds and return it."""

    if isinstance(delay, bool) or not isinstance(delay, int):
        raise ValueError(f"delay must be an integer number of ms, got {delay!r}")
    if delay < 0:
        raise ValueError(f"delay must be >= 0, got {delay}")
    return delay
