"""Sequential async loop runner."""

from loop_runner.config import load_config
from loop_runner.logging_config import init_logging
from loop_runner.runner import LoopRunner, run_loop
from loop_runner.types import IterationOutcome, LoopConfig, LoopState

__all__ = [
    "IterationOutcome",
    "LoopConfig",
    "LoopRunner",
    "LoopState",
    "init_logging",
    "load_config",
    "run_loop",
]
