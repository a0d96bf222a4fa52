import sys
import time
from pathlib import Path

import pytest

SRC_DIR = (Path(__file__).resolve().parents[1] / "src").as_posix()
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)


class CallRecorder:
    """Collects executer calls and their start times."""

    def __init__(self) -> None:
        self.calls: list[float] = []
        self.started = time.perf_counter()

    def mark(self) -> int:
        self.calls.append(time.perf_counter())
        return len(self.calls)

    @property
    def count(self) -> int:
        return len(self.calls)

    def gaps(self) -> list[float]:
        times = [self.started, *self.calls]
        return [b - a for a, b in zip(times, times[1:])]


@pytest.fixture
def recorder() -> CallRecorder:
    return CallRecorder()
