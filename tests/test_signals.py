import asyncio
import threading

from loop_runner.signals import IterationSignal
from loop_runner.types import IterationOutcome


def test_first_settlement_wins() -> None:
    async def main() -> tuple[bool, IterationOutcome]:
        signal = IterationSignal(asyncio.get_running_loop(), iteration=1)
        signal.stop()
        second = signal.settle(IterationOutcome.CONTINUE)
        return second, await signal.wait()

    second, outcome = asyncio.run(main())

    assert second is False
    assert outcome is IterationOutcome.TERMINATE


def test_settle_from_worker_thread() -> None:
    async def main() -> IterationOutcome:
        signal = IterationSignal(asyncio.get_running_loop(), iteration=1)
        worker = threading.Thread(target=signal.next)
        worker.start()
        outcome = await signal.wait()
        worker.join()
        return outcome

    assert asyncio.run(main()) is IterationOutcome.CONTINUE
