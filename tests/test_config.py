from pathlib import Path

import pytest
from pydantic import ValidationError

from loop_runner.config import load_config
from loop_runner.types import LoopConfig


def test_load_config_reads_delay(tmp_path: Path) -> None:
    path = tmp_path / "loop.yaml"
    path.write_text("delay: 250\n", encoding="utf-8")
    data: dict = {}

    def executer(d, next, stop, set_delay) -> None:
        stop()

    cfg = load_config(path, data=data, executer=executer)

    assert cfg.delay == 250
    assert cfg.data is data
    assert cfg.executer is executer
    assert cfg.condition is None


def test_load_config_empty_file_uses_defaults(tmp_path: Path) -> None:
    path = tmp_path / "loop.yaml"
    path.write_text("", encoding="utf-8")

    assert load_config(path).delay == 0


@pytest.mark.parametrize(
    "text",
    [
        "- 1\n- 2\n",
        "delay: -5\n",
        "delay: fast\n",
        "delay: true\n",
        "delay: 10\nretries: 3\n",
    ],
)
def test_load_config_rejects_bad_files(tmp_path: Path, text: str) -> None:
    path = tmp_path / "loop.yaml"
    path.write_text(text, encoding="utf-8")

    with pytest.raises(ValueError):
        load_config(path)


def test_loop_config_keeps_data_by_reference() -> None:
    data = {"items": [1, 2, 3]}

    cfg = LoopConfig(data=data)

    assert cfg.data is data
    assert cfg.delay == 0


def test_loop_config_validation() -> None:
    with pytest.raises(ValidationError):
        LoopConfig(delay=-1)
    with pytest.raises(ValidationError):
        LoopConfig(executer="not callable")
    with pytest.raises(ValidationError):
        LoopConfig(retries=3)
