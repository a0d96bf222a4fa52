from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Mapping

import yaml

from loop_runner.types import LoopConfig, validate_delay


def load_config(
    path: str | Path,
    *,
    data: Any = None,
    condition: Callable[..., Any] | None = None,
    executer: Callable[..., Any] | None = None,
) -> LoopConfig:
    """Load a LoopConfig from a YAML file.

    The file only carries plain options (`delay`); callables and shared data
    are supplied by the caller.
    """

    config_path = Path(path)
    with config_path.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, Mapping):
        raise ValueError("Config must be a mapping")

    unknown = set(raw) - {"delay"}
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(sorted(map(str, unknown)))}")

    delay = validate_delay(raw.get("delay", 0))

    return LoopConfig(
        delay=delay,
        data=data,
        condition=condition,
        executer=executer,
    )
