from __future__ import annotations

import sys
from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any

from loguru import logger

if TYPE_CHECKING:
    from loguru import Record
else:  # pragma: no cover - runtime fallback for typing-only import
    Record = dict[str, Any]  # type: ignore[assignment]

MODULE_ROOT = "diffrender"
DEFAULT_LEVEL_KEY = "default"
_STDERR_FORMAT = "<level>{level: <8}</level> <cyan>{name}</cyan> - {message}"

logger.remove()


def configure_logging(
    *,
    base_level: str,
    module_levels: Mapping[str, str] | None = None,
    log_file: Path | None = None,
) -> None:
    """Configure the global loguru logger with per-module filtering.

    Records go to ``log_file`` when given, to stderr otherwise.
    """
    logger.remove()
    module_filter = _ModuleLevelFilter(_normalize_levels(module_levels or {}, base_level))
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(log_file, level="TRACE", filter=module_filter)
    else:
        logger.add(sys.stderr, level="TRACE", filter=module_filter, format=_STDERR_FORMAT)
    logger.enable(MODULE_ROOT)


def _normalize_levels(levels: Mapping[str, str], base_level: str) -> dict[str, int]:
    normalized = {
        (module.strip().rstrip(".").lower() or DEFAULT_LEVEL_KEY): _level_to_no(level_name)
        for module, level_name in levels.items()
    }
    normalized.setdefault(DEFAULT_LEVEL_KEY, _level_to_no(base_level))
    return normalized


def _level_to_no(level_name: str) -> int:
    normalized = level_name.strip().upper()
    try:
        return logger.level(normalized).no
    except ValueError as exc:  # pragma: no cover - loguru raises ValueError
        raise ValueError(f"Invalid log level '{level_name}'") from exc


class _ModuleLevelFilter:
    """Filter that applies the threshold of the most specific matching module."""

    def __init__(self, levels: Mapping[str, int]) -> None:
        self._levels = dict(levels)
        self._module_keys = sorted(
            (key for key in self._levels if key != DEFAULT_LEVEL_KEY),
            key=len,
            reverse=True,
        )

    def __call__(self, record: Record) -> bool:
        return record["level"].no >= self.threshold_for((record["name"] or "").lower())

    def threshold_for(self, module_path: str) -> int:
        for key in self._module_keys:
            if module_path == key or module_path.startswith(f"{key}."):
                return self._levels[key]
        return self._levels[DEFAULT_LEVEL_KEY]
