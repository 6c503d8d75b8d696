from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from typing import Mapping, Optional

LOG_LEVEL_VAR = "MRVSUDOKU_LOG_LEVEL"
MAX_SOLUTIONS_VAR = "MRVSUDOKU_MAX_SOLUTIONS"

DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    log_level: int = logging.WARNING
    max_solutions: Optional[int] = None  # None = enumerate everything


def resolve_log_level(raw: Optional[str]) -> int:
    name = (raw or DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"{LOG_LEVEL_VAR}: unknown log level '{raw}'")
    return level


def resolve_max_solutions(raw: Optional[str]) -> Optional[int]:
    if raw is None or not raw.strip():
        return None
    try:
        limit = int(raw)
    except ValueError:
        raise ValueError(f"{MAX_SOLUTIONS_VAR}: '{raw}' is not an integer") from None
    if limit < 0:
        raise ValueError(f"{MAX_SOLUTIONS_VAR}: must be >= 0, got {limit}")
    return limit or None  # 0 = unlimited


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    env = os.environ if environ is None else environ
    return Settings(
        log_level=resolve_log_level(env.get(LOG_LEVEL_VAR)),
        max_solutions=resolve_max_solutions(env.get(MAX_SOLUTIONS_VAR)),
    )
