"""Environment-driven defaults for the command-line pipeline."""

from __future__ import annotations

import logging
import os
from pathlib import Path


logger = logging.getLogger(__name__)

_DATA_PATH_ENV = "FIGHTERSTATS_DATA_PATH"
_CHART_PATH_ENV = "FIGHTERSTATS_CHART_PATH"
_TOP_N_ENV = "FIGHTERSTATS_TOP_N"

_DATA_PATH_DEFAULT = "ufc-fighters-statistics.csv"
_CHART_PATH_DEFAULT = "feature_importances.png"
_TOP_N_DEFAULT = 0


def _env_path(name: str, default: str) -> Path:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return Path(default)
    return Path(raw.strip())


def _env_int(name: str, default: int, *, min_value: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    return value


def default_data_path() -> Path:
    return _env_path(_DATA_PATH_ENV, _DATA_PATH_DEFAULT)


def default_chart_path() -> Path:
    return _env_path(_CHART_PATH_ENV, _CHART_PATH_DEFAULT)


def default_top_n() -> int:
    """Number of ranked features the CLI prints; 0 means all of them."""

    return _env_int(_TOP_N_ENV, _TOP_N_DEFAULT, min_value=0)
