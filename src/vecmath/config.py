# MIT License (see LICENSE)
"""
Library settings read from environment variables.

Settings are loaded once and cached; call reset_settings() after changing
the environment (tests do this through monkeypatch).

Environment variables:
    VECMATH_LEGACY_PROMOTION:   "1" selects the asymmetric promotion rule
                                (float preferred only on the left operand).
    VECMATH_SCALAR_INT_DTYPE:   dtype assumed for Python int scalars.
    VECMATH_SCALAR_FLOAT_DTYPE: dtype assumed for Python float scalars.
"""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from functools import lru_cache

import numpy as np

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    """
    Process-wide numeric policy.

    Attributes:
        legacy_promotion: Use the asymmetric float-preference rule.
        scalar_int_dtype: Element type given to plain Python ints.
        scalar_float_dtype: Element type given to plain Python floats.
    """
    legacy_promotion: bool = False
    scalar_int_dtype: np.dtype = np.dtype(np.int64)
    scalar_float_dtype: np.dtype = np.dtype(np.float64)


def _env_flag(name: str, default: str = "0") -> bool:
    raw = os.environ.get(name, default).strip()
    if raw not in ("0", "1"):
        raise ValueError(f"{name} must be '0' or '1', got {raw!r}")
    return raw == "1"


def _env_dtype(name: str, default: str, kind: str) -> np.dtype:
    raw = os.environ.get(name, default).strip()
    try:
        dt = np.dtype(raw)
    except TypeError as exc:
        raise ValueError(f"{name} is not a numpy dtype: {raw!r}") from exc
    if dt.kind not in kind:
        raise ValueError(f"{name} must have kind in {kind!r}, got {dt}")
    return dt


@lru_cache(maxsize=None)
def get_settings() -> Settings:
    """Load settings from the environment (cached)."""
    settings = Settings(
        legacy_promotion=_env_flag("VECMATH_LEGACY_PROMOTION"),
        scalar_int_dtype=_env_dtype("VECMATH_SCALAR_INT_DTYPE", "int64", "iu"),
        scalar_float_dtype=_env_dtype("VECMATH_SCALAR_FLOAT_DTYPE", "float64", "f"),
    )
    if settings.legacy_promotion:
        logger.debug("legacy promotion enabled: float only preferred on the left operand")
    return settings


def reset_settings() -> None:
    """Drop cached settings so the next get_settings() re-reads the environment."""
    get_settings.cache_clear()
