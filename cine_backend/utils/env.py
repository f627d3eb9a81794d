"""
Environment-backed settings: `.env` loading plus typed readers for single variables.

Empty or unset variables fall back to the caller's default; malformed values
raise RuntimeError naming the variable so startup fails loudly.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv


def load_env(*, override: bool = False) -> Path | None:
    """
    Load the first `.env` found at the repo root or the current working directory.

    Returns the loaded path, or None when no `.env` file exists.
    """
    repo_root = Path(__file__).resolve().parents[2]
    for path in (repo_root / ".env", Path.cwd() / ".env"):
        if path.is_file():
            load_dotenv(dotenv_path=path, override=override)
            return path
    return None


def _raw(name: str) -> str:
    return (os.getenv(name) or "").strip()


def env_str(name: str, default: str) -> str:
    return _raw(name) or default


def env_float(name: str, default: float) -> float:
    raw = _raw(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be a number, got {raw!r}") from exc


def env_int(name: str, default: int) -> int:
    raw = _raw(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}") from exc


def env_list(name: str, default: list[str]) -> list[str]:
    """Comma-separated list; blank items are dropped."""
    raw = _raw(name)
    if not raw:
        return list(default)
    return [item.strip() for item in raw.split(",") if item.strip()]
