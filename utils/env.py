from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

"""Environment helper utilities.

Loads a `.env` file from the project root so that planner settings
(e.g., ``INVENTORY_STRICT_VALIDATION``) defined there become available via
``os.getenv``, and parses typed values out of the environment.
"""

__all__ = ["load_project_dotenv", "env_flag", "env_int", "env_float"]

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _find_project_root(start: Path | None = None) -> Path:
    """Traverse upwards until we find a directory that contains `pyproject.toml`."""
    current = start or Path(__file__).resolve().parent
    for _ in range(10):  # safety break
        if (current / "pyproject.toml").exists():
            return current
        if current.parent == current:
            break
        current = current.parent
    return Path(__file__).resolve().parent


def load_project_dotenv() -> bool:
    """Load environment variables from the project-level `.env` if present.

    Returns True when a `.env` file was found and loaded.
    """
    dotenv_path = _find_project_root() / ".env"
    if not dotenv_path.exists():
        return False
    load_dotenv(dotenv_path=dotenv_path, override=False)
    return True


def env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in _TRUE_VALUES


def env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return int(raw)


def env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return float(raw)
