from __future__ import annotations

import logging
import os
import random
from pathlib import Path
from typing import Optional

import numpy as np


def set_global_seed(seed: int) -> None:
    """Set random seeds for Python and NumPy."""

    os.environ.setdefault("PYTHONHASHSEED", str(int(seed)))
    random.seed(seed)
    np.random.seed(seed)


def configure_logging(level: int | str = logging.INFO) -> None:
    """Initialize application logging if it has not already been configured."""

    if isinstance(level, str):
        resolved_level = logging.getLevelName(level.upper())
        if isinstance(resolved_level, int):
            level = resolved_level
        else:
            raise ValueError(f"Invalid log level: {level}")

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def resolve_path(base_path: Optional[Path], path: str | Path) -> Path:
    """Resolve ``path`` against ``base_path`` unless it is already absolute."""

    candidate = Path(path)
    if candidate.is_absolute():
        return candidate
    base = base_path or Path.cwd()
    return base / candidate


def ensure_file_exists(path: Path, description: Optional[str] = None) -> Path:
    """Ensure ``path`` exists, raising a helpful :class:`FileNotFoundError`."""

    if not path.exists():
        desc = description or "file"
        raise FileNotFoundError(f"Required {desc} not found at {path}")
    return path
