"""Helpers for writing settings files in tests."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any


def write_json(path: Path, data: dict[str, Any]) -> Path:
    """Write *data* as JSON to *path*, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def bump_mtime(path: Path, seconds: int = 2) -> None:
    """Move the modification time of *path* forward.

    Filesystems with coarse timestamps may not register a rewrite that happens
    within the same tick; pushing the mtime makes the change observable.
    """
    stat = path.stat()
    os.utime(path, ns=(stat.st_atime_ns, stat.st_mtime_ns + seconds * 1_000_000_000))
