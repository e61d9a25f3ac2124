from __future__ import annotations

from pathlib import Path
from typing import Any, Optional
import json


def load_json(
    path: str | Path,
    default: Optional[Any] = None,
) -> Any:
    """Load JSON from disk, returning default if the file is missing."""
    path = Path(path)
    if not path.exists():
        return default
    with path.open(encoding="utf-8") as f:
        return json.load(f)
