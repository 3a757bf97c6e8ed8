"""Static make reference list.

Loaded once per process from the packaged ``data/makes.json`` and shared
read-only by every session.
"""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path

MAKES_FILE = Path(__file__).resolve().parent.parent / "data" / "makes.json"


@lru_cache(maxsize=1)
def load_makes() -> tuple[str, ...]:
    with MAKES_FILE.open(encoding="utf-8") as f:
        makes = json.load(f)

    return tuple(sorted({str(make) for make in makes}, key=str.lower))
