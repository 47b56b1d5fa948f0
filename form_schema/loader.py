"""
loader.py - read JSON form schemas from disk or from the packaged resources.

Public API
----------
load_schema(path) : parse a schema file and return a fresh ``dict``
"""

from __future__ import annotations

import copy
import json
import logging
from importlib import resources
from pathlib import Path
from typing import Any

log = logging.getLogger(__name__)

# --------------------------------------------------------------------------- #
# Helpers                                                                     #
# --------------------------------------------------------------------------- #

def _parse(text: str, origin: str) -> dict[str, Any]:
    """Parse JSON *text*, raising crisp errors on failure."""
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {origin}: {exc}") from exc


# --------------------------------------------------------------------------- #
# Public utilities                                                            #
# --------------------------------------------------------------------------- #

def load_schema(path: str | Path) -> dict[str, Any]:
    p = Path(path)

    # 1) direct file on disk ------------------------------------------------
    if p.is_file():
        log.debug("loading schema from %s", p)
        return copy.deepcopy(_parse(p.read_text(encoding="utf-8"), str(p)))

    # 2) bundled resource (basename first, original second) ----------------
    pkg = resources.files("form_schema.schemas")
    for name in (p.name, str(path)):
        try:
            text = pkg.joinpath(name).read_text(encoding="utf-8")
        except (FileNotFoundError, IsADirectoryError):
            continue  # try the next candidate
        log.debug("loading bundled schema %s", name)
        return copy.deepcopy(_parse(text, name))

    # 3) give up -----------------------------------------------------------
    raise FileNotFoundError(
        f"Schema '{path}' not found on disk or in package data"
    )
