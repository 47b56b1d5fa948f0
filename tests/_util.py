"""Shared helpers for the form-schema test-suite (std-lib only)."""
from __future__ import annotations

import copy
import json
import tempfile
from pathlib import Path
from typing import Any

# ------------------------------------------------------------------ #
# Repository-relative paths                                           #
# ------------------------------------------------------------------ #
ROOT       = Path(__file__).resolve().parents[1]
SCHEMA_DIR = ROOT / "form_schema" / "schemas"

USER_J    = SCHEMA_DIR / "user_schema.json"
CONTACT_J = SCHEMA_DIR / "contact_schema.json"

# ------------------------------------------------------------------ #
# Sample documents                                                   #
# ------------------------------------------------------------------ #
_VALID_USER: dict[str, Any] = {
    "personal": {
        "firstName": "Alice",
        "lastName":  "Smith",
        "email":     "alice@company.com",
    },
    "account": {
        "password":        "P@ssw0rd1",
        "confirmPassword": "P@ssw0rd1",
        "role":            "customer",
    },
    "roleSpecific": {"loyalty": 42},
}

def valid_user(**sections: dict[str, Any]) -> dict[str, Any]:
    """Deep copy of the valid user document with *sections* merged in."""
    doc = copy.deepcopy(_VALID_USER)
    for name, patch in sections.items():
        if patch is None:
            doc[name] = None
        elif isinstance(doc.get(name), dict) and name != "roleSpecific":
            doc[name].update(patch)
        else:
            doc[name] = patch
    return doc

def pairs(result) -> list[tuple[str, str]]:
    """(path, message) tuples of the synchronous errors."""
    return [(e.path, e.message) for e in result.errors]

# ------------------------------------------------------------------ #
# Tiny helpers                                                       #
# ------------------------------------------------------------------ #
def tmp_json(obj: Any) -> Path:
    """Write *obj* to a temp file and return its Path (caller must unlink)."""
    fh = tempfile.NamedTemporaryFile(delete=False, suffix=".json")
    fh.close()
    Path(fh.name).write_text(json.dumps(obj), encoding="utf-8")
    return Path(fh.name)
