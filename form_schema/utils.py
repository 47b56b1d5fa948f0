"""
utils.py – shared, low-level utilities for the form-schema package.

This module consolidates common helpers for:
- Canonical encoding (structural equality of arbitrary JSON-like values)
- Type checking (numbers, dates, date-times, e-mail and URL strings)
- Document lookups (dot paths resolved against the root document)
"""

from __future__ import annotations

import datetime as _dt
import json
import math
import numbers
import re
from typing import Any, Mapping, Sequence

# --------------------------------------------------------------------------- #
# Sentinel                                                                    #
# --------------------------------------------------------------------------- #

class _Absent:
    """Marker for a value that is not present in the document at all."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT = _Absent()

# --------------------------------------------------------------------------- #
# Canonical encoding                                                          #
# --------------------------------------------------------------------------- #

def _json_safe(x: Any) -> Any:
    """Recursively prepare an object for deterministic JSON encoding."""
    if isinstance(x, Mapping):
        return {str(k): _json_safe(v) for k, v in x.items()}
    if isinstance(x, (list, tuple)):
        return [_json_safe(v) for v in x]
    return x


def _canonical(obj: Any) -> str:
    """Return a key-order independent encoding of *obj*."""
    return json.dumps(
        _json_safe(obj), sort_keys=True, separators=(",", ":"), default=repr
    )


# --------------------------------------------------------------------------- #
# Type Checking & Validation Helpers                                          #
# --------------------------------------------------------------------------- #

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
URL_RE = re.compile(r"https?://\S+")

_DATE_RE = re.compile(
    r"^\d{4}-\d{2}-\d{2}"
    r"(?:T\d{2}:\d{2}(?::\d{2}(?:\.\d{3}|\.\d{6})?)?(?:Z|[+\-]\d{2}:\d{2})?)?$"
)
_DT_RE = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(?:\.\d{1,6})?(?:Z|[+\-]\d{2}:\d{2})$")


def _is_number(value: Any) -> bool:
    """True for finite real numbers; booleans are not numbers here."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    if isinstance(value, numbers.Integral):
        return True
    return math.isfinite(value)


def _is_integer(value: Any) -> bool:
    if isinstance(value, numbers.Integral):
        return True
    return float(value).is_integer()


def _is_email(value: str) -> bool:
    return EMAIL_RE.match(value) is not None


def _is_url(value: str) -> bool:
    return URL_RE.match(value) is not None


def _is_date(value: Any) -> bool:
    """Return True iff *value* is an ISO calendar date, optionally with a time."""
    if not isinstance(value, str) or not _DATE_RE.fullmatch(value):
        return False
    try:
        _dt.datetime.fromisoformat(value.replace("Z", "+00:00"))
        return True
    except ValueError:
        return False


def _is_datetime(value: Any) -> bool:
    """Return True iff *value* is a valid ISO-8601 date-time string."""
    if not isinstance(value, str) or not _DT_RE.fullmatch(value):
        return False
    try:
        _dt.datetime.fromisoformat(value.replace("Z", "+00:00"))
        return True
    except ValueError:
        return False


# --------------------------------------------------------------------------- #
# Document lookups                                                            #
# --------------------------------------------------------------------------- #

def _resolve_path(document: Any, dotted: str) -> Any:
    """Walk *dotted* from *document*; any missing segment yields ``ABSENT``."""
    current = document
    for part in dotted.split("."):
        if isinstance(current, Mapping):
            current = current.get(part, ABSENT)
        elif (
            isinstance(current, Sequence)
            and not isinstance(current, (str, bytes))
            and part.isdigit()
            and int(part) < len(current)
        ):
            current = current[int(part)]
        else:
            return ABSENT
    return current


def _display_value(value: Any) -> str:
    """Render a resolved document value the way it appears in messages."""
    if value is ABSENT:
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
