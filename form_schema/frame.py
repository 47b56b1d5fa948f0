"""
frame.py - tabular helpers built on :pymod:`pandas`.

errors_frame(result) -> DataFrame
    One row per finding with columns ``path``, ``message`` and ``origin``.

validate_records(frame, schema) -> DataFrame
    Validate every row of *frame* as its own document.  Dotted column names
    (as produced by :func:`pandas.json_normalize`) are folded back into nested
    mappings and null cells are treated as absent keys.
"""

from __future__ import annotations

import asyncio
import json
from typing import Any, Mapping

import pandas as pd

from .schema import FieldSchema
from .validator import ValidationResult, validate_form

__all__ = ["errors_frame", "validate_records"]

_COLUMNS = ["path", "message", "origin"]


def errors_frame(result: ValidationResult) -> pd.DataFrame:
    rows = [(e.path, e.message, "sync") for e in result.errors]
    rows += [(e.path, e.message, "async") for e in result.async_errors or []]
    return pd.DataFrame(rows, columns=_COLUMNS)


def _unflatten(record: Mapping[str, Any]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for key, value in record.items():
        if value is None:
            continue
        *parents, leaf = key.split(".")
        node = out
        for part in parents:
            node = node.setdefault(part, {})
            if not isinstance(node, dict):
                raise ValueError(f"column '{key}' nests under a non-object column '{part}'")
        if isinstance(node.get(leaf), dict):
            raise ValueError(f"column '{key}' clashes with nested columns under the same name")
        node[leaf] = value
    return out


async def _validate_all(documents: list[dict[str, Any]], schema: Mapping[str, FieldSchema]) -> list[ValidationResult]:
    return [await validate_form(doc, schema) for doc in documents]


def validate_records(frame: pd.DataFrame, schema: Mapping[str, FieldSchema]) -> pd.DataFrame:
    # to_json hands back plain Python scalars and turns NaN/NaT into null
    records = json.loads(frame.to_json(orient="records", date_format="iso"))
    documents = [_unflatten(r) for r in records]
    results = asyncio.run(_validate_all(documents, schema))

    rows = []
    for label, result in zip(frame.index, results):
        rows += [(label, *r) for r in errors_frame(result).itertuples(index=False)]
    return pd.DataFrame(rows, columns=["row", *_COLUMNS])
