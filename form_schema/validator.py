"""
validator.py - error-accumulating, schema-driven validation engine
==================================================================

Walks a candidate document against a tree of field schemas and collects
*every* violation instead of stopping at the first one.

Public API
----------
ValidationError
    One ``(path, message)`` finding.

ValidationResult
    ``valid`` flag plus the ordered ``errors`` and ``async_errors`` lists.

validate_form(document, schema) -> ValidationResult   (coroutine)
    Depth-first, pre-order walk.  Object properties are visited in schema
    declaration order; array items in index order.

validate_form_sync(document, schema) -> ValidationResult
    Runs :func:`validate_form` to completion on a fresh event loop.

Only three conditions stop descent into a subtree: a required value that is
absent, the wrong container kind for an array/object node, and a
discriminator value with no matching branch.  Custom validator failures are
recorded as findings; nothing raised by a hook escapes the walk.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
import math
import numbers
import re
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from . import utils
from .schema import (
    ArrayField,
    AsyncValidatorField,
    BooleanField,
    DiscriminatedUnionField,
    FieldSchema,
    NumberField,
    ObjectField,
    SchemaError,
    StringField,
)
from .utils import ABSENT

__all__ = [
    "SchemaError",
    "ValidationError",
    "ValidationResult",
    "validate_form",
    "validate_form_sync",
]

log = logging.getLogger(__name__)

# --------------------------------------------------------------------------- #
# Result types                                                                #
# --------------------------------------------------------------------------- #

@dataclass(frozen=True)
class ValidationError:
    path: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"path": self.path, "message": self.message}


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    errors: list[ValidationError] = field(default_factory=list)
    async_errors: Optional[list[ValidationError]] = None

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready form; ``asyncErrors`` appears only when non-empty."""
        out: dict[str, Any] = {
            "valid": self.valid,
            "errors": [e.to_dict() for e in self.errors],
        }
        if self.async_errors:
            out["asyncErrors"] = [e.to_dict() for e in self.async_errors]
        return out


class _Collector:
    """Append-only error sequences owned by a single run."""

    def __init__(self) -> None:
        self.errors: list[ValidationError] = []
        self.async_errors: list[ValidationError] = []

    def add(self, path: str, message: str) -> None:
        self.errors.append(ValidationError(path, message))

    def add_async(self, path: str, message: str) -> None:
        self.async_errors.append(ValidationError(path, message))

    def result(self) -> ValidationResult:
        return ValidationResult(
            valid=not self.errors and not self.async_errors,
            errors=list(self.errors),
            async_errors=list(self.async_errors) or None,
        )


# --------------------------------------------------------------------------- #
# Message helpers                                                             #
# --------------------------------------------------------------------------- #

def _override(node: FieldSchema, default: str) -> str:
    """Literal ``error_message`` wins over a built-in default."""
    if isinstance(node.error_message, str) and node.error_message:
        return node.error_message
    return default


def _required_message(node: FieldSchema) -> str:
    if isinstance(node.error_message, str):
        return node.error_message
    return "Field is required"


def _remainder(v: Any, divisor: Any) -> Any:
    if isinstance(v, numbers.Integral) and isinstance(divisor, numbers.Integral):
        return v % divisor
    return math.fmod(v, divisor)


def _num(n: Any) -> str:
    return utils._display_value(n)


async def _call_hook(hook: Any, value: Any, all_values: Any) -> Any:
    res = hook(value, all_values)
    if inspect.isawaitable(res):
        res = await res
    return res


# --------------------------------------------------------------------------- #
# Built-in checks                                                             #
# --------------------------------------------------------------------------- #

def _check_string(v: Any, node: StringField, path: str, out: _Collector) -> None:
    if not isinstance(v, str):
        out.add(path, "Must be a string")
        return
    if node.min_length is not None and len(v) < node.min_length:
        out.add(path, _override(node, f"Min length {node.min_length}"))
    if node.max_length is not None and len(v) > node.max_length:
        out.add(path, _override(node, f"Max length {node.max_length}"))
    if node.pattern is not None and not re.search(node.pattern, v):
        out.add(path, _override(node, "Invalid format"))
    if (node.email or node.format == "email") and not utils._is_email(v):
        out.add(path, _override(node, "Invalid email"))
    if (node.url or node.format == "url") and not utils._is_url(v):
        out.add(path, _override(node, "Invalid URL"))
    if node.contains and node.contains not in v:
        out.add(path, _override(node, f'Must contain "{node.contains}"'))
    if node.starts_with and not v.startswith(node.starts_with):
        out.add(path, _override(node, f'Must start with "{node.starts_with}"'))
    if node.ends_with and not v.endswith(node.ends_with):
        out.add(path, _override(node, f'Must end with "{node.ends_with}"'))
    if node.format == "date" and not utils._is_date(v):
        out.add(path, _override(node, "Invalid date"))
    if node.format == "date-time" and not utils._is_datetime(v):
        out.add(path, _override(node, "Invalid date-time"))


def _check_number(v: Any, node: NumberField, path: str, out: _Collector) -> None:
    if not utils._is_number(v):
        out.add(path, "Must be a number")
        return
    if node.min is not None and v < node.min:
        out.add(path, f"Min {_num(node.min)}")
    if node.max is not None and v > node.max:
        out.add(path, f"Max {_num(node.max)}")
    if node.integer and not utils._is_integer(v):
        out.add(path, "Must be integer")
    if node.positive and v <= 0:
        out.add(path, "Must be positive")
    if node.negative and v >= 0:
        out.add(path, "Must be negative")
    if node.multiple_of is not None:
        # a zero divisor never divides
        if node.multiple_of == 0 or _remainder(v, node.multiple_of) != 0:
            out.add(path, f"Must be multiple of {_num(node.multiple_of)}")


# --------------------------------------------------------------------------- #
# Core recursive walker                                                       #
# --------------------------------------------------------------------------- #

async def _validate_value(
    value: Any, node: FieldSchema, path: str, all_values: Any, out: _Collector
) -> None:
    # 1) required / optional gate ------------------------------------------
    if node.required and (value is ABSENT or value is None):
        out.add(path, _required_message(node))
        return
    if value is ABSENT:
        return

    # 2) type dispatch ------------------------------------------------------
    if isinstance(node, StringField):
        _check_string(value, node, path, out)
    elif isinstance(node, NumberField):
        _check_number(value, node, path, out)
    elif isinstance(node, BooleanField):
        if not isinstance(value, bool):
            out.add(path, "Must be a boolean")
    elif isinstance(node, ArrayField):
        await _validate_array(value, node, path, all_values, out)
    elif isinstance(node, ObjectField):
        await _validate_object(value, node, path, all_values, out)
    elif isinstance(node, DiscriminatedUnionField):
        await _validate_union(value, node, path, all_values, out)
    elif isinstance(node, AsyncValidatorField):
        await _validate_async(value, node, path, all_values, out)
        return
    else:
        raise SchemaError(f"{path or 'root'}: unsupported schema node {type(node).__name__}")

    # 3) custom validator ---------------------------------------------------
    if node.validate is not None:
        try:
            res = await _call_hook(node.validate, value, all_values)
        except Exception as exc:
            log.debug("custom validator at %r raised", path, exc_info=True)
            out.add(path, str(exc) or "Validation error")
        else:
            if res:
                out.add(path, str(res))


async def _validate_array(
    v: Any, node: ArrayField, path: str, all_values: Any, out: _Collector
) -> None:
    if not isinstance(v, (list, tuple)):
        out.add(path, "Must be an array")
        return
    if node.min_items is not None and len(v) < node.min_items:
        out.add(path, f"Min items {node.min_items}")
    if node.max_items is not None and len(v) > node.max_items:
        out.add(path, f"Max items {node.max_items}")
    if node.unique_items and len({utils._canonical(i) for i in v}) != len(v):
        out.add(path, "Items must be unique")
    for idx, item in enumerate(v):
        await _validate_value(item, node.items, f"{path}[{idx}]", all_values, out)


async def _validate_object(
    v: Any, node: ObjectField, path: str, all_values: Any, out: _Collector
) -> None:
    if not isinstance(v, Mapping):
        out.add(path, "Must be an object")
        return
    for key, child in node.properties.items():
        child_path = f"{path}.{key}" if path else key
        await _validate_value(v.get(key, ABSENT), child, child_path, all_values, out)


async def _validate_union(
    v: Any, node: DiscriminatedUnionField, path: str, all_values: Any, out: _Collector
) -> None:
    dv = utils._resolve_path(all_values, node.discriminator)
    branch = None
    if dv is None or isinstance(dv, (str, int, float)):
        branch = node.schemas.get(utils._display_value(dv))
    if branch is None:
        out.add(path, f'Invalid discriminator "{utils._display_value(dv)}"')
        return
    await _validate_value(v, branch, path, all_values, out)


async def _validate_async(
    v: Any, node: AsyncValidatorField, path: str, all_values: Any, out: _Collector
) -> None:
    if node.validate is None:
        return
    try:
        res = await _call_hook(node.validate, v, all_values)
    except Exception as exc:
        log.debug("async validator at %r raised", path, exc_info=True)
        out.add_async(path, str(exc) or "Validation error")
    else:
        if res:
            out.add_async(path, str(res))


# --------------------------------------------------------------------------- #
# Entry points                                                                #
# --------------------------------------------------------------------------- #

async def validate_form(
    document: Any, schema: Mapping[str, FieldSchema]
) -> ValidationResult:
    """Validate *document* against the top-level field mapping *schema*."""
    root = ObjectField(properties=schema)
    out = _Collector()
    log.debug("validating document against %d top-level field(s)", len(schema))
    await _validate_value(document, root, "", document, out)
    result = out.result()
    log.debug(
        "validation finished: %d error(s), %d async error(s)",
        len(out.errors),
        len(out.async_errors),
    )
    return result


def validate_form_sync(
    document: Any, schema: Mapping[str, FieldSchema]
) -> ValidationResult:
    """Blocking wrapper around :func:`validate_form`."""
    return asyncio.run(validate_form(document, schema))
