"""
schema.py - the closed set of schema node variants
===================================================

A schema is a tree of *field schemas*.  Every node carries the common
modifiers defined on :class:`FieldSchema`; the concrete variants add their own
constraints and children.

Public API
----------
StringField, NumberField, BooleanField, ArrayField, ObjectField,
DiscriminatedUnionField, AsyncValidatorField
    The node variants walked by :pymod:`form_schema.validator`.

Validator
    Protocol for custom validator hooks: ``(value, all_values) -> str | None``
    or an awaitable resolving to the same.

from_mapping(spec, *, validators=None) -> FieldSchema
build_schema(fields, *, validators=None) -> dict[str, FieldSchema]
    Build nodes from the compact camelCase dict literal form, e.g.
    ``{"type": "string", "required": True, "minLength": 2}``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Mapping, Optional, Pattern, Protocol, Union

__all__ = [
    "SchemaError",
    "Validator",
    "FieldSchema",
    "StringField",
    "NumberField",
    "BooleanField",
    "ArrayField",
    "ObjectField",
    "DiscriminatedUnionField",
    "AsyncValidatorField",
    "from_mapping",
    "build_schema",
]

# --------------------------------------------------------------------------- #
# Exceptions & hooks                                                          #
# --------------------------------------------------------------------------- #

class SchemaError(ValueError):
    """Raised when a schema definition itself is malformed."""


class Validator(Protocol):
    """Custom validation hook attached to a node.

    Receives the value at the node and the *entire* input document.  Returns a
    violation message, ``None`` for no violation, or an awaitable resolving to
    either.
    """

    def __call__(
        self, value: Any, all_values: Any
    ) -> Optional[str] | Awaitable[Optional[str]]: ...


ErrorMessage = Union[str, Callable[[Any], str]]

# --------------------------------------------------------------------------- #
# Node variants                                                               #
# --------------------------------------------------------------------------- #

@dataclass(frozen=True, kw_only=True)
class FieldSchema:
    """Modifiers shared by every node."""

    required: bool = False
    # Reserved: not consulted by the engine.
    nullable: bool = False
    error_message: Optional[ErrorMessage] = None
    validate: Optional[Validator] = None


@dataclass(frozen=True, kw_only=True)
class StringField(FieldSchema):
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    pattern: Optional[Union[str, Pattern[str]]] = None
    email: bool = False
    url: bool = False
    contains: Optional[str] = None
    starts_with: Optional[str] = None
    ends_with: Optional[str] = None
    format: Optional[str] = None  # "date" | "date-time" | "email" | "url"


@dataclass(frozen=True, kw_only=True)
class NumberField(FieldSchema):
    min: Optional[float] = None
    max: Optional[float] = None
    integer: bool = False
    positive: bool = False
    negative: bool = False
    multiple_of: Optional[float] = None


@dataclass(frozen=True, kw_only=True)
class BooleanField(FieldSchema):
    pass


@dataclass(frozen=True, kw_only=True)
class ArrayField(FieldSchema):
    items: FieldSchema
    min_items: Optional[int] = None
    max_items: Optional[int] = None
    unique_items: bool = False


@dataclass(frozen=True, kw_only=True)
class ObjectField(FieldSchema):
    properties: Mapping[str, FieldSchema] = field(default_factory=dict)


@dataclass(frozen=True, kw_only=True)
class DiscriminatedUnionField(FieldSchema):
    """Node whose branch is picked by a value elsewhere in the document.

    ``discriminator`` is a dot path resolved from the *root* document, never
    from the value at this node.
    """

    discriminator: str
    schemas: Mapping[str, FieldSchema] = field(default_factory=dict)


@dataclass(frozen=True, kw_only=True)
class AsyncValidatorField(FieldSchema):
    """Node validated only by its hook; findings land in ``async_errors``."""

    depends_on: Optional[str] = None


# --------------------------------------------------------------------------- #
# Dict-literal builder                                                        #
# --------------------------------------------------------------------------- #

_COMMON = {
    "required": "required",
    "nullable": "nullable",
    "errorMessage": "error_message",
    "validate": "validate",
    "description": None,  # documentation only
}

_KEYS: dict[str, dict[str, Optional[str]]] = {
    "string": {
        "minLength": "min_length",
        "maxLength": "max_length",
        "pattern": "pattern",
        "email": "email",
        "url": "url",
        "contains": "contains",
        "startsWith": "starts_with",
        "endsWith": "ends_with",
        "format": "format",
    },
    "number": {
        "min": "min",
        "max": "max",
        "integer": "integer",
        "positive": "positive",
        "negative": "negative",
        "multipleOf": "multiple_of",
    },
    "boolean": {},
    "array": {
        "items": "items",
        "minItems": "min_items",
        "maxItems": "max_items",
        "uniqueItems": "unique_items",
    },
    "object": {"properties": "properties"},
    "discriminatedUnion": {"discriminator": "discriminator", "schemas": "schemas"},
    "asyncValidator": {"dependsOn": "depends_on"},
}

_CLASSES: dict[str, type] = {
    "string": StringField,
    "number": NumberField,
    "boolean": BooleanField,
    "array": ArrayField,
    "object": ObjectField,
    "discriminatedUnion": DiscriminatedUnionField,
    "asyncValidator": AsyncValidatorField,
}


def _resolve_validator(
    hook: Any, validators: Mapping[str, Validator] | None, path: str
) -> Validator:
    if callable(hook):
        return hook
    if isinstance(hook, str):
        if validators is None or hook not in validators:
            raise SchemaError(f"{path}: unknown validator '{hook}'")
        return validators[hook]
    raise SchemaError(f"{path}: 'validate' must be callable or a validator name")


def from_mapping(
    spec: Mapping[str, Any] | FieldSchema,
    *,
    validators: Mapping[str, Validator] | None = None,
    path: str = "root",
) -> FieldSchema:
    """Build one node from its dict literal form.

    Already-built nodes are returned unchanged so literal and dataclass forms
    can be mixed freely.  Nested ``items``, ``properties`` and ``schemas`` are
    built recursively.
    """
    if isinstance(spec, FieldSchema):
        return spec
    if not isinstance(spec, Mapping):
        raise SchemaError(f"{path}: expected a mapping, got {type(spec).__name__}")

    kind = spec.get("type")
    if kind not in _CLASSES:
        raise SchemaError(f"{path}: unknown schema type {kind!r}")

    allowed = {**_COMMON, **_KEYS[kind]}
    unknown = set(spec) - set(allowed) - {"type"}
    if unknown:
        raise SchemaError(f"{path}: unexpected keys {sorted(unknown)} for type '{kind}'")

    kwargs: dict[str, Any] = {}
    for key, value in spec.items():
        attr = allowed.get(key)
        if attr is None:
            continue
        if attr == "validate":
            value = _resolve_validator(value, validators, path)
        elif attr == "pattern" and isinstance(value, str):
            value = re.compile(value)
        elif attr == "items":
            value = from_mapping(value, validators=validators, path=f"{path}[]")
        elif attr in ("properties", "schemas"):
            if not isinstance(value, Mapping):
                raise SchemaError(f"{path}: '{key}' must be a mapping")
            value = {
                k: from_mapping(v, validators=validators, path=f"{path}.{k}")
                for k, v in value.items()
            }
        kwargs[attr] = value

    try:
        return _CLASSES[kind](**kwargs)
    except TypeError as exc:  # missing items / discriminator
        raise SchemaError(f"{path}: {exc}") from exc


def build_schema(
    fields: Mapping[str, Any],
    *,
    validators: Mapping[str, Validator] | None = None,
) -> dict[str, FieldSchema]:
    """Build a top-level ``{name: node}`` mapping, preserving declaration order."""
    return {
        name: from_mapping(spec, validators=validators, path=name)
        for name, spec in fields.items()
    }
