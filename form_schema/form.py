"""
form.py - High-level API for working with a named form schema.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from . import loader
from .schema import FieldSchema, Validator, build_schema
from .validator import ValidationResult, validate_form, validate_form_sync

_REQUIRED_KEYS = ("title", "description", "version", "fields")


class Form:
    """A titled, versioned set of top-level field schemas."""

    def __init__(self, title: str, description: str, version: str, fields: Mapping[str, Any],
                 *, validators: Mapping[str, Validator] | None = None):
        self.title = title
        self.description = description
        self.version = version
        self.fields: dict[str, FieldSchema] = build_schema(fields, validators=validators)

    @classmethod
    def load(cls, path: str | Path, *, validators: Mapping[str, Validator] | None = None) -> "Form":
        """Load a form from a JSON file (or bundled resource) and build its nodes.

        Named ``validate`` hooks in the file are looked up in *validators*.
        """
        data = loader.load_schema(path)
        missing = [k for k in _REQUIRED_KEYS if k not in data]
        if missing:
            raise ValueError(
                f"Schema at '{path}' is not a valid form schema. Missing keys: {missing}."
            )
        return cls(
            title=data["title"],
            description=data["description"],
            version=data["version"],
            fields=data["fields"],
            validators=validators,
        )

    async def validate(self, document: Any) -> ValidationResult:
        return await validate_form(document, self.fields)

    def validate_sync(self, document: Any) -> ValidationResult:
        return validate_form_sync(document, self.fields)

    def __repr__(self) -> str:
        return f"Form(title={self.title!r}, version={self.version!r}, fields={list(self.fields)})"
