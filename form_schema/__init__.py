"""
form_schema – schema-driven validation that reports every violation at once.
"""
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
    Validator,
    build_schema,
    from_mapping,
)
from .validator import ValidationError, ValidationResult, validate_form, validate_form_sync
from .form import Form
from .parser import parse_document
from .card import to_markdown_card

__all__ = [
    "ArrayField",
    "AsyncValidatorField",
    "BooleanField",
    "DiscriminatedUnionField",
    "FieldSchema",
    "NumberField",
    "ObjectField",
    "StringField",
    "Validator",
    "SchemaError",
    "build_schema",
    "from_mapping",
    "ValidationError",
    "ValidationResult",
    "validate_form",
    "validate_form_sync",
    "Form",
    "parse_document",
    "to_markdown_card",
]
