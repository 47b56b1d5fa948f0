"""
example.py - the sign-up form used throughout the docs and tests.

``USER_SCHEMA`` is authored directly as node literals.  ``EXAMPLE_VALIDATORS``
exposes the same custom rules by name so the bundled ``user_schema.json``
can reference them.
"""

from __future__ import annotations

from typing import Any, Optional

from .schema import DiscriminatedUnionField, NumberField, ObjectField, StringField

__all__ = ["USER_SCHEMA", "EXAMPLE_VALIDATORS"]


def first_name_not_blank(value: str, all_values: Any) -> Optional[str]:
    return None if value.strip() else "First name cannot be empty"


def company_email(value: str, all_values: Any) -> Optional[str]:
    return None if value.endswith("@company.com") else "Company email required"


def passwords_match(value: str, all_values: Any) -> Optional[str]:
    password = (all_values.get("account") or {}).get("password")
    return None if value == password else "Passwords must match"


EXAMPLE_VALIDATORS = {
    "first_name_not_blank": first_name_not_blank,
    "company_email": company_email,
    "passwords_match": passwords_match,
}

USER_SCHEMA = {
    "personal": ObjectField(
        properties={
            "firstName": StringField(
                required=True,
                min_length=2,
                error_message="First name too short",
                validate=first_name_not_blank,
            ),
            "lastName": StringField(required=True, min_length=2),
            "email": StringField(required=True, email=True, validate=company_email),
        }
    ),
    "account": ObjectField(
        properties={
            "password": StringField(required=True, min_length=8),
            "confirmPassword": StringField(required=True, validate=passwords_match),
            "role": StringField(required=True),
        }
    ),
    "roleSpecific": DiscriminatedUnionField(
        discriminator="account.role",
        schemas={
            "customer": ObjectField(properties={"loyalty": NumberField(min=0)}),
            "admin": ObjectField(properties={"level": NumberField(min=1)}),
        },
    ),
}
