import unittest

import pandas as pd

from form_schema.example import USER_SCHEMA
from form_schema.frame import errors_frame, validate_records
from form_schema.schema import BooleanField, NumberField, ObjectField, StringField
from form_schema.validator import ValidationError, ValidationResult


class ErrorsFrameTests(unittest.TestCase):
    def test_columns_and_origin(self):
        result = ValidationResult(
            valid=False,
            errors=[ValidationError("a", "x")],
            async_errors=[ValidationError("b", "y")],
        )
        df = errors_frame(result)
        self.assertEqual(list(df.columns), ["path", "message", "origin"])
        self.assertEqual(df.values.tolist(), [["a", "x", "sync"], ["b", "y", "async"]])

    def test_empty(self):
        df = errors_frame(ValidationResult(valid=True))
        self.assertTrue(df.empty)
        self.assertEqual(list(df.columns), ["path", "message", "origin"])


class ValidateRecordsTests(unittest.TestCase):
    def test_rows_validated_independently(self):
        schema = {
            "name": StringField(required=True, min_length=2),
            "age": NumberField(integer=True, min=0),
            "active": BooleanField(),
        }
        df = pd.DataFrame(
            {"name": ["Ann", "B", None], "age": [30, -1, 2.5], "active": [True, False, True]},
            index=["r1", "r2", "r3"],
        )
        report = validate_records(df, schema)
        self.assertEqual(list(report.columns), ["row", "path", "message", "origin"])
        self.assertEqual(report.values.tolist(), [
            ["r2", "name", "Min length 2", "sync"],
            ["r2", "age", "Min 0", "sync"],
            ["r3", "name", "Field is required", "sync"],
            ["r3", "age", "Must be integer", "sync"],
        ])

    def test_dotted_columns_are_nested(self):
        rows = [
            {
                "personal": {"firstName": "Alice", "lastName": "Smith", "email": "alice@company.com"},
                "account": {"password": "P@ssw0rd1", "confirmPassword": "P@ssw0rd1", "role": "admin"},
                "roleSpecific": {"level": 0},
            },
        ]
        df = pd.json_normalize(rows)
        report = validate_records(df, USER_SCHEMA)
        self.assertEqual(report.values.tolist(), [[0, "roleSpecific.level", "Min 1", "sync"]])

    def test_leaf_and_parent_column_conflict(self):
        df = pd.DataFrame({"a": ["x"], "a.b": [1]})
        with self.assertRaisesRegex(ValueError, "column 'a.b'"):
            validate_records(df, {"a": StringField()})

    def test_parent_then_leaf_column_conflict(self):
        df = pd.DataFrame({"a.b": [1], "a": ["x"]})
        with self.assertRaisesRegex(ValueError, "column 'a' clashes"):
            validate_records(df, {"a": StringField()})

    def test_null_leaf_does_not_conflict(self):
        schema = {"a": ObjectField(properties={"b": NumberField()})}
        report = validate_records(pd.DataFrame({"a": [None], "a.b": [1]}), schema)
        self.assertTrue(report.empty)

    def test_all_valid(self):
        schema = {"x": ObjectField(properties={"y": NumberField()})}
        report = validate_records(pd.DataFrame({"x.y": [1, 2]}), schema)
        self.assertTrue(report.empty)
