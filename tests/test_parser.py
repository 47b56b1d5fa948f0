import contextlib
import io
import json
import tempfile
import unittest
from pathlib import Path

from form_schema import parser
from tests._util import CONTACT_J, tmp_json, valid_user


class ParseDocumentTests(unittest.TestCase):
    def setUp(self):
        self.base = valid_user()

    def test_parse_mapping(self):
        out = parser.parse_document(self.base)
        self.assertEqual(out, self.base)
        self.assertIsNot(out, self.base)

    def test_parse_path(self):
        p = tmp_json(self.base)
        try:
            self.assertEqual(parser.parse_document(p), self.base)
            self.assertEqual(parser.parse_document(str(p)), self.base)
        finally:
            p.unlink(missing_ok=True)

    def test_parse_json_literal(self):
        literal = json.dumps(self.base)
        self.assertEqual(parser.parse_document(literal), self.base)

    def test_non_object_literal(self):
        self.assertEqual(parser.parse_document("[1, 2]"), [1, 2])

    def test_invalid_literal(self):
        with self.assertRaisesRegex(ValueError, "Invalid JSON in document literal"):
            parser.parse_document("--not json")

    def test_unsupported_type(self):
        with self.assertRaises(TypeError):
            parser.parse_document(42)


class MainTests(unittest.TestCase):
    def run_main(self, *argv):
        out, err = io.StringIO(), io.StringIO()
        with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
            code = parser.main(list(argv))
        return code, out.getvalue(), err.getvalue()

    def test_valid_document_exit_zero(self):
        doc = json.dumps(valid_user())
        code, out, _ = self.run_main(
            "--schema", "user_schema.json",
            "--validators", "form_schema.example:EXAMPLE_VALIDATORS",
            "--document", doc,
        )
        self.assertEqual(code, 0)
        self.assertEqual(json.loads(out), {"valid": True, "errors": []})

    def test_invalid_document_exit_one(self):
        doc = json.dumps({"contacts": []})
        code, out, _ = self.run_main("--schema", str(CONTACT_J), "--document", doc)
        self.assertEqual(code, 1)
        self.assertEqual(json.loads(out)["errors"], [
            {"path": "owner", "message": "Field is required"},
            {"path": "contacts", "message": "Min items 1"},
        ])

    def test_markdown_output(self):
        code, out, _ = self.run_main(
            "--schema", "contact_schema.json", "--document", '{"contacts": []}',
            "--format", "markdown",
        )
        self.assertEqual(code, 1)
        self.assertIn("## Contact List", out)
        self.assertIn("- `owner`: Field is required", out)

    def test_schema_errors_exit_two(self):
        code, _, err = self.run_main("--schema", "user_schema.json", "--document", "{}")
        self.assertEqual(code, 2)
        self.assertIn("schema error", err)

    def test_missing_schema_exit_two(self):
        code, _, err = self.run_main("--schema", "nope.json", "--document", "{}")
        self.assertEqual(code, 2)
        self.assertIn("not found", err)

    def test_bad_validator_target(self):
        code, _, err = self.run_main(
            "--schema", "contact_schema.json", "--document", "{}",
            "--validators", "form_schema.example",
        )
        self.assertEqual(code, 2)
        self.assertIn("MODULE:NAME", err)

    def test_missing_required_flag(self):
        with self.assertRaises(SystemExit), contextlib.redirect_stderr(io.StringIO()):
            parser.main(["--document", "{}"])
