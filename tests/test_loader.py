import json
import tempfile
import unittest
from pathlib import Path

from form_schema import loader

class LoaderTests(unittest.TestCase):
    def test_load_schema_from_file(self):
        data = {
            "title": "T",
            "version": "1",
            "description": "d",
            "fields": {"name": {"type": "string"}},
        }
        with tempfile.NamedTemporaryFile("w+", suffix=".json", delete=False) as tmp:
            json.dump(data, tmp)
            tmp.flush()
            path = Path(tmp.name)

        try:
            loaded = loader.load_schema(path)
            self.assertEqual(loaded, data)
        finally:
            path.unlink(missing_ok=True)

    def test_load_schema_from_package_resource(self):
        schema = loader.load_schema("user_schema.json")
        self.assertEqual(schema["title"], "User Sign-up")
        self.assertEqual(list(schema["fields"]), ["personal", "account", "roleSpecific"])

    def test_bundled_lookup_uses_basename(self):
        schema = loader.load_schema("somewhere/else/contact_schema.json")
        self.assertEqual(schema["title"], "Contact List")

    def test_returns_fresh_copies(self):
        first = loader.load_schema("user_schema.json")
        first["fields"].clear()
        second = loader.load_schema("user_schema.json")
        self.assertIn("personal", second["fields"])

    def test_load_schema_not_found(self):
        with self.assertRaises(FileNotFoundError):
            loader.load_schema("does_not_exist.json")

    def test_invalid_json_raises_value_error(self):
        with tempfile.NamedTemporaryFile("w+", delete=False) as tmp:
            tmp.write("{not json")  # malformed
            tmp.flush()
            p = Path(tmp.name)

        try:
            with self.assertRaisesRegex(ValueError, "Invalid JSON"):
                loader.load_schema(p)
        finally:
            p.unlink(missing_ok=True)

    def test_empty_file_raises_value_error(self):
        with tempfile.NamedTemporaryFile("w+", delete=False) as tmp:
            p = Path(tmp.name) # File is created but empty

        try:
            with self.assertRaises(ValueError):
                loader.load_schema(p)
        finally:
            p.unlink(missing_ok=True)
