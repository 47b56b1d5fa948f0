"""
parser.py - document loading and the ``form-schema`` command line
==================================================================

Public API
----------
`parse_document(source) -> Any`
    Convert user-supplied *source* (Mapping / Path / JSON file path / JSON
    literal) into a plain Python value ready for validation.

`build_arg_parser() -> argparse.ArgumentParser`
    The CLI definition.

`main(argv=None) -> int`
    Load a form schema, validate one document, print the result.  Exit code
    is ``0`` when the document is valid, ``1`` when it is not and ``2`` when
    the schema or document could not be loaded.
"""

from __future__ import annotations

import argparse
import importlib
import json
import logging
import sys
from pathlib import Path
from typing import Any, Mapping, Sequence

from .card import to_markdown_card
from .form import Form
from .schema import SchemaError

log = logging.getLogger(__name__)

# --------------------------------------------------------------------------- #
# Document parsing                                                            #
# --------------------------------------------------------------------------- #

def parse_document(source: str | Path | Mapping[str, Any]) -> Any:
    """Convert *source* to a raw document (no validation).

    Parameters
    ----------
    source
        Supported variants:
        * ``Mapping`` - copied directly.
        * ``Path`` - JSON file on disk.
        * ``str``  - existing file path → load; else parsed as a JSON literal.
    """

    # Mapping - already dict-like ------------------------------------------
    if isinstance(source, Mapping):
        return dict(source)

    # Path - read JSON file -------------------------------------------------
    if isinstance(source, Path):
        text, origin = source.read_text(encoding="utf-8"), str(source)
    elif isinstance(source, str):
        p = Path(source)
        if p.is_file():
            text, origin = p.read_text(encoding="utf-8"), str(p)
        else:
            text, origin = source, "document literal"
    else:
        raise TypeError(f"Unsupported type for parse_document: {type(source)}")

    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {origin}: {exc}") from exc

# --------------------------------------------------------------------------- #
# Command line                                                                #
# --------------------------------------------------------------------------- #

def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="form-schema",
        description="Validate a JSON document against a form schema and report every violation.",
        fromfile_prefix_chars="@",
    )
    p.add_argument("--schema", required=True, metavar="FILE",
                   help="Form schema JSON file (or the name of a bundled schema).")
    p.add_argument("--document", required=True, metavar="FILE_OR_JSON",
                   help="Document to validate: a JSON file path or a JSON literal.")
    p.add_argument("--validators", metavar="MODULE:NAME",
                   help="Mapping of named custom validators, e.g. form_schema.example:EXAMPLE_VALIDATORS.")
    p.add_argument("--format", choices=["json", "markdown"], default="json",
                   help="Output format for the validation result.")
    p.add_argument("--verbosity", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                   help="Logging level.")
    return p


def _import_validators(target: str) -> Mapping[str, Any]:
    """Resolve ``package.module:NAME`` to a validator registry."""
    module_name, _, attr = target.partition(":")
    if not attr:
        raise ValueError(f"--validators expects MODULE:NAME, got '{target}'")
    registry = getattr(importlib.import_module(module_name), attr)
    if not isinstance(registry, Mapping):
        raise TypeError(f"{target} is not a mapping of validators")
    return registry


def main(argv: Sequence[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=args.verbosity,
        format="%(asctime)s %(levelname)s %(message)s",
    )

    try:
        validators = _import_validators(args.validators) if args.validators else None
        form = Form.load(args.schema, validators=validators)
        document = parse_document(args.document)
    except (OSError, ImportError, AttributeError, ValueError, TypeError) as exc:  # SchemaError is a ValueError
        kind = "schema" if isinstance(exc, SchemaError) else "input"
        print(f"form-schema: {kind} error: {exc}", file=sys.stderr)
        return 2

    log.info("Validating against %s (v%s)", form.title, form.version)
    result = form.validate_sync(document)

    if args.format == "markdown":
        print(to_markdown_card(result, title=form.title))
    else:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    return 0 if result.valid else 1
