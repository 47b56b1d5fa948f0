# form_schema/card.py
from __future__ import annotations
from typing import Any, Sequence

from .validator import ValidationError, ValidationResult

__all__ = ["to_markdown_card"]

def _format_scalar(v: Any) -> str:
    """Return a Markdown-safe scalar string."""
    if v is True:   return "true"
    if v is False:  return "false"
    if v is None:   return "null"
    return str(v)

def _format_errors(errors: Sequence[ValidationError]) -> str:
    """Return a bulleted Markdown list of findings (no surrounding blank lines)."""
    if not errors:
        return "_none_"
    return "\n".join(f"- `{e.path or '(root)'}`: {e.message}" for e in errors)

def to_markdown_card(result: ValidationResult, *, heading_level: int = 2,
                     title: str = "Validation Result") -> str:
    """
    Render *result* as a Markdown card.

    Parameters
    ----------
    result : ValidationResult
        Outcome of :func:`form_schema.validate_form`.
    heading_level : int, default 2
        Markdown heading level for the sections (##, ###, …).
    title : str
        Text of the first heading.

    Returns
    -------
    str
        Markdown document.  The async section is only present when the run
        produced async errors.
    """
    h = "#" * heading_level
    parts: list[str] = [
        f"{h} {title}",
        f"- **valid**: {_format_scalar(result.valid)}",
        f"- **errors**: {len(result.errors)}",
        "",
        f"{h} Errors",
        _format_errors(result.errors),
        "",
    ]
    if result.async_errors:
        parts += [f"{h} Async Errors", _format_errors(result.async_errors), ""]
    return "\n".join(parts).rstrip()
