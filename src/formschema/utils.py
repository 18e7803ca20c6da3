"""Utility functions for formschema"""

import re
from pathlib import Path
from typing import Any

_WHITESPACE = re.compile(r"\s+")


def canonicalify(p: Path | str) -> Path:
    return Path(p).expanduser().resolve()


def ensure_path(p: Path | str) -> Path:
    path = canonicalify(p)
    path.mkdir(parents=True, exist_ok=True)
    return path


def stringify(value: Any) -> str:
    """Render a scalar the way a browser would show it in a form.

    Examples:
        >>> stringify(True)
        'true'
        >>> stringify(2.0)
        '2'
        >>> stringify(None)
        'null'
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def slugify(label: Any) -> str:
    """Turn a choice label into an input name fragment.

    Examples:
        >>> slugify("label 1")
        'label-1'
        >>> slugify("  Big   Box ")
        'big-box'
    """
    return _WHITESPACE.sub("-", stringify(label).strip()).lower()


def describe_validation_error(error, title: str) -> str:
    """Flatten a pydantic ValidationError into a readable multi-line message."""
    error_lines = [title]
    for item in error.errors():
        loc = " -> ".join(str(part) for part in item["loc"]) or "<root>"
        error_lines.append(f"  - {loc}: {item['msg']}")
    return "\n".join(error_lines)
