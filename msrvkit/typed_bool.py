"""JSON values that must be exactly ``true`` or exactly ``false``."""

from __future__ import annotations

import json

__all__ = ["TypedBoolError", "dump_true", "dump_false", "load_true", "load_false"]


class TypedBoolError(ValueError):
    """Raised when a value does not hold the one boolean it must hold."""


def dump_true() -> str:
    """Serialize the constant ``true``."""
    return json.dumps(True)


def dump_false() -> str:
    """Serialize the constant ``false``."""
    return json.dumps(False)


def _load_exact(text: str, expected: bool) -> bool:
    expected_text = json.dumps(expected)
    try:
        value = json.loads(text)
    except json.JSONDecodeError as exc:
        raise TypedBoolError(f"invalid JSON, expected {expected_text}: {exc}") from exc
    if not isinstance(value, bool):
        raise TypedBoolError(f"invalid type: {value!r}, expected {expected_text}")
    if value is not expected:
        raise TypedBoolError(
            f"Value '{json.dumps(value)}' must be '{expected_text}'"
        )
    return value


def load_true(text: str) -> bool:
    """Parse ``text`` as JSON that must be ``true``."""
    return _load_exact(text, True)


def load_false(text: str) -> bool:
    """Parse ``text`` as JSON that must be ``false``."""
    return _load_exact(text, False)