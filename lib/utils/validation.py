"""Validation helpers for configuration input."""

from typing import Any, Dict


def ensure(condition: bool, message: str) -> None:
    if not condition:
        raise ValueError(message)


def ensure_mapping(value: Any, what: str) -> Dict[str, Any]:
    """Return ``value`` as a dict, treating ``None`` as empty."""

    if value is None:
        return {}
    ensure(isinstance(value, dict), f"{what} must be a mapping")
    return dict(value)
