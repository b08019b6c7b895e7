from __future__ import annotations

from typing import Any

from .errors import IllegalValueError, MissingFieldError


def is_any_none(*items: Any) -> bool:
    return any(item is None for item in items)


def require_present(**fields: Any) -> None:
    """Raise MissingFieldError for the first keyword argument that is None."""
    if not is_any_none(*fields.values()):
        return
    missing = next(name for name, value in fields.items() if value is None)
    raise MissingFieldError(missing)


def require_absent(shape: str, **fields: Any) -> None:
    """Raise IllegalValueError for the first keyword argument that is set."""
    for name, value in fields.items():
        if value is not None:
            raise IllegalValueError(f"A {shape} task cannot have a '{name}' field")
