"""Introspection helpers for dataclass instances."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Callable, Optional

from liftmath.errors import NonStructValueError

FieldFilter = Callable[[str], bool]


@dataclass(frozen=True)
class FieldRef:
    """A reference to one field of a dataclass instance."""

    target: Any
    name: str

    def get(self) -> Any:
        """Return the current value of the referenced field."""
        return getattr(self.target, self.name)

    def set(self, value: Any) -> None:
        """Store a new value in the referenced field."""
        setattr(self.target, self.name, value)


def no_filter(name: str) -> bool:
    """Accept every field name."""
    return isinstance(name, str)


def is_struct_val(s: Any) -> None:
    """Raise NonStructValueError unless ``s`` is a dataclass instance."""
    if not dataclasses.is_dataclass(s) or isinstance(s, type):
        raise NonStructValueError(
            f"Function requires a struct as target. | Got: {type(s).__name__}"
        )


def get_struct_name(s: Any) -> str:
    """Return the type name of a dataclass instance."""
    is_struct_val(s)
    return type(s).__name__


def get_struct_field_names(s: Any, field_filter: FieldFilter) -> list[str]:
    """Return the names of the fields that pass the filter, in order."""
    is_struct_val(s)
    return [f.name for f in dataclasses.fields(s) if field_filter(f.name)]


def get_struct_vals(s: Any, field_filter: FieldFilter) -> list[Any]:
    """Return the values of the fields that pass the filter, in order."""
    return [getattr(s, name) for name in get_struct_field_names(s, field_filter)]


def get_struct_field_refs(s: Any, field_filter: FieldFilter) -> list[FieldRef]:
    """Return references to the fields that pass the filter, in order."""
    return [FieldRef(s, name) for name in get_struct_field_names(s, field_filter)]


def get_error(value: Any) -> Optional[BaseException]:
    """Return ``value`` if it is an exception, otherwise None."""
    return value if isinstance(value, BaseException) else None