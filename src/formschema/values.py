"""Recover the current value of a choice field from its item flags."""

from collections.abc import Mapping
from typing import Any, Iterable, Optional, Union

from .enums import TriState
from .models import ChoiceItem, FieldDescriptor
from .parser import parse_items

FieldLike = Union[FieldDescriptor, Mapping[str, Any], Iterable[Any]]


def _items(field: FieldLike) -> list[ChoiceItem]:
    if isinstance(field, FieldDescriptor):
        items = field.items
    elif isinstance(field, Mapping):
        items = field.get("items")
    else:
        items = field
    return parse_items(items or [])


def _is_on(flag: Optional[bool]) -> bool:
    return TriState.of(flag) is TriState.TRUE


def array_ordered_values(field: FieldLike) -> list[Any]:
    """Values of a checkbox group, one slot per item, None where unchecked."""
    return [item.value if _is_on(item.checked) else None for item in _items(field)]


def array_unordered_values(field: FieldLike) -> list[Any]:
    """Values of every checked or selected item, in item order."""
    return [
        item.value
        for item in _items(field)
        if _is_on(item.checked) or _is_on(item.selected)
    ]


def single_value(field: FieldLike) -> Any:
    """Value of the last checked item, or None when nothing is checked."""
    value = None
    for item in _items(field):
        if _is_on(item.checked):
            value = item.value
    return value
