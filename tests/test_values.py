"""Value extractor unit tests"""

from formschema.models import ChoiceItem, FieldDescriptor
from formschema.parser import parse_array
from formschema.values import array_ordered_values, array_unordered_values, single_value


def test_array_ordered_values():
    field = {
        "items": [
            {"label": "l0", "value": 0},
            {"label": "l1", "value": 1, "checked": True},
            {"label": "l2", "value": 2, "checked": False},
        ]
    }

    assert array_ordered_values(field) == [None, 1, None]


def test_array_ordered_values_ignores_selected():
    items = [{"value": "a", "selected": True}, {"value": "b", "checked": True}]

    assert array_ordered_values(items) == [None, "b"]


def test_array_unordered_values():
    field = {
        "items": [
            {"label": "l0", "value": 0},
            {"label": "l1", "value": 1, "checked": True},
            {"label": "l2", "value": 2, "checked": False},
            {"label": "l3", "value": 3, "selected": True},
        ]
    }

    assert array_unordered_values(field) == [1, 3]


def test_array_unordered_values_nothing_selected():
    assert array_unordered_values({"items": [{"value": 1}, {"value": 2}]}) == []


def test_single_value():
    field = {
        "items": [
            {"label": "l0", "value": 0},
            {"label": "l1", "value": 1, "checked": True},
            {"label": "l2", "value": 2, "checked": False},
            {"label": "l3", "value": 3, "selected": False},
        ]
    }

    assert single_value(field) == 1


def test_single_value_last_checked_wins():
    items = [
        ChoiceItem(value="a", checked=True),
        ChoiceItem(value="b"),
        ChoiceItem(value="c", checked=True),
    ]

    assert single_value(items) == "c"


def test_single_value_ignores_selected():
    assert single_value({"items": [{"value": 1, "selected": True}]}) is None


def test_single_value_empty_field():
    assert single_value(FieldDescriptor()) is None


def test_extractors_on_compiled_field():
    field = parse_array({"type": "array", "anyOf": ["a", "b", "c"]}, "tags")
    items = [item.model_copy(update={"checked": item.value != "b"}) for item in field.items]
    field = field.model_copy(update={"items": items})

    assert array_ordered_values(field) == ["a", None, "c"]
    assert array_unordered_values(field) == ["a", "c"]
    assert single_value(field) == "c"


def test_non_bool_flags_are_not_counted():
    items = [
        {"value": "a", "checked": 1},
        {"value": "b", "checked": "true"},
        {"value": "c", "selected": "yes"},
    ]

    assert single_value(items) is None
    assert array_ordered_values(items) == [None, None, None]
    assert array_unordered_values(items) == []
