"""Schema to field descriptor compiler.

A schema document is walked depth-first; every leaf node is dispatched by its
declared type to a parser that builds a :class:`FieldDescriptor` in stages.
Each stage returns a new descriptor, nothing is edited in place.
"""

import logging
from collections.abc import Mapping
from typing import Any, Callable, Iterable, Optional, Union

from .config import CompilerConfig
from .consts import FORMAT_INPUT_TYPES, NATIVE_MULTI_VALUE_TYPES
from .enums import InputType, SchemaType, TriState, UnsupportedTypePolicy
from .errors import UnsupportedSchemaTypeError
from .models import ChoiceItem, FieldDescriptor, SchemaNode
from .utils import slugify, stringify

logger = logging.getLogger(__name__)

Schema = Union[SchemaNode, Mapping[str, Any]]
ItemNamer = Callable[[Union[ChoiceItem, Mapping[str, Any]], int], ChoiceItem]


def set_common_fields(schema: Schema, field: FieldDescriptor) -> FieldDescriptor:
    """Apply the attributes every field kind shares.

    An explicit ``value`` already present in ``field.attrs`` takes priority
    over the schema default.
    """
    schema = SchemaNode.parse(schema)
    return field.model_copy(
        update={
            "schema_type": schema.type,
            "label": schema.title or "",
            "description": schema.description or "",
            "attrs": {
                **field.attrs,
                "value": field.attrs.get("value") or schema.default or "",
                "required": bool(schema.required),
                "disabled": bool(schema.disabled),
            },
        }
    )


def parse_items(entries: Iterable[Any]) -> list[ChoiceItem]:
    """Normalize an enum/oneOf/anyOf list into choice items.

    Bare scalars become ``{value, label}`` with the stringified value as
    label; object entries keep the members they were given.
    """
    return [_parse_item(entry) for entry in entries]


def _parse_item(entry: Any) -> ChoiceItem:
    if isinstance(entry, ChoiceItem):
        return entry
    if isinstance(entry, Mapping):
        return ChoiceItem.model_validate(dict(entry))
    return ChoiceItem(value=entry, label=stringify(entry))


def set_item_name(name: Optional[str] = None, is_radio: bool = False) -> ItemNamer:
    """Build a namer assigning input names and refs to choice items.

    Radio group members all share the field name. Other items keep a name
    they already have, or get one derived from their label.
    """

    def namer(item, index: int) -> ChoiceItem:
        item = _parse_item(item)
        update: dict[str, Any] = {}

        if is_radio and name:
            update["name"] = name
        elif not item.name:
            update["name"] = f"{name}-{slugify(item.label)}" if name else slugify(item.label)

        if name:
            update["ref"] = f"{name}-{index}"

        return item.model_copy(update=update)

    return namer


def _name_items(
    items: list[ChoiceItem], name: Optional[str], is_radio: bool = False
) -> list[ChoiceItem]:
    namer = set_item_name(name, is_radio)
    return [namer(item, index) for index, item in enumerate(items)]


def _init_field(schema: SchemaNode, name: Optional[str]) -> FieldDescriptor:
    attrs = dict(schema.attrs)
    if name:
        attrs["name"] = name
    return set_common_fields(schema, FieldDescriptor(attrs=attrs))


def _init_choice_field(
    schema: SchemaNode,
    name: Optional[str],
    entries: Iterable[Any],
    config: CompilerConfig,
) -> FieldDescriptor:
    field = _init_field(schema, name)
    return field.model_copy(
        update={
            "items": parse_items(entries),
            "min_items": schema.min_items if schema.min_items is not None else config.min_items,
            "max_items": schema.max_items if schema.max_items is not None else config.max_items,
        }
    )


def _list_value(field: FieldDescriptor) -> list:
    value = field.attrs.get("value")
    return list(value) if isinstance(value, (list, tuple)) else []


def _scalar_value(field: FieldDescriptor) -> Any:
    value = field.attrs.get("value")
    return "" if isinstance(value, (list, tuple)) else value


def parse_boolean(
    schema: Schema, name: Optional[str] = None, config: Optional[CompilerConfig] = None
) -> FieldDescriptor:
    schema = SchemaNode.parse(schema)
    field = _init_field(schema, name)

    checked = TriState.of(schema.attrs.get("checked")).resolve(bool(schema.default))
    field = field.with_attrs(
        type=field.attrs.get("type") or InputType.CHECKBOX.value,
        checked=checked,
    )

    # a checkbox is driven by `checked`, only keep a value the caller asked for
    if "value" not in schema.attrs:
        field = field.without_attrs("value")
    return field


def _input_type(schema: SchemaNode) -> str:
    if schema.attrs.get("type"):
        return schema.attrs["type"]
    if schema.format in FORMAT_INPUT_TYPES:
        return FORMAT_INPUT_TYPES[schema.format]
    if schema.type in (SchemaType.NUMBER, SchemaType.INTEGER):
        return InputType.NUMBER.value
    return InputType.TEXT.value


def parse_string(
    schema: Schema, name: Optional[str] = None, config: Optional[CompilerConfig] = None
) -> FieldDescriptor:
    """Parse a string, number or integer node.

    A node carrying ``enum`` becomes a single-choice select instead of a
    plain input.
    """
    schema = SchemaNode.parse(schema)
    if schema.enum is not None:
        return _parse_select(schema, name, config or CompilerConfig.load())

    field = _init_field(schema, name).with_attrs(type=_input_type(schema))

    constraints: dict[str, Any] = {}
    if schema.min_length is not None:
        constraints["minlength"] = schema.min_length
    if schema.max_length is not None:
        constraints["maxlength"] = schema.max_length
    if schema.pattern is not None:
        constraints["pattern"] = schema.pattern

    return field.with_attrs(**constraints)


def _parse_select(
    schema: SchemaNode, name: Optional[str], config: CompilerConfig
) -> FieldDescriptor:
    field = _init_choice_field(schema, name, schema.enum, config)
    input_type = field.attrs.get("type") or InputType.SELECT.value

    if input_type == InputType.RADIO:
        field = field.model_copy(update={"items": _name_items(field.items, name, is_radio=True)})
        return field.with_attrs(type=input_type, value=_scalar_value(field))

    return field.with_attrs(type=input_type, value=_scalar_value(field), multiple=False)


def parse_array(
    schema: Schema, name: Optional[str] = None, config: Optional[CompilerConfig] = None
) -> FieldDescriptor:
    """Parse an array node.

    The choice keyword decides the selection discipline: ``enum`` gives a
    select (multi-select unless another input type is requested), ``oneOf``
    a radio group and ``anyOf`` a checkbox group. Without a choice keyword
    the field collects free-form values.
    """
    schema = SchemaNode.parse(schema)
    config = config or CompilerConfig.load()

    if schema.enum is not None:
        field = _init_choice_field(schema, name, schema.enum, config)
        input_type = field.attrs.get("type") or InputType.SELECT.value
        field = field.with_attrs(type=input_type, value=_list_value(field))

        if input_type == InputType.SELECT:
            field = field.model_copy(update={"is_array_field": True})
            return field.with_attrs(multiple=True)
        return field

    if schema.one_of is not None:
        field = _init_choice_field(schema, name, schema.one_of, config)
        field = field.model_copy(update={"items": _name_items(field.items, name, is_radio=True)})
        return field.with_attrs(type=InputType.RADIO.value, value=_scalar_value(field))

    if schema.any_of is not None:
        field = _init_choice_field(schema, name, schema.any_of, config)
        items = _name_items(field.items, name)
        defaults = _list_value(field)
        field = field.model_copy(update={"items": items, "is_array_field": True})

        # one slot per item, None until that item is checked
        value = [item.value if item.value in defaults else None for item in items]
        return field.with_attrs(type=InputType.CHECKBOX.value, value=value)

    field = _init_choice_field(schema, name, [], config)
    input_type = field.attrs.get("type") or InputType.TEXT.value
    field = field.with_attrs(type=input_type)

    if input_type == InputType.SELECT:
        field = field.model_copy(update={"is_array_field": True})
        return field.with_attrs(value=_list_value(field), multiple=True)
    if input_type in NATIVE_MULTI_VALUE_TYPES:
        return field
    return field.model_copy(update={"is_array_field": True})


PARSERS: dict[SchemaType, Callable[..., FieldDescriptor]] = {
    SchemaType.BOOLEAN: parse_boolean,
    SchemaType.STRING: parse_string,
    SchemaType.NUMBER: parse_string,
    SchemaType.INTEGER: parse_string,
    SchemaType.ARRAY: parse_array,
}


def _resolve_type(
    schema: SchemaNode, name: Optional[str], config: CompilerConfig
) -> Optional[SchemaType]:
    try:
        return SchemaType(schema.type)
    except ValueError:
        pass

    if config.unsupported_type is UnsupportedTypePolicy.ERROR:
        raise UnsupportedSchemaTypeError(schema.type, name)
    if config.unsupported_type is UnsupportedTypePolicy.WARN:
        logger.warning(
            f"Skipping field '{name or '<root>'}': unsupported schema type '{schema.type}'"
        )
    return None


def load_fields(
    schema: Schema,
    fields: list[FieldDescriptor],
    name: Optional[str] = None,
    config: Optional[CompilerConfig] = None,
) -> None:
    """Compile a schema tree and append its field descriptors to ``fields``.

    Args:
        schema: Schema node or mapping to compile
        fields: Caller-owned list receiving descriptors in document order
        name: Input name of the node, object properties use their key
        config: Compiler configuration, loaded from the environment if omitted

    Raises:
        SchemaException: If the schema document is malformed
        UnsupportedSchemaTypeError: If a node has an unknown type and the
            configured policy is ``error``
    """
    schema = SchemaNode.parse(schema)
    config = config or CompilerConfig.load()

    if not schema.visible:
        logger.debug(f"Skipping invisible field '{name or '<root>'}'")
        return

    schema_type = _resolve_type(schema, name, config)
    if schema_type is None:
        return

    if schema_type is SchemaType.OBJECT:
        required = set(schema.required_properties)
        for key, prop in schema.properties.items():
            if key in required and not isinstance(prop.required, list):
                prop = prop.model_copy(update={"required": True})
            load_fields(prop, fields, key, config)
        return

    fields.append(PARSERS[schema_type](schema, name, config))
