from .config import CompilerConfig
from .enums import InputType, SchemaType, TriState, UnsupportedTypePolicy
from .errors import (
    ConfigException,
    FormSchemaException,
    RenderException,
    SchemaException,
    UnsupportedSchemaTypeError,
)
from .models import ChoiceItem, FieldDescriptor, SchemaNode
from .parser import (
    load_fields,
    parse_array,
    parse_boolean,
    parse_items,
    parse_string,
    set_common_fields,
    set_item_name,
)
from .render import OptionRenderer, render_option, render_options
from .values import array_ordered_values, array_unordered_values, single_value

__all__ = [
    "ChoiceItem",
    "CompilerConfig",
    "ConfigException",
    "FieldDescriptor",
    "FormSchemaException",
    "InputType",
    "OptionRenderer",
    "RenderException",
    "SchemaException",
    "SchemaNode",
    "SchemaType",
    "TriState",
    "UnsupportedSchemaTypeError",
    "UnsupportedTypePolicy",
    "array_ordered_values",
    "array_unordered_values",
    "load_fields",
    "parse_array",
    "parse_boolean",
    "parse_items",
    "parse_string",
    "render_option",
    "render_options",
    "set_common_fields",
    "set_item_name",
    "single_value",
]
