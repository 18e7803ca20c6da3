"""Enumeration type definitions"""

from enum import Enum


class SchemaType(str, Enum):
    """Schema node types understood by the compiler"""

    BOOLEAN = "boolean"
    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    ARRAY = "array"
    OBJECT = "object"


class InputType(str, Enum):
    """HTML input types emitted in field attrs"""

    CHECKBOX = "checkbox"
    RADIO = "radio"
    TEXT = "text"
    NUMBER = "number"
    EMAIL = "email"
    URL = "url"
    SELECT = "select"
    FILE = "file"


class UnsupportedTypePolicy(str, Enum):
    SKIP = "skip"
    WARN = "warn"
    ERROR = "error"


class TriState(Enum):
    """Explicit unset/false/true flag, so an explicit False is never read as unset"""

    UNSET = "unset"
    FALSE = "false"
    TRUE = "true"

    @classmethod
    def of(cls, value) -> "TriState":
        if value is None:
            return cls.UNSET
        return cls.TRUE if value is True else cls.FALSE

    def resolve(self, default: bool) -> bool:
        if self is TriState.UNSET:
            return default
        return self is TriState.TRUE
