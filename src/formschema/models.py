"""Schema node, choice item and field descriptor models."""

from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .errors import SchemaException
from .utils import describe_validation_error, stringify


class SchemaNode(BaseModel):
    """One JSON-Schema-like fragment describing a single value or nested structure."""

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    type: str
    title: Optional[str] = None
    description: Optional[str] = None
    default: Any = None
    required: Union[bool, list[str]] = False
    disabled: bool = False
    visible: bool = True
    attrs: dict[str, Any] = Field(default_factory=dict)

    min_length: Optional[int] = Field(default=None, alias="minLength")
    max_length: Optional[int] = Field(default=None, alias="maxLength")
    pattern: Optional[str] = None
    format: Optional[str] = None

    min_items: Optional[int] = Field(default=None, alias="minItems")
    max_items: Optional[int] = Field(default=None, alias="maxItems")

    enum: Optional[list[Any]] = None
    one_of: Optional[list[Any]] = Field(default=None, alias="oneOf")
    any_of: Optional[list[Any]] = Field(default=None, alias="anyOf")

    properties: dict[str, SchemaNode] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def drop_null_members(cls, values):
        # JSON documents spell "absent" as null just as often as by omission
        if not isinstance(values, dict):
            return values
        return {key: value for key, value in values.items() if value is not None}

    @classmethod
    def parse(cls, value: Union[SchemaNode, dict[str, Any]]) -> SchemaNode:
        """Coerce a mapping into a SchemaNode.

        Raises:
            SchemaException: If the mapping is not a valid schema node
        """
        if isinstance(value, cls):
            return value

        try:
            return cls.model_validate(value)
        except ValidationError as e:
            raise SchemaException(
                describe_validation_error(e, "Schema validation failed:")
            ) from e

    @property
    def required_properties(self) -> list[str]:
        if isinstance(self.required, list):
            return self.required
        return []


class ChoiceItem(BaseModel):
    """One selectable option within a radio, select or checkbox group."""

    model_config = ConfigDict(frozen=True, extra="allow")

    value: Any = None
    label: str = ""
    name: Optional[str] = None
    ref: Optional[str] = None
    checked: Any = None
    selected: Any = None

    @model_validator(mode="before")
    @classmethod
    def default_label(cls, values):
        if not isinstance(values, dict):
            return values

        label = values.get("label", values.get("value"))
        if not isinstance(label, str):
            values = {**values, "label": stringify(label)}
        return values

    def to_dict(self) -> dict[str, Any]:
        data = {"value": self.value, "label": self.label}
        for key in ("name", "ref", "checked", "selected"):
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        data.update(self.model_extra or {})
        return data


class FieldDescriptor(BaseModel):
    """Renderer-agnostic description of one form input.

    Descriptors are immutable; every compiler stage returns a new one, so
    ``attrs`` must be replaced rather than edited in place.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    schema_type: str = Field(default="", alias="schemaType")
    label: str = ""
    description: str = ""
    attrs: dict[str, Any] = Field(default_factory=dict)

    items: Optional[list[ChoiceItem]] = None
    min_items: Optional[int] = Field(default=None, alias="minItems")
    max_items: Optional[int] = Field(default=None, alias="maxItems")
    is_array_field: Optional[bool] = Field(default=None, alias="isArrayField")

    def with_attrs(self, **attrs: Any) -> FieldDescriptor:
        return self.model_copy(update={"attrs": {**self.attrs, **attrs}})

    def without_attrs(self, *keys: str) -> FieldDescriptor:
        attrs = {key: value for key, value in self.attrs.items() if key not in keys}
        return self.model_copy(update={"attrs": attrs})

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "schemaType": self.schema_type,
            "label": self.label,
            "description": self.description,
            "attrs": dict(self.attrs),
        }
        if self.items is not None:
            data["items"] = [item.to_dict() for item in self.items]
        if self.min_items is not None:
            data["minItems"] = self.min_items
        if self.max_items is not None:
            data["maxItems"] = self.max_items
        if self.is_array_field is not None:
            data["isArrayField"] = self.is_array_field
        return data
