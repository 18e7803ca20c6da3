"""Render choice items as HTML <option> elements with Jinja2 templates."""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional, Union

from jinja2 import Environment, FileSystemLoader, TemplateError, select_autoescape

from .consts import TEMPLATE_OPTION
from .enums import TriState
from .errors import RenderException
from .models import ChoiceItem, FieldDescriptor
from .parser import parse_items
from .utils import stringify

logger = logging.getLogger(__name__)

_UNSET = object()


class OptionRenderer:
    """Render <option> markup for select fields."""

    def __init__(self, template_dir: Optional[Path] = None):
        template_dir = template_dir or Path(__file__).parent / "templates"
        self.jinja_env = Environment(
            loader=FileSystemLoader(template_dir),
            autoescape=select_autoescape(default=True, default_for_string=True),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.jinja_env.filters["stringify"] = stringify

    @staticmethod
    def is_selected(option: ChoiceItem, value: Any = _UNSET) -> bool:
        """An option is selected when flagged so, or when it holds the field value.

        A list value selects every option it contains.
        """
        if TriState.of(option.selected) is TriState.TRUE:
            return True
        if value is _UNSET:
            return False
        if isinstance(value, (list, tuple)):
            return option.value is not None and option.value in value
        return option.value == value

    def render_option(
        self, option: Union[ChoiceItem, Mapping[str, Any]], value: Any = _UNSET
    ) -> str:
        (option,) = parse_items([option])
        template = self.jinja_env.get_template(TEMPLATE_OPTION)

        try:
            return template.render(option=option, selected=self.is_selected(option, value))
        except TemplateError as e:
            raise RenderException(f"Failed to render option '{option.label}': {e}") from e

    def render_options(self, field: FieldDescriptor) -> list[str]:
        """Render every item of a choice field, selecting those matching its value."""
        if field.items is None:
            raise RenderException(f"Field '{field.attrs.get('name', '')}' has no choice items")

        value = field.attrs.get("value", _UNSET)
        logger.debug(f"Rendering {len(field.items)} option(s) for '{field.attrs.get('name', '')}'")
        return [self.render_option(item, value) for item in field.items]


_renderer: Optional[OptionRenderer] = None


def _get_renderer() -> OptionRenderer:
    global _renderer
    if _renderer is None:
        _renderer = OptionRenderer()
    return _renderer


def render_option(option: Union[ChoiceItem, Mapping[str, Any]], value: Any = _UNSET) -> str:
    return _get_renderer().render_option(option, value)


def render_options(field: FieldDescriptor) -> list[str]:
    return _get_renderer().render_options(field)
