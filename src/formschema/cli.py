"""CLI main entry point."""

import json
import logging
from pathlib import Path

import click

from .config import CompilerConfig
from .errors import FormSchemaException, SchemaException
from .log import setup as setup_log
from .parser import load_fields
from .render import OptionRenderer

logger = logging.getLogger(__name__)


def read_schema(schema_path: str) -> dict:
    """Read a JSON schema document from disk.

    Raises:
        SchemaException: If the file is missing or is not valid JSON
    """
    path = Path(schema_path)
    if not path.exists():
        raise SchemaException(f"Schema file not found: {schema_path}")

    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise SchemaException(f"Invalid JSON in {schema_path}: {e}") from e


def compile_schema(schema_path: str, cfg: CompilerConfig, name: str | None = None) -> list:
    fields = []
    load_fields(read_schema(schema_path), fields, name, cfg)
    logger.info(f"Compiled {len(fields)} field(s) from {schema_path}")
    return fields


@click.group()
@click.option("--config", "-c", default=None, help="Configuration file path")
@click.option("--log-file", default=None, help="Write debug logs to this file")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug output")
@click.pass_context
def cli(ctx, config: str | None, log_file: str | None, verbose: bool):
    """formschema - compile JSON schemas into form field descriptors."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config
    setup_log(log_file, verbose)


def _load_config(ctx) -> CompilerConfig:
    config_path = ctx.obj.get("config_path")
    if config_path:
        logger.info(f"Loading configuration file: {config_path}")
    return CompilerConfig.load(config_path)


@cli.command(name="compile")
@click.argument("schema_path", type=click.Path())
@click.option("--name", "-n", default=None, help="Input name of the root field")
@click.option("--indent", default=2, type=int, show_default=True, help="JSON indentation")
@click.pass_context
def compile_command(ctx, schema_path: str, name: str | None, indent: int):
    """Print the field descriptors of a schema file as JSON."""
    try:
        cfg = _load_config(ctx)
        fields = compile_schema(schema_path, cfg, name)
    except FormSchemaException as e:
        logger.error(f"Compilation failed: {e}")
        raise click.ClickException(str(e))

    click.echo(json.dumps([field.to_dict() for field in fields], indent=indent or None))


@cli.command(name="options")
@click.argument("schema_path", type=click.Path())
@click.option("--field", "field_name", required=True, help="Name of the choice field")
@click.pass_context
def options_command(ctx, schema_path: str, field_name: str):
    """Print the <option> markup of a choice field."""
    try:
        cfg = _load_config(ctx)
        fields = compile_schema(schema_path, cfg)

        field = next((f for f in fields if f.attrs.get("name") == field_name), None)
        if field is None:
            raise click.ClickException(f"Field not found: {field_name}")

        for line in OptionRenderer().render_options(field):
            click.echo(line)
    except FormSchemaException as e:
        logger.error(f"Rendering failed: {e}")
        raise click.ClickException(str(e))


def main():
    cli(obj={})


if __name__ == "__main__":
    main()
