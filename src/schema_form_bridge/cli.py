"""Command line interface entry point."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any

import click

from schema_form_bridge.catalog_export import generate_catalog_workbook
from schema_form_bridge.configuration import (
    DEFAULT_CONFIG_FILENAME,
    Configuration,
    ConfigurationError,
    load_configuration,
    write_placeholder_configuration,
)
from schema_form_bridge.form_bridge import SchemaBridge, UnrepresentableTypeError
from schema_form_bridge.schema_management import FieldNotFoundError, SchemaError
from schema_form_bridge.validation import ValidationFailure

_BRIDGE_ERRORS = (ConfigurationError, SchemaError, FieldNotFoundError, UnrepresentableTypeError)


class CliError(Exception):
    """Custom CLI error."""


_config_option = click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON bridge configuration file",
)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="schema-form-bridge")
@click.option("--verbose", is_flag=True, default=False, help="Log schema resolution to stderr.")
def cli(verbose: bool) -> None:
    """Query form fields of a JSON Schema document."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML bridge configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML bridge configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="fields")
@_config_option
@click.option("--path", "field_path", default="", help="Field path; the schema root if omitted")
def list_fields(config_path: str, field_path: str) -> None:
    """List the child field names of a field."""
    _, bridge = _load_bridge(config_path)
    try:
        names = bridge.get_sub_fields(field_path)
    except _BRIDGE_ERRORS as exc:
        raise CliError(str(exc)) from exc
    for name in names:
        click.echo(name)


@cli.command(name="describe")
@_config_option
@click.option("--path", "field_path", required=True, help="Field path to describe")
@click.option(
    "--initial-count",
    type=click.IntRange(min=0),
    default=0,
    show_default=True,
    help="Number of placeholder elements for array initial values",
)
def describe(config_path: str, field_path: str, initial_count: int) -> None:
    """Print the resolved schema, type, props and initial value of a field as JSON."""
    _, bridge = _load_bridge(config_path)
    try:
        field = bridge.get_field(field_path)
        props = bridge.get_props(field_path)
        initial_value = bridge.get_initial_value(field_path, initial_count)
        try:
            type_name: str | None = bridge.get_type(field_path).value
        except UnrepresentableTypeError:
            type_name = None
    except _BRIDGE_ERRORS as exc:
        raise CliError(str(exc)) from exc

    description: dict[str, Any] = {
        "path": field_path,
        "type": type_name,
        "field": field,
        "props": {key: value for key, value in props.items() if not callable(value)},
        "initial_value": initial_value,
    }
    click.echo(json.dumps(description, indent=2, ensure_ascii=False, default=str))


@cli.command(name="validate")
@_config_option
@click.option(
    "--model",
    "model_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the JSON model to validate",
)
def validate(config_path: str, model_path: str) -> None:
    """Validate a JSON model and print the cleaned model or its error messages."""
    _, bridge = _load_bridge(config_path)
    try:
        model = json.loads(Path(model_path).read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise CliError(f"Failed to read model file: {exc}") from exc

    try:
        cleaned = bridge.get_validator().validate(model)
    except SchemaError as exc:
        raise CliError(str(exc)) from exc
    except ValidationFailure as exc:
        for detail in exc.details:
            click.echo(f"{detail.path or '<root>'}: {detail.message}", err=True)
        messages = bridge.get_error_messages(exc)
        raise CliError(f"Model is invalid: {len(messages)} error(s).") from exc
    click.echo(json.dumps(cleaned, indent=2, ensure_ascii=False))


@cli.command(name="export-catalog")
@_config_option
@click.option(
    "--output",
    "output_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the field catalog workbook to write",
)
def export_catalog(config_path: str, output_path: str) -> None:
    """Export every addressable field with its form properties to a workbook."""
    configuration, bridge = _load_bridge(config_path)
    try:
        generate_catalog_workbook(bridge, configuration.schema, output_path)
    except (*_BRIDGE_ERRORS, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(Path(output_path).resolve()))


def _load_bridge(config_path: str) -> tuple[Configuration, SchemaBridge]:
    try:
        configuration = load_configuration(config_path)
        return configuration, SchemaBridge.from_configuration(configuration)
    except (ConfigurationError, SchemaError) as exc:
        raise CliError(str(exc)) from exc


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
