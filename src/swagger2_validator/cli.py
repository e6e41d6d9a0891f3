"""CLI entry point for swagger2-validator."""

import json
from pathlib import Path

import click

from swagger2_validator.config import ValidatorSettings, configure_logging
from swagger2_validator.loader import FragmentError, load_data, load_fragment
from swagger2_validator.models import ValidationError, ValidationMode
from swagger2_validator.parameter import ParameterValidator
from swagger2_validator.schema import SchemaValidator


def _report(errors: list[ValidationError]):
    """Print the outcome and exit non-zero when there are errors."""
    if not errors:
        click.echo("valid")
        return
    for error in errors:
        click.echo(str(error))
    raise SystemExit(1)


def _load(loader, file_path: Path):
    try:
        return loader(file_path)
    except FragmentError as e:
        raise click.UsageError(str(e)) from e


@click.group()
@click.option("--debug", is_flag=True, default=False, help="Log every validation step.")
@click.pass_context
def main(ctx: click.Context, debug: bool):
    """Swagger 2.0 validator — check parameter values and payloads against their spec."""
    settings = ValidatorSettings.from_env()
    if debug:
        settings = settings.model_copy(update={"debug": True})
    configure_logging(settings)
    ctx.obj = settings


@main.command()
@click.argument("spec_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("values", nargs=-1)
@click.option("--name", default=None, help="Parameter name, defaults to the spec's name.")
@click.option("--json-value", is_flag=True, default=False, help="Parse the value as JSON (body parameters).")
@click.pass_obj
def param(settings: ValidatorSettings, spec_path: Path, values: tuple[str, ...], name: str | None, json_value: bool):
    """Validate raw VALUES against the parameter object in SPEC_PATH.

    No value means the parameter is absent; more than one forms a list.
    """
    spec = _load(load_fragment, spec_path)
    name = name or spec.get("name")
    if not name:
        raise click.UsageError("the parameter has no name, use --name")

    parsed = list(values)
    if json_value:
        try:
            parsed = [json.loads(v) for v in parsed]
        except json.JSONDecodeError as e:
            raise click.BadParameter(str(e), param_hint="VALUES") from e

    if not parsed:
        value = None
    elif len(parsed) == 1:
        value = parsed[0]
    else:
        value = parsed

    validator = ParameterValidator(settings=settings)
    _report(validator.validate_parameter(spec, name, value))


@main.command()
@click.argument("schema_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("data_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--output", "output", is_flag=True, default=False, help="Validate as response data (readOnly allowed).")
def body(schema_path: Path, data_path: Path, output: bool):
    """Validate the payload in DATA_PATH against the schema in SCHEMA_PATH."""
    schema = _load(load_fragment, schema_path)
    data = _load(load_data, data_path)
    mode = ValidationMode.OUTPUT if output else ValidationMode.INPUT
    _report(SchemaValidator().validate(data, schema, mode))
