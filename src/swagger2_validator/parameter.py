"""Validation of one Swagger 2.0 parameter value.

A parameter is validated by wrapping its schema in a single property
object schema, {"properties": {name: schema}, "required": [name]}, and
validating {name: value} against it. Body parameters use their "schema";
every other location uses the parameter object itself. An "x-json-schema"
on the parameter overrides both, and on a body parameter also skips the
Swagger extensions entirely.
"""

import logging
import re
from functools import lru_cache

from .collection import coerce_by_collection_format, parse_number
from .config import ValidatorSettings, configure_logging
from .models import ValidationError
from .schema import SchemaValidator
from .truthy import is_true

logger = logging.getLogger(__name__)

# keys of a parameter object that are not JSON Schema keywords
PARAMETER_KEYS = ("name", "in", "required", "description", "allowEmptyValue")

NUMERIC_RE = re.compile(r"^\s*-?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?\s*$")
BOOLEANS = {"true": True, "1": True, "false": False, "0": False}


def parameter_schema(param: dict) -> dict:
    """The schema a parameter value is checked against."""
    if param.get("x-json-schema"):
        return param["x-json-schema"]
    if param.get("in") == "body":
        return param.get("schema") or {}
    return {k: v for k, v in param.items() if k not in PARAMETER_KEYS}


def _coerce_scalar(value, param_type: str):
    if not isinstance(value, str):
        return value
    if param_type in ("integer", "number") and NUMERIC_RE.match(value):
        return parse_number(value.strip())
    if param_type == "boolean" and value.lower() in BOOLEANS:
        return BOOLEANS[value.lower()]
    return value


class ParameterValidator:
    """Validates raw request values against their Swagger parameter objects.

    Each validation is logged at DEBUG on this module's logger. Applications
    wire up logging themselves, or call configure_logging(settings) so that
    settings.debug takes effect.
    """

    def __init__(self, schema_validator: SchemaValidator | None = None, settings: ValidatorSettings | None = None):
        self.schema_validator = schema_validator or SchemaValidator()
        self.settings = settings or ValidatorSettings()

    def coerce_parameter(self, param: dict, value):
        """Return the value as code behind the validator should see it.

        Array parameters outside the body are split by collectionFormat.
        With coerce_scalars on, strings are turned into numbers or booleans
        when the declared type asks for one and the text allows it.
        """
        if value is None or param.get("in") == "body":
            return value
        param_type = param.get("type", "object")
        if param_type == "array":
            items = param.get("items") or {}
            values = coerce_by_collection_format(param, value, strict=False)
            if self.settings.coerce_scalars:
                values = [_coerce_scalar(v, items.get("type", "")) for v in values]
            return values
        if self.settings.coerce_scalars:
            return _coerce_scalar(value, param_type)
        return value

    def validate_parameter(self, param: dict, name: str, value) -> list[ValidationError]:
        """Validate value for the parameter called name.

        Returns a list of errors, empty when the value is valid. A missing
        value for a parameter that is not required is always valid.
        """
        required = is_true(param.get("required"))
        if value is None and not required:
            return []

        location = param.get("in")
        value = self.coerce_parameter(param, value)
        schema = {
            "properties": {name: parameter_schema(param)},
            "required": [name] if required else [],
        }
        data = {} if value is None else {name: value}
        logger.debug("Validate %s %s=%r", location, name, value)

        if location == "body" and param.get("x-json-schema"):
            return self.schema_validator.validate_generic(data, schema)
        return self.schema_validator.validate_input(data, schema)

    def validate_input(self, data, schema: dict) -> list[ValidationError]:
        return self.schema_validator.validate_input(data, schema)


@lru_cache(maxsize=None)
def default_validator() -> ParameterValidator:
    """Validator shared by the module level shortcuts, built on first use.

    SWAGGER2_DEBUG turns on debug logging for the package here.
    """
    settings = ValidatorSettings.from_env()
    if settings.debug:
        configure_logging(settings)
    return ParameterValidator(settings=settings)


def validate_parameter(param: dict, name: str, value) -> list[ValidationError]:
    """Shortcut for ParameterValidator.validate_parameter with default settings."""
    return default_validator().validate_parameter(param, name, value)


def validate_input(data, schema: dict) -> list[ValidationError]:
    """Validate a request body in input mode with default settings."""
    return default_validator().validate_input(data, schema)
