"""Swagger aware JSON Schema validation on top of jsonschema's draft 4.

The base draft-4 keyword functions are wrapped, never replaced:

- items: elements of an array whose item schema has a collectionFormat
  are split into lists (in place) before the items are validated
- required: a missing property is reported at the property's own path;
  in INPUT mode readOnly properties are dropped from the list
- properties: in INPUT mode a readOnly property present in the data is
  reported as "Read-only."
- a "file" typed value is never checked, by "type" or any other keyword
"""

import logging

from jsonschema import Draft4Validator, validators
from jsonschema.exceptions import ValidationError as JsonSchemaError

from .collection import coerce_by_collection_format
from .formats import FORMAT_CHECKER
from .models import ValidationError, ValidationMode, from_jsonschema
from .truthy import is_true

logger = logging.getLogger(__name__)

BASE_ITEMS = Draft4Validator.VALIDATORS["items"]
BASE_PROPERTIES = Draft4Validator.VALIDATORS["properties"]
BASE_REQUIRED = Draft4Validator.VALIDATORS["required"]

TYPE_CHECKER = Draft4Validator.TYPE_CHECKER.redefine("file", lambda checker, instance: True)


def read_only_properties(schema: dict) -> set[str]:
    """Names of the properties marked readOnly in schema."""
    properties = schema.get("properties") or {}
    return {
        name
        for name, subschema in properties.items()
        if isinstance(subschema, dict) and is_true(subschema.get("readOnly"))
    }


def _needs_coercion(element) -> bool:
    # Already split elements hold no strings, so a second pass is a no-op.
    if isinstance(element, list):
        return any(isinstance(e, str) for e in element)
    if isinstance(element, bool):
        return False
    return isinstance(element, (str, int, float))


def items_with_collection_format(validator, items, instance, schema):
    if (
        validator.is_type(instance, "array")
        and isinstance(items, dict)
        and items.get("collectionFormat")
    ):
        for index, element in enumerate(instance):
            if _needs_coercion(element):
                instance[index] = coerce_by_collection_format(items, element, strict=False)
    yield from BASE_ITEMS(validator, items, instance, schema)


def required_at_property(validator, required, instance, schema):
    for name in required:
        for error in BASE_REQUIRED(validator, [name], instance, schema):
            error.path.append(name)
            yield error


def required_without_read_only(validator, required, instance, schema):
    read_only = read_only_properties(schema)
    yield from required_at_property(
        validator, [name for name in required if name not in read_only], instance, schema
    )


def properties_without_read_only(validator, properties, instance, schema):
    if validator.is_type(instance, "object"):
        for name in read_only_properties(schema):
            if name in instance:
                yield JsonSchemaError("Read-only.", path=(name,))
    yield from BASE_PROPERTIES(validator, properties, instance, schema)


def skip_file(keyword):
    """Wrap a keyword function so it never checks a "file" typed value."""

    def check(validator, value, instance, schema):
        if isinstance(schema, dict) and schema.get("type") == "file":
            return
        yield from keyword(validator, value, instance, schema)

    return check


def swagger_keywords(**overrides) -> dict:
    keywords = dict(Draft4Validator.VALIDATORS, **overrides)
    return {name: skip_file(keyword) for name, keyword in keywords.items()}


OutputValidator = validators.extend(
    Draft4Validator,
    validators=swagger_keywords(
        items=items_with_collection_format,
        required=required_at_property,
    ),
    type_checker=TYPE_CHECKER,
)

InputValidator = validators.extend(
    OutputValidator,
    validators=swagger_keywords(
        items=items_with_collection_format,
        properties=properties_without_read_only,
        required=required_without_read_only,
    ),
)

# x-json-schema escape hatch: draft 4 as is, missing properties located like above
GenericValidator = validators.extend(
    Draft4Validator,
    validators={"required": required_at_property},
    type_checker=TYPE_CHECKER,
)

VALIDATOR_CLASSES = {
    ValidationMode.INPUT: InputValidator,
    ValidationMode.OUTPUT: OutputValidator,
}


class SchemaValidator:
    """Validate data against Swagger schema fragments.

    Holds no per-call state, one instance can be shared between threads as
    long as the schemas it is given are not mutated meanwhile.
    """

    def __init__(self, format_checker=None):
        self.format_checker = format_checker or FORMAT_CHECKER

    def validate(self, data, schema: dict, mode: ValidationMode = ValidationMode.OUTPUT) -> list[ValidationError]:
        """Validate data in the given mode and return all errors found.

        Arrays inside data may be modified in place when their item schema
        declares a collectionFormat.
        """
        cls = VALIDATOR_CLASSES[ValidationMode(mode)]
        validator = cls(schema, format_checker=self.format_checker)
        errors = [from_jsonschema(e) for e in validator.iter_errors(data)]
        logger.debug("Validated %s data: %d error(s)", ValidationMode(mode).value, len(errors))
        return errors

    def validate_input(self, data, schema: dict) -> list[ValidationError]:
        """Validate request data, taking readOnly into account."""
        return self.validate(data, schema, ValidationMode.INPUT)

    def validate_output(self, data, schema: dict) -> list[ValidationError]:
        return self.validate(data, schema, ValidationMode.OUTPUT)

    def validate_generic(self, data, schema: dict) -> list[ValidationError]:
        """Plain draft-4 validation, without readOnly, collectionFormat or Swagger formats."""
        validator = GenericValidator(schema, format_checker=Draft4Validator.FORMAT_CHECKER)
        return [from_jsonschema(e) for e in validator.iter_errors(data)]
