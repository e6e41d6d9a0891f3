"""Result models shared by the schema and parameter validators.

Every check reports its findings as ValidationError values, never by
raising, so callers can collect all problems for one request at once.
"""

from enum import Enum

from jsonschema.exceptions import ValidationError as JsonSchemaError
from pydantic import BaseModel


class ValidationMode(str, Enum):
    """Which side of the API the data belongs to."""

    INPUT = "input"  # request data, readOnly properties are rejected
    OUTPUT = "output"  # response data, readOnly properties are allowed


class ValidationError(BaseModel):
    """A single validation failure located by a JSON pointer."""

    path: str  # /body/items/0, "/" for the root
    message: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


def json_pointer(segments) -> str:
    """Build a JSON pointer from path segments, escaping ~ and /."""
    parts = [str(s).replace("~", "~0").replace("/", "~1") for s in segments]
    if not parts:
        return "/"
    return "/" + "/".join(parts)


def from_jsonschema(error: JsonSchemaError) -> ValidationError:
    return ValidationError(path=json_pointer(error.absolute_path), message=error.message)
