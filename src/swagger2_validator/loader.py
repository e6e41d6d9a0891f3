"""Read a single parameter object or schema fragment from disk."""

from pathlib import Path

import yaml


class FragmentError(ValueError):
    """The file does not hold a usable YAML/JSON fragment."""


def load_fragment(file_path: Path) -> dict:
    """Load a YAML or JSON file holding one mapping.

    JSON is read by the YAML parser too. $ref pointers are left as they are.
    """
    text = file_path.read_text(encoding="utf-8")
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise FragmentError(f"{file_path}: {e}") from e

    if not isinstance(data, dict):
        raise FragmentError(f"{file_path}: expected a mapping, got {type(data).__name__}")
    return data


def load_data(file_path: Path):
    """Load any YAML/JSON value, used for payloads to validate."""
    try:
        return yaml.safe_load(file_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise FragmentError(f"{file_path}: {e}") from e
