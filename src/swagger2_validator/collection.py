"""Split delimited Swagger array values by their collectionFormat."""

import re

COLLECTION_RE = {
    "pipes": re.compile(r"\|"),
    "csv": re.compile(r","),
    "ssv": re.compile(r"\s+"),
    "tsv": re.compile(r"\t"),
}

NUMERIC_TYPES = ("integer", "number")


class CollectionFormatError(TypeError):
    """A token could not be read as the numeric item type."""

    def __init__(self, token: str, item_type: str):
        self.token = token
        self.item_type = item_type
        super().__init__(f"Expected {item_type} - got {token!r}.")


def parse_number(text: str) -> int | float:
    """Read integral text as int, anything else numeric as float."""
    try:
        return int(text)
    except ValueError:
        return float(text)


def _split(pattern: re.Pattern, text: str) -> list[str]:
    # empty fields are not values
    return [token for token in pattern.split(text) if token != ""]


def coerce_by_collection_format(schema: dict, value, strict: bool = True) -> list:
    """Turn value into a list according to schema["collectionFormat"].

    Without a known collectionFormat a list is returned unchanged and a
    scalar is wrapped in a one element list. Tokens are converted to
    numbers when schema["items"]["type"] is integer or number; a token
    that is not numeric raises CollectionFormatError, or is kept as a
    string when strict is False.
    """
    pattern = COLLECTION_RE.get(schema.get("collectionFormat") or "")
    values = value if isinstance(value, (list, tuple)) else [value]
    if pattern is None:
        return list(values)

    data = []
    for item in values:
        if item is None:
            continue
        data.extend(_split(pattern, str(item)))

    items = schema.get("items")
    item_type = items.get("type", "") if isinstance(items, dict) else ""
    if item_type not in NUMERIC_TYPES:
        return data

    numbers = []
    for token in data:
        try:
            numbers.append(parse_number(token))
        except ValueError:
            if strict:
                raise CollectionFormatError(token, item_type) from None
            numbers.append(token)
    return numbers
