import pytest

from swagger2_validator.collection import CollectionFormatError, coerce_by_collection_format, parse_number


class TestWithoutCollectionFormat:
    def test_wraps_scalar(self):
        assert coerce_by_collection_format({}, "abc") == ["abc"]

    def test_list_unchanged(self):
        assert coerce_by_collection_format({}, ["a,b", "c"]) == ["a,b", "c"]

    def test_unknown_format_wraps(self):
        assert coerce_by_collection_format({"collectionFormat": "multi"}, "a,b") == ["a,b"]

    def test_no_numeric_coercion(self):
        schema = {"items": {"type": "integer"}}
        assert coerce_by_collection_format(schema, "1") == ["1"]


class TestSplitting:
    def test_csv(self):
        assert coerce_by_collection_format({"collectionFormat": "csv"}, "1,2,3") == ["1", "2", "3"]

    def test_pipes(self):
        assert coerce_by_collection_format({"collectionFormat": "pipes"}, "a|b") == ["a", "b"]

    def test_ssv_whitespace_runs(self):
        assert coerce_by_collection_format({"collectionFormat": "ssv"}, "a  b\tc") == ["a", "b", "c"]

    def test_tsv(self):
        assert coerce_by_collection_format({"collectionFormat": "tsv"}, "a b\tc") == ["a b", "c"]

    def test_list_elements_are_flattened(self):
        result = coerce_by_collection_format({"collectionFormat": "csv"}, ["a,b", "c"])
        assert result == ["a", "b", "c"]

    def test_none_elements_skipped(self):
        assert coerce_by_collection_format({"collectionFormat": "csv"}, ["a", None]) == ["a"]

    def test_trailing_empty_fields_dropped(self):
        assert coerce_by_collection_format({"collectionFormat": "csv"}, "a,b,") == ["a", "b"]
        assert coerce_by_collection_format({"collectionFormat": "csv"}, "") == []

    def test_leading_and_inner_empty_fields_dropped(self):
        assert coerce_by_collection_format({"collectionFormat": "ssv"}, " a b") == ["a", "b"]
        assert coerce_by_collection_format({"collectionFormat": "csv"}, "1,,2") == ["1", "2"]

    def test_empty_fields_with_integer_items(self):
        schema = {"collectionFormat": "csv", "items": {"type": "integer"}}
        assert coerce_by_collection_format(schema, ",1,,2") == [1, 2]


class TestNumericItems:
    def test_integer_items(self):
        schema = {"collectionFormat": "csv", "items": {"type": "integer"}}
        assert coerce_by_collection_format(schema, "1,2,3") == [1, 2, 3]

    def test_number_items(self):
        schema = {"collectionFormat": "pipes", "items": {"type": "number"}}
        assert coerce_by_collection_format(schema, "1.5|2") == [1.5, 2]

    def test_non_numeric_token_raises(self):
        schema = {"collectionFormat": "csv", "items": {"type": "integer"}}
        with pytest.raises(CollectionFormatError) as exc:
            coerce_by_collection_format(schema, "1,x")
        assert exc.value.token == "x"
        assert isinstance(exc.value, TypeError)

    def test_non_strict_keeps_token(self):
        schema = {"collectionFormat": "csv", "items": {"type": "integer"}}
        assert coerce_by_collection_format(schema, "1,x", strict=False) == [1, "x"]


class TestParseNumber:
    def test_int_and_float(self):
        assert parse_number("12") == 12
        assert isinstance(parse_number("12"), int)
        assert parse_number("1e2") == 100.0

    def test_rejects_words(self):
        with pytest.raises(ValueError):
            parse_number("twelve")
