"""Tests for JSON payload schema inference."""

import json

import pytest

from schema_inferencer import JsonKind, classify, infer, load_json_object
from swagger_errors import DecodeError


class TestClassify:
    @pytest.mark.parametrize(
        "value, kind",
        [
            (None, JsonKind.NULL),
            (True, JsonKind.BOOLEAN),
            (False, JsonKind.BOOLEAN),
            (0, JsonKind.INTEGER),
            (-12, JsonKind.INTEGER),
            (1.5, JsonKind.NUMBER),
            (2.0, JsonKind.NUMBER),
            ("Rex", JsonKind.STRING),
            ([1, 2], JsonKind.ARRAY),
            ({"a": 1}, JsonKind.OBJECT),
            (object(), JsonKind.UNKNOWN),
        ],
    )
    def test_kinds(self, value, kind):
        assert classify(value) is kind


class TestInfer:
    def test_top_level_is_object_with_one_property_per_key(self):
        data = {"id": 1, "name": "Rex", "tags": [], "owner": {"id": 2}}
        schema = infer(data)
        assert schema.type == "object"
        assert set(schema.properties) == set(data)

    def test_type_mapping(self):
        data = json.loads(
            '{"s": "x", "i": 3, "f": 3.25, "b": true, "a": [1], "o": {"k": "v"}, "n": null}'
        )
        types = {k: v.type for k, v in infer(data).properties.items()}
        assert types == {
            "s": "string",
            "i": "integer",
            "f": "number",
            "b": "boolean",
            "a": "array",
            "o": "object",
            "n": "string",
        }

    def test_whole_valued_float_literal_is_number(self):
        schema = infer(json.loads('{"price": 2.0, "count": 2}'))
        assert schema.properties["price"].type == "number"
        assert schema.properties["count"].type == "integer"

    def test_nested_object_is_not_recursed(self):
        schema = infer({"owner": {"id": 2, "name": "Ann"}, "items": [{"x": 1}]})
        assert schema.properties["owner"].type == "object"
        assert schema.properties["owner"].properties == {}
        assert schema.properties["items"].type == "array"
        assert schema.properties["items"].properties == {}

    def test_empty_object(self):
        schema = infer({})
        assert schema.type == "object"
        assert schema.properties == {}


class TestLoadJsonObject:
    def test_object(self):
        assert load_json_object('{"id": 1, "name": "Rex"}') == {"id": 1, "name": "Rex"}

    def test_keeps_key_case(self):
        assert list(load_json_object('{"PetName": "Rex"}')) == ["PetName"]

    def test_malformed_json(self):
        with pytest.raises(DecodeError, match="invalid JSON"):
            load_json_object('{"id": ')

    @pytest.mark.parametrize("text", ["[1, 2]", '"text"', "3", "null"])
    def test_non_object_is_rejected(self, text):
        with pytest.raises(DecodeError, match="must be an object"):
            load_json_object(text)
