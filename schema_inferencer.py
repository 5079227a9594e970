"""
Schema inference from sample JSON payloads.

A decoded JSON value is tagged once with its JsonKind, and the kind alone
decides the OpenAPI type string. Inference is one level deep: properties of
nested objects are not inferred.
"""

import json
import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any, Dict

from swagger_errors import DecodeError
from swagger_model import Schema

logger = logging.getLogger(__name__)

# Fallback for kinds with no entry below (null and unknown)
DEFAULT_TYPE = "string"


class JsonKind(Enum):
    NULL = "null"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"
    UNKNOWN = "unknown"


KIND_TYPES: Dict[JsonKind, str] = {
    JsonKind.STRING: "string",
    JsonKind.INTEGER: "integer",
    JsonKind.NUMBER: "number",
    JsonKind.BOOLEAN: "boolean",
    JsonKind.ARRAY: "array",
    JsonKind.OBJECT: "object",
}


def classify(value: Any) -> JsonKind:
    """Tag a decoded JSON value. 2.0 is a NUMBER, 2 is an INTEGER."""
    if value is None:
        return JsonKind.NULL
    # bool is a subclass of int
    if isinstance(value, bool):
        return JsonKind.BOOLEAN
    if isinstance(value, int):
        return JsonKind.INTEGER
    if isinstance(value, float):
        return JsonKind.NUMBER
    if isinstance(value, str):
        return JsonKind.STRING
    if isinstance(value, (list, tuple)):
        return JsonKind.ARRAY
    if isinstance(value, Mapping):
        return JsonKind.OBJECT
    return JsonKind.UNKNOWN


def swagger_type(kind: JsonKind) -> str:
    return KIND_TYPES.get(kind, DEFAULT_TYPE)


def infer(data: Mapping[str, Any]) -> Schema:
    """
    Build an object schema with one property per key of `data`.

    Nested objects and arrays get a bare type and no properties of their own.
    """
    properties = {}
    for key, value in data.items():
        properties[key] = Schema(type=swagger_type(classify(value)))

    logger.debug(f"Inferred {len(properties)} properties")
    return Schema(type="object", properties=properties)


def load_json_object(text: str) -> Dict[str, Any]:
    """Decode a JSON payload that must be an object"""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise DecodeError(f"invalid JSON: {e.msg} (line {e.lineno}, col {e.colno})") from e

    if not isinstance(data, dict):
        raise DecodeError(f"JSON payload must be an object, got {type(data).__name__}")
    return data
