"""
OpenAPI document model
Covers the subset of an OpenAPI document the editor reads and writes
"""

from typing import Any, Dict, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    field_validator,
    model_serializer,
)

# ================= CONFIG =================

OPENAPI_VERSION = "3.0.3"

NEW_API_TITLE = "New API"
NEW_API_DESCRIPTION = "This is a newly created Swagger API"
NEW_API_VERSION = "1.0.0"


def _empty_if_none(value: Any) -> Any:
    return {} if value is None else value


def _string_keys(value: Any) -> Any:
    # YAML reads `200:` as an int key
    if isinstance(value, dict):
        return {str(k): v for k, v in value.items()}
    return value


# ================= MODELS =================

class Schema(BaseModel):
    model_config = ConfigDict(extra="allow")

    type: str = Field(default="", description="object, array, string, integer, number or boolean")
    properties: Dict[str, "Schema"] = Field(default_factory=dict)

    @field_validator("type", mode="before")
    @classmethod
    def _type_or_blank(cls, value):
        return "" if value is None else value

    @field_validator("properties", mode="before")
    @classmethod
    def _properties_mapping(cls, value):
        return _string_keys(_empty_if_none(value))

    @model_serializer(mode="wrap")
    def _omit_empty_properties(self, handler: SerializerFunctionWrapHandler) -> Dict[str, Any]:
        data = handler(self)
        if not data.get("properties"):
            data.pop("properties", None)
        return data


class MediaType(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    schema_: Schema = Field(default_factory=Schema, alias="schema")

    @field_validator("schema_", mode="before")
    @classmethod
    def _schema_or_blank(cls, value):
        return _empty_if_none(value)


class Response(BaseModel):
    model_config = ConfigDict(extra="allow")

    description: str = ""
    content: Dict[str, MediaType] = Field(default_factory=dict)

    @field_validator("description", mode="before")
    @classmethod
    def _description_or_blank(cls, value):
        return "" if value is None else value

    @field_validator("content", mode="before")
    @classmethod
    def _content_mapping(cls, value):
        value = _string_keys(_empty_if_none(value))
        if isinstance(value, dict):
            return {k: _empty_if_none(v) for k, v in value.items()}
        return value


class Operation(BaseModel):
    model_config = ConfigDict(extra="allow")

    summary: str = ""
    responses: Dict[str, Response] = Field(default_factory=dict)
    description: str = ""

    @field_validator("summary", "description", mode="before")
    @classmethod
    def _text_or_blank(cls, value):
        return "" if value is None else value

    @field_validator("responses", mode="before")
    @classmethod
    def _responses_mapping(cls, value):
        value = _string_keys(_empty_if_none(value))
        if isinstance(value, dict):
            return {k: _empty_if_none(v) for k, v in value.items()}
        return value


class Info(BaseModel):
    """
    Document metadata. Keys other than title/description/version are
    kept as extras and written back untouched.
    """
    model_config = ConfigDict(extra="allow")

    title: Optional[str] = None
    description: Optional[str] = None
    version: Optional[str] = None

    @field_validator("title", "description", "version", mode="before")
    @classmethod
    def _scalar_as_text(cls, value):
        # `version: 1.0` comes out of YAML as a float
        if value is None or isinstance(value, (dict, list)):
            return value
        return str(value)

    @property
    def extras(self) -> Dict[str, Any]:
        return dict(self.model_extra or {})

    @model_serializer(mode="wrap")
    def _omit_unset_fields(self, handler: SerializerFunctionWrapHandler) -> Dict[str, Any]:
        data = handler(self)
        for name in ("title", "description", "version"):
            if data.get(name) is None:
                data.pop(name, None)
        return data


class Document(BaseModel):
    """Root of an OpenAPI document"""
    model_config = ConfigDict(extra="allow")

    openapi: str = ""
    info: Info = Field(default_factory=Info)
    paths: Dict[str, Dict[str, Operation]] = Field(default_factory=dict)

    @field_validator("openapi", mode="before")
    @classmethod
    def _version_as_text(cls, value):
        return "" if value is None else str(value)

    @field_validator("info", mode="before")
    @classmethod
    def _info_mapping(cls, value):
        return _empty_if_none(value)

    @field_validator("paths", mode="before")
    @classmethod
    def _paths_mapping(cls, value):
        value = _string_keys(_empty_if_none(value))
        if not isinstance(value, dict):
            return value
        paths = {}
        for path, methods in value.items():
            methods = _string_keys(_empty_if_none(methods))
            if isinstance(methods, dict):
                methods = {m: _empty_if_none(op) for m, op in methods.items()}
            paths[path] = methods
        return paths

    def has_operation(self, path: str, method: str) -> bool:
        return method in self.paths.get(path, {})

    def to_dict(self) -> Dict[str, Any]:
        """
        Wire form of the document, ready for YAML encoding. Only keys read
        from the file or set since are emitted.
        """
        return self.model_dump(by_alias=True, exclude_unset=True)


def new_document() -> Document:
    """Scaffold used when creating a new Swagger file"""
    return Document(
        openapi=OPENAPI_VERSION,
        info=Info(
            title=NEW_API_TITLE,
            description=NEW_API_DESCRIPTION,
            version=NEW_API_VERSION,
        ),
        paths={},
    )
