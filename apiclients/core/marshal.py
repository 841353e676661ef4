"""Typed request/response marshaling on top of pydantic."""
from __future__ import annotations

from functools import lru_cache
from typing import Any, Optional, Type, TypeVar, get_origin

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError, to_json

from .exceptions import DecodeError, EncodeError

M = TypeVar("M", bound=BaseModel)


class ApiModel(BaseModel):
    """Base class for request and response records.

    Fields are populated by wire name or Python name, and fields the server
    adds later are ignored rather than rejected.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


@lru_cache(maxsize=None)
def _adapter(response_type: Any) -> TypeAdapter:
    return TypeAdapter(response_type)


def encode_body(value: Any) -> bytes:
    """Serialize a model (or list/mapping of models) to compact JSON.

    Wire names are used and ``None`` fields are dropped.

    Raises:
        EncodeError: If the value cannot be represented as JSON
    """
    try:
        return to_json(value, by_alias=True, exclude_none=True)
    except (PydanticSerializationError, TypeError, ValueError) as exc:
        raise EncodeError(f"Cannot serialize {type(value).__name__}: {exc}") from exc


def coerce_body(value: Any, body_type: Type[M]) -> M:
    """Return ``value`` as an instance of ``body_type``, validating plain dicts.

    Raises:
        EncodeError: If the value does not fit the body type
    """
    if isinstance(value, body_type):
        return value
    try:
        return body_type.model_validate(value)
    except ValidationError as exc:
        raise EncodeError(f"Invalid {body_type.__name__} body: {exc}") from exc


def decode_body(content: bytes, response_type: Any, url: Optional[str] = None) -> Any:
    """Validate a JSON response body against ``response_type``.

    ``response_type`` may be a model, a ``list[Model]``, or ``None`` for
    operations that return no content.

    Raises:
        DecodeError: If the body is not JSON or does not match the type
    """
    if response_type is None:
        return None
    if not content or not content.strip():
        raise DecodeError(f"Empty body, expected {_type_name(response_type)}", url)
    try:
        return _adapter(response_type).validate_json(content)
    except ValidationError as exc:
        raise DecodeError(f"Response does not match {_type_name(response_type)}: {exc}", url) from exc


def decode_value(data: Any, response_type: Any, url: Optional[str] = None) -> Any:
    """Validate already-parsed JSON data against ``response_type``."""
    try:
        return _adapter(response_type).validate_python(data)
    except ValidationError as exc:
        raise DecodeError(f"Response does not match {_type_name(response_type)}: {exc}", url) from exc


def _type_name(response_type: Any) -> str:
    if get_origin(response_type) is not None:
        return str(response_type)
    return getattr(response_type, "__name__", str(response_type))
