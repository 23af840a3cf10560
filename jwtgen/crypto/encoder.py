"""JSON serialization and base64url encoding of token segments."""

import dataclasses
import json
import math
from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel
from pydantic_core import PydanticSerializationError, to_jsonable_python

from jwtgen.crypto.base64url import base64url_encode
from jwtgen.crypto.errors import InvalidHeaderError, InvalidPayloadError
from jwtgen.crypto.types import JWTHeader

JSON_SEPARATORS = (",", ":")
RESERVED_HEADER_FIELDS = ("alg", "typ")


def _epoch_seconds(value: datetime) -> int:
    """Whole seconds since the epoch, floored; naive values are read as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return math.floor(value.timestamp())


def _json_default(value: Any) -> Any:
    """Convert values the json module cannot serialize on its own."""
    if isinstance(value, datetime):
        return _epoch_seconds(value)
    if isinstance(value, BaseModel):
        return value.model_dump()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    try:
        return to_jsonable_python(value)
    except PydanticSerializationError as exc:
        raise TypeError(
            f"Object of type {type(value).__name__} is not JSON serializable"
        ) from exc


def _dumps(value: Any) -> bytes:
    """Compact, NaN-free JSON bytes for a header or payload."""
    return json.dumps(
        value,
        separators=JSON_SEPARATORS,
        allow_nan=False,
        default=_json_default,
    ).encode("utf-8")


def header_fields(header: JWTHeader) -> dict[str, str]:
    """Build the header object: extra fields first, then ``alg`` and ``typ``."""
    fields = {
        key: value
        for key, value in header.extra.items()
        if key not in RESERVED_HEADER_FIELDS
    }
    fields["alg"] = header.algorithm.value
    fields["typ"] = header.type
    return fields


def encode_header(header: JWTHeader) -> str:
    """Serialize and base64url-encode a token header."""
    try:
        data = _dumps(header_fields(header))
    except (TypeError, ValueError) as exc:
        raise InvalidHeaderError("header is not JSON serializable") from exc
    return base64url_encode(data)


def encode_payload(payload: Any) -> str:
    """Serialize and base64url-encode token claims.

    Datetimes become integer seconds since the epoch (naive values are read
    as UTC). Pydantic models and dataclasses are encoded by their fields.
    """
    try:
        data = _dumps(payload)
    except (TypeError, ValueError) as exc:
        raise InvalidPayloadError("payload is not JSON serializable") from exc
    return base64url_encode(data)


def encode_signature(signature: bytes) -> str:
    """Base64url-encode raw signature bytes."""
    return base64url_encode(signature)
