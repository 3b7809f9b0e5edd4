# SPDX-License-Identifier: MIT

import logging
import math
import re
import uuid
from enum import StrEnum
from typing import Any, Iterable, Optional, TypeVar

import httpx

from taskrecord.errors import (
    InvalidFieldType,
    InvalidIdentifier,
    InvalidUri,
    MissingRequiredField,
    UnknownVariant,
)
from taskrecord.model.task_id import TaskId

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=StrEnum)

# RFC 3986 characters, with "%" only as the start of a percent-encoded octet
URI_PATTERN = re.compile(
    r"(?:[A-Za-z0-9\-._~:/?#\[\]@!$&'()*+,;=]|%[0-9A-Fa-f]{2})+"
)


def field_path(prefix: Optional[str], key: str) -> str:
    if not prefix:
        return key
    return f"{prefix}.{key}"


def index_path(prefix: str, index: int) -> str:
    return f"{prefix}[{index}]"


def expect_object(raw: Any, path: str) -> dict[str, Any]:
    if not isinstance(raw, dict):
        logger.debug("%s: expected an object, got %r", path, raw)
        raise InvalidFieldType(path, raw)
    return raw


def require(payload: dict[str, Any], key: str, prefix: Optional[str] = None) -> Any:
    if key not in payload:
        logger.debug("%s: required key is missing", field_path(prefix, key))
        raise MissingRequiredField(field_path(prefix, key))
    return payload[key]


def ignore_unknown_keys(
    payload: dict[str, Any], known: Iterable[str], prefix: Optional[str] = None
) -> None:
    unknown = sorted(str(key) for key in payload.keys() - set(known))
    if unknown:
        logger.debug(
            "%s: ignoring unknown keys %s", prefix or "<payload>", ", ".join(unknown)
        )


def put_optional(payload: dict[str, Any], key: str, value: Any) -> None:
    """Set `key` only when there is a value; absent fields are omitted."""
    if value is not None:
        payload[key] = value


def decode_str(raw: Any, path: str) -> str:
    if not isinstance(raw, str):
        logger.debug("%s: expected a string, got %r", path, raw)
        raise InvalidFieldType(path, raw)
    return raw


def decode_str_optional(
    payload: dict[str, Any], key: str, prefix: Optional[str] = None
) -> Optional[str]:
    if payload.get(key) is None:
        return None
    return decode_str(payload[key], field_path(prefix, key))


def decode_float(raw: Any, path: str) -> float:
    # bool is an int subclass but never a valid number on the wire
    if (
        isinstance(raw, bool)
        or not isinstance(raw, (int, float))
        or (isinstance(raw, float) and not math.isfinite(raw))
    ):
        logger.debug("%s: expected a number, got %r", path, raw)
        raise InvalidFieldType(path, raw)
    return float(raw)


def decode_int(raw: Any, path: str) -> int:
    if isinstance(raw, bool) or not isinstance(raw, int):
        logger.debug("%s: expected an integer, got %r", path, raw)
        raise InvalidFieldType(path, raw)
    return raw


def decode_str_list_optional(
    payload: dict[str, Any], key: str, prefix: Optional[str] = None
) -> Optional[list[str]]:
    """
    Decode an optional list of strings.

    An empty list carries no information and decodes to None, matching the
    encoder which never emits one.
    """
    if payload.get(key) is None:
        return None
    path = field_path(prefix, key)
    raw = payload[key]
    if not isinstance(raw, list):
        logger.debug("%s: expected a list, got %r", path, raw)
        raise InvalidFieldType(path, raw)
    values = [decode_str(item, index_path(path, i)) for i, item in enumerate(raw)]
    return values or None


def decode_enum(enum_type: type[E], raw: Any, path: str) -> E:
    variants = [member.value for member in enum_type]
    if not isinstance(raw, str) or raw not in variants:
        logger.debug("%s: unknown %s variant %r", path, enum_type.__name__, raw)
        raise UnknownVariant(path, raw, variants)
    return enum_type(raw)


def decode_enum_optional(
    enum_type: type[E], payload: dict[str, Any], key: str, prefix: Optional[str] = None
) -> Optional[E]:
    if payload.get(key) is None:
        return None
    return decode_enum(enum_type, payload[key], field_path(prefix, key))


def task_id_to_str(task_id: TaskId) -> str:
    return str(task_id)


def task_id_to_str_optional(task_id: Optional[TaskId]) -> Optional[str]:
    if task_id is None:
        return None
    return task_id_to_str(task_id)


def decode_task_id(raw: Any, path: str) -> TaskId:
    if not isinstance(raw, str):
        logger.debug("%s: identifier is not a string: %r", path, raw)
        raise InvalidIdentifier(path, raw)
    try:
        return uuid.UUID(raw)
    except ValueError as e:
        logger.debug("%s: invalid identifier %r (%s)", path, raw, e)
        raise InvalidIdentifier(path, raw) from e


def decode_task_id_optional(
    payload: dict[str, Any], key: str, prefix: Optional[str] = None
) -> Optional[TaskId]:
    if payload.get(key) is None:
        return None
    return decode_task_id(payload[key], field_path(prefix, key))


def uri_to_str(uri: httpx.URL) -> str:
    return str(uri)


def decode_uri(raw: Any, path: str) -> httpx.URL:
    if not isinstance(raw, str) or URI_PATTERN.fullmatch(raw) is None:
        logger.debug("%s: URI has characters outside RFC 3986: %r", path, raw)
        raise InvalidUri(path, raw)
    try:
        return httpx.URL(raw)
    except httpx.InvalidURL as e:
        logger.debug("%s: invalid URI %r (%s)", path, raw, e)
        raise InvalidUri(path, raw) from e
