# SPDX-License-Identifier: MIT

import logging
import warnings
from typing import Any, Optional

from taskrecord.codec.bookmark import decode_bookmark, encode_bookmark
from taskrecord.codec.field import (
    decode_int,
    expect_object,
    field_path,
    ignore_unknown_keys,
    index_path,
    require,
)
from taskrecord.errors import InvalidFieldType
from taskrecord.model.contextswitch import ContextswitchData, ContextSwitchMetadata

logger = logging.getLogger(__name__)

LEGACY_WARNING = (
    "ContextSwitchMetadata is deprecated, use ContextswitchData (a list of bookmarks)"
)


def encode_contextswitch(data: ContextswitchData) -> dict[str, Any]:
    return {"bookmarks": [encode_bookmark(bookmark) for bookmark in data["bookmarks"]]}


def decode_contextswitch(raw: Any, path: str = "contextswitch") -> ContextswitchData:
    payload = expect_object(raw, path)
    ignore_unknown_keys(payload, ("bookmarks",), path)

    bookmarks_path = field_path(path, "bookmarks")
    raw_bookmarks = require(payload, "bookmarks", path)
    if not isinstance(raw_bookmarks, list):
        logger.debug("%s: expected a list, got %r", bookmarks_path, raw_bookmarks)
        raise InvalidFieldType(bookmarks_path, raw_bookmarks)

    return {
        "bookmarks": [
            decode_bookmark(item, index_path(bookmarks_path, i))
            for i, item in enumerate(raw_bookmarks)
        ]
    }


def decode_contextswitch_optional(
    payload: dict[str, Any], key: str, prefix: Optional[str] = None
) -> Optional[ContextswitchData]:
    if payload.get(key) is None:
        return None
    return decode_contextswitch(payload[key], field_path(prefix, key))


def encode_contextswitch_metadata(metadata: ContextSwitchMetadata) -> dict[str, Any]:
    warnings.warn(LEGACY_WARNING, DeprecationWarning, stacklevel=2)
    logger.warning("encoding deprecated ContextSwitchMetadata")
    return {"version": metadata["version"]}


def decode_contextswitch_metadata(
    raw: Any, path: str = "contextswitch"
) -> ContextSwitchMetadata:
    warnings.warn(LEGACY_WARNING, DeprecationWarning, stacklevel=2)
    logger.warning("decoding deprecated ContextSwitchMetadata")
    payload = expect_object(raw, path)
    ignore_unknown_keys(payload, ("version",), path)
    return {
        "version": decode_int(
            require(payload, "version", path), field_path(path, "version")
        )
    }
