# SPDX-License-Identifier: MIT

from typing import Any, Optional

from taskrecord.codec.field import (
    decode_str,
    decode_uri,
    expect_object,
    field_path,
    ignore_unknown_keys,
    put_optional,
    require,
    uri_to_str,
)
from taskrecord.model.bookmark import Bookmark, BookmarkContent

BOOKMARK_KEYS = ("uri", "content")
BOOKMARK_CONTENT_KEYS = ("title", "content_preview")


def encode_bookmark_content(content: BookmarkContent) -> dict[str, Any]:
    payload: dict[str, Any] = {"title": content["title"]}
    put_optional(payload, "content_preview", content["content_preview"])
    return payload


def decode_bookmark_content(raw: Any, path: str = "content") -> BookmarkContent:
    payload = expect_object(raw, path)
    ignore_unknown_keys(payload, BOOKMARK_CONTENT_KEYS, path)

    # Older backends write an explicit null preview instead of omitting it.
    content_preview: Optional[str] = None
    if payload.get("content_preview") is not None:
        content_preview = decode_str(
            payload["content_preview"], field_path(path, "content_preview")
        )

    return {
        "title": decode_str(require(payload, "title", path), field_path(path, "title")),
        "content_preview": content_preview,
    }


def encode_bookmark(bookmark: Bookmark) -> dict[str, Any]:
    payload: dict[str, Any] = {"uri": uri_to_str(bookmark["uri"])}
    if bookmark["content"] is not None:
        payload["content"] = encode_bookmark_content(bookmark["content"])
    return payload


def decode_bookmark(raw: Any, path: str = "bookmark") -> Bookmark:
    payload = expect_object(raw, path)
    ignore_unknown_keys(payload, BOOKMARK_KEYS, path)

    content: Optional[BookmarkContent] = None
    if payload.get("content") is not None:
        content = decode_bookmark_content(
            payload["content"], field_path(path, "content")
        )

    return {
        "uri": decode_uri(require(payload, "uri", path), field_path(path, "uri")),
        "content": content,
    }
