# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import httpx


class BookmarkContent(TypedDict):
    title: str
    content_preview: Optional[str]


class Bookmark(TypedDict):
    uri: httpx.URL
    content: Optional[BookmarkContent]
