# SPDX-License-Identifier: MIT

from typing import TypedDict

from taskrecord.model.bookmark import Bookmark


class ContextswitchData(TypedDict):
    bookmarks: list[Bookmark]


class ContextSwitchMetadata(TypedDict):
    """
    Deprecated counter form of a task's context switch data.

    Superseded by ContextswitchData; only kept so old payloads can still be
    read and rewritten.
    """

    version: int
