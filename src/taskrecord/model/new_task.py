# SPDX-License-Identifier: MIT

from typing import TypedDict


class NewTask(TypedDict):
    definition: str
