# SPDX-License-Identifier: MIT

from enum import StrEnum


class Priority(StrEnum):
    H = "H"
    M = "M"
    L = "L"
