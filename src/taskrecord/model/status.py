# SPDX-License-Identifier: MIT

from enum import StrEnum


class Status(StrEnum):
    PENDING = "pending"
    COMPLETED = "completed"
    RECURRING = "recurring"
    DELETED = "deleted"
