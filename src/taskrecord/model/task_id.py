# SPDX-License-Identifier: MIT

import uuid
from typing import TypeAlias

TaskId: TypeAlias = uuid.UUID


def generate_task_id() -> TaskId:
    return uuid.uuid4()
