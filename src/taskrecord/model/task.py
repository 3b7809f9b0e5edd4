# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from taskrecord.model.contextswitch import ContextswitchData
from taskrecord.model.priority import Priority
from taskrecord.model.recurrence import Recurrence
from taskrecord.model.status import Status
from taskrecord.model.task_id import TaskId


class Task(TypedDict):
    id: TaskId
    entry: pendulum.DateTime
    modified: pendulum.DateTime
    status: Status
    description: str
    urgency: float
    due: Optional[pendulum.DateTime]
    start: Optional[pendulum.DateTime]
    end: Optional[pendulum.DateTime]
    wait: Optional[pendulum.DateTime]
    parent: Optional[TaskId]
    project: Optional[str]
    priority: Optional[Priority]
    recur: Optional[Recurrence]
    tags: Optional[list[str]]
    contextswitch: Optional[ContextswitchData]
