# SPDX-License-Identifier: MIT

from taskrecord.model.status import Status
from taskrecord.model.task import Task
from taskrecord.model.task_id import generate_task_id
from taskrecord.time import now_utc


def get_task_template(description: str) -> Task:
    now = now_utc()
    return {
        "id": generate_task_id(),
        "entry": now,
        "modified": now,
        "status": Status.PENDING,
        "description": description,
        "urgency": 0.0,
        "due": None,
        "start": None,
        "end": None,
        "wait": None,
        "parent": None,
        "project": None,
        "priority": None,
        "recur": None,
        "tags": None,
        "contextswitch": None,
    }
