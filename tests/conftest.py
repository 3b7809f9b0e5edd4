# SPDX-License-Identifier: MIT

from typing import Any

import httpx
import pendulum
import pytest

from taskrecord.model.priority import Priority
from taskrecord.model.recurrence import Recurrence
from taskrecord.model.status import Status
from taskrecord.model.task import Task

from .samples import PARENT_ID, TASK_ID


@pytest.fixture()
def minimal_task() -> Task:
    return {
        "id": TASK_ID,
        "entry": pendulum.datetime(2024, 1, 1, 12, 0, 0, tz="UTC"),
        "modified": pendulum.datetime(2024, 1, 2, 8, 30, 15, tz="UTC"),
        "status": Status.PENDING,
        "description": "Write the quarterly report",
        "urgency": 4.2,
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


@pytest.fixture()
def full_task(minimal_task: Task) -> Task:
    return {
        **minimal_task,
        "status": Status.RECURRING,
        "due": pendulum.datetime(2024, 3, 31, 23, 59, 59, tz="UTC"),
        "start": pendulum.datetime(2024, 1, 3, 9, 0, 0, tz="UTC"),
        "end": pendulum.datetime(2024, 1, 4, 17, 45, 0, tz="UTC"),
        "wait": pendulum.datetime(2024, 1, 10, 0, 0, 0, tz="UTC"),
        "parent": PARENT_ID,
        "project": "work.reports",
        "priority": Priority.H,
        "recur": Recurrence.MONTHLY,
        "tags": ["finance", "quarterly"],
        "contextswitch": {
            "bookmarks": [
                {
                    "uri": httpx.URL("https://example.com/reports/q1?draft=1"),
                    "content": {
                        "title": "Q1 draft",
                        "content_preview": "Revenue grew by...",
                    },
                },
                {
                    "uri": httpx.URL("https://wiki.example.org/finance/templates"),
                    "content": {"title": "Templates", "content_preview": None},
                },
                {
                    "uri": httpx.URL("https://notes.example.net/inbox.md"),
                    "content": None,
                },
            ]
        },
    }


@pytest.fixture()
def minimal_payload() -> dict[str, Any]:
    return {
        "id": "6f1b8c3e-2d4a-4e5b-9c7d-0a1b2c3d4e5f",
        "entry": "20240101T120000Z",
        "modified": "20240102T083015Z",
        "status": "pending",
        "description": "Write the quarterly report",
        "urgency": 4.2,
    }
