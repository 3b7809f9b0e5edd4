# SPDX-License-Identifier: MIT

import logging
from typing import Any, Iterable, Optional

from taskrecord import time
from taskrecord.codec.contextswitch import (
    decode_contextswitch_optional,
    encode_contextswitch,
)
from taskrecord.codec.field import (
    decode_enum,
    decode_enum_optional,
    decode_float,
    decode_str,
    decode_str_list_optional,
    decode_str_optional,
    decode_task_id,
    decode_task_id_optional,
    expect_object,
    field_path,
    ignore_unknown_keys,
    index_path,
    put_optional,
    require,
    task_id_to_str,
    task_id_to_str_optional,
)
from taskrecord.errors import InvalidFieldType
from taskrecord.model.priority import Priority
from taskrecord.model.recurrence import Recurrence
from taskrecord.model.status import Status
from taskrecord.model.task import Task

logger = logging.getLogger(__name__)

REQUIRED_KEYS = ("id", "entry", "modified", "status", "description", "urgency")
OPTIONAL_KEYS = (
    "due",
    "start",
    "end",
    "wait",
    "parent",
    "project",
    "priority",
    "recur",
    "tags",
    "contextswitch",
)
TASK_KEYS = REQUIRED_KEYS + OPTIONAL_KEYS


def encode_task(task: Task) -> dict[str, Any]:
    """
    Encode a task into its payload form.

    Keys follow the order of TASK_KEYS. Optional attributes without a value
    are left out of the payload entirely.
    """
    payload: dict[str, Any] = {
        "id": task_id_to_str(task["id"]),
        "entry": time.datetime_to_tw_str(task["entry"]),
        "modified": time.datetime_to_tw_str(task["modified"]),
        "status": str(task["status"]),
        "description": task["description"],
        "urgency": float(task["urgency"]),
    }
    put_optional(payload, "due", time.datetime_to_tw_str_optional(task["due"]))
    put_optional(payload, "start", time.datetime_to_tw_str_optional(task["start"]))
    put_optional(payload, "end", time.datetime_to_tw_str_optional(task["end"]))
    put_optional(payload, "wait", time.datetime_to_tw_str_optional(task["wait"]))
    put_optional(payload, "parent", task_id_to_str_optional(task["parent"]))
    put_optional(payload, "project", task["project"])
    if task["priority"] is not None:
        payload["priority"] = str(task["priority"])
    if task["recur"] is not None:
        payload["recur"] = str(task["recur"])
    if task["tags"]:
        payload["tags"] = list(task["tags"])
    if task["contextswitch"] is not None:
        payload["contextswitch"] = encode_contextswitch(task["contextswitch"])
    return payload


def decode_task(raw: Any, path: Optional[str] = None) -> Task:
    """
    Decode a payload into a Task.

    Raises a DecodeError subclass naming the first offending field. Nothing is
    defaulted: a task is either fully valid or not returned at all.
    """
    payload = expect_object(raw, path or "task")
    ignore_unknown_keys(payload, TASK_KEYS, path)

    return {
        "id": decode_task_id(require(payload, "id", path), field_path(path, "id")),
        "entry": time.datetime_from_tw_str(
            require(payload, "entry", path), field_path(path, "entry")
        ),
        "modified": time.datetime_from_tw_str(
            require(payload, "modified", path), field_path(path, "modified")
        ),
        "status": decode_enum(
            Status, require(payload, "status", path), field_path(path, "status")
        ),
        "description": decode_str(
            require(payload, "description", path), field_path(path, "description")
        ),
        "urgency": decode_float(
            require(payload, "urgency", path), field_path(path, "urgency")
        ),
        "due": time.datetime_from_tw_str_optional(payload, "due", path),
        "start": time.datetime_from_tw_str_optional(payload, "start", path),
        "end": time.datetime_from_tw_str_optional(payload, "end", path),
        "wait": time.datetime_from_tw_str_optional(payload, "wait", path),
        "parent": decode_task_id_optional(payload, "parent", path),
        "project": decode_str_optional(payload, "project", path),
        "priority": decode_enum_optional(Priority, payload, "priority", path),
        "recur": decode_enum_optional(Recurrence, payload, "recur", path),
        "tags": decode_str_list_optional(payload, "tags", path),
        "contextswitch": decode_contextswitch_optional(payload, "contextswitch", path),
    }


def encode_tasks(tasks: Iterable[Task]) -> list[dict[str, Any]]:
    return [encode_task(task) for task in tasks]


def decode_tasks(raw: Any) -> list[Task]:
    """Decode a list of task payloads, as produced by a taskwarrior export."""
    if not isinstance(raw, list):
        logger.debug("tasks: expected a list, got %r", raw)
        raise InvalidFieldType("tasks", raw)
    return [decode_task(item, index_path("tasks", i)) for i, item in enumerate(raw)]
