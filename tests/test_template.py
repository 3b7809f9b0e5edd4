# SPDX-License-Identifier: MIT

from taskrecord.codec.task import REQUIRED_KEYS, decode_task, encode_task
from taskrecord.model.status import Status
from taskrecord.template.task import get_task_template


def test_template_defaults() -> None:
    task = get_task_template("Water the plants")
    assert task["description"] == "Water the plants"
    assert task["status"] is Status.PENDING
    assert task["urgency"] == 0.0
    assert task["entry"] == task["modified"]
    assert task["entry"].microsecond == 0


def test_template_encodes_only_required_keys() -> None:
    assert set(encode_task(get_task_template("x"))) == set(REQUIRED_KEYS)


def test_template_round_trips() -> None:
    task = get_task_template("Water the plants")
    assert decode_task(encode_task(task)) == task


def test_changes_produce_new_values() -> None:
    task = get_task_template("Water the plants")
    completed = {**task, "status": Status.COMPLETED}
    assert task["status"] is Status.PENDING
    assert completed["id"] == task["id"]
