# SPDX-License-Identifier: MIT

import json

import pytest

from taskrecord.configuration import Configuration, get_default_configuration
from taskrecord.errors import InvalidFieldType, MalformedTimestamp, PayloadSyntaxError
from taskrecord.model.task import Task
from taskrecord.payload import dumps_task, dumps_tasks, loads_task, loads_tasks


@pytest.fixture()
def yaml_configuration() -> Configuration:
    configuration = get_default_configuration()
    configuration["payload_format"] = "yaml"
    return configuration


def test_json_export_is_an_array(minimal_task: Task, full_task: Task) -> None:
    exported = json.loads(dumps_tasks([minimal_task, full_task]))
    assert isinstance(exported, list)
    assert exported[0]["entry"] == "20240101T120000Z"
    assert "due" not in exported[0]
    assert exported[1]["priority"] == "H"


def test_json_round_trip(minimal_task: Task, full_task: Task) -> None:
    assert loads_tasks(dumps_tasks([minimal_task, full_task])) == [
        minimal_task,
        full_task,
    ]


def test_json_has_no_null(full_task: Task) -> None:
    assert "null" not in dumps_tasks([{**full_task, "due": None, "project": None}])


def test_single_task_round_trip(full_task: Task) -> None:
    assert loads_task(dumps_task(full_task)) == full_task


def test_json_indent(minimal_task: Task) -> None:
    configuration = get_default_configuration()
    configuration["json_indent"] = 2
    text = dumps_task(minimal_task, configuration)
    assert text.startswith('{\n  "id"')


def test_ensure_ascii(minimal_task: Task) -> None:
    task: Task = {**minimal_task, "description": "Café"}
    assert "Café" in dumps_task(task)
    configuration = get_default_configuration()
    configuration["ensure_ascii"] = True
    assert "Caf\\u00e9" in dumps_task(task, configuration)


def test_yaml_round_trip(
    minimal_task: Task, full_task: Task, yaml_configuration: Configuration
) -> None:
    text = dumps_tasks([minimal_task, full_task], yaml_configuration)
    assert "entry: 20240101T120000Z" in text
    assert loads_tasks(text, yaml_configuration) == [minimal_task, full_task]


def test_empty_yaml_document(yaml_configuration: Configuration) -> None:
    assert loads_tasks("", yaml_configuration) == []


def test_invalid_json() -> None:
    with pytest.raises(PayloadSyntaxError) as exc_info:
        loads_tasks("[{")
    assert exc_info.value.field == "<payload>"


def test_invalid_yaml(yaml_configuration: Configuration) -> None:
    with pytest.raises(PayloadSyntaxError):
        loads_tasks("- [unclosed", yaml_configuration)


def test_top_level_must_be_a_list() -> None:
    with pytest.raises(InvalidFieldType):
        loads_tasks('{"id": "x"}')


def test_decode_errors_propagate(minimal_task: Task) -> None:
    text = dumps_task(minimal_task).replace("20240101T120000Z", "2024-01-01T12:00:00Z")
    with pytest.raises(MalformedTimestamp) as exc_info:
        loads_task(text)
    assert exc_info.value.field == "entry"


def test_non_finite_urgency_is_not_written(minimal_task: Task) -> None:
    with pytest.raises(ValueError):
        dumps_task({**minimal_task, "urgency": float("inf")})


@pytest.mark.parametrize("literal", ["NaN", "Infinity", "-Infinity"])
def test_non_finite_urgency_is_not_read(minimal_task: Task, literal: str) -> None:
    text = dumps_task(minimal_task).replace('"urgency": 4.2', f'"urgency": {literal}')
    with pytest.raises(InvalidFieldType) as exc_info:
        loads_task(text)
    assert exc_info.value.field == "urgency"
