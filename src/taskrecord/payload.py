# SPDX-License-Identifier: MIT

import json
import logging
from typing import Any, Iterable, Optional

from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from taskrecord.codec.task import decode_task, decode_tasks, encode_task, encode_tasks
from taskrecord.configuration import Configuration, get_default_configuration
from taskrecord.errors import PayloadSyntaxError
from taskrecord.model.task import Task

logger = logging.getLogger(__name__)

PAYLOAD_FIELD = "<payload>"


def _dumps(value: Any, configuration: Configuration) -> str:
    if configuration["payload_format"] == "yaml":
        return dump(value, Dumper=Dumper, sort_keys=False, allow_unicode=True)
    return json.dumps(
        value,
        indent=configuration["json_indent"],
        ensure_ascii=configuration["ensure_ascii"],
        allow_nan=False,
    )


def _loads(text: str, configuration: Configuration) -> Any:
    try:
        if configuration["payload_format"] == "yaml":
            return load(text, Loader=Loader)
        return json.loads(text)
    except (ValueError, YAMLError) as e:
        logger.debug("payload is not valid %s: %s", configuration["payload_format"], e)
        raise PayloadSyntaxError(PAYLOAD_FIELD, text, str(e)) from e


def dumps_task(task: Task, configuration: Optional[Configuration] = None) -> str:
    return _dumps(encode_task(task), configuration or get_default_configuration())


def loads_task(text: str, configuration: Optional[Configuration] = None) -> Task:
    return decode_task(_loads(text, configuration or get_default_configuration()))


def dumps_tasks(
    tasks: Iterable[Task], configuration: Optional[Configuration] = None
) -> str:
    """
    Serialize tasks to text.

    With the default JSON format the result is a JSON array of task objects,
    the same shape `task export` writes and `task import` reads.
    """
    return _dumps(encode_tasks(tasks), configuration or get_default_configuration())


def loads_tasks(text: str, configuration: Optional[Configuration] = None) -> list[Task]:
    configuration = configuration or get_default_configuration()
    raw = _loads(text, configuration)
    # an empty YAML document carries no tasks
    if raw is None and configuration["payload_format"] == "yaml":
        return []
    return decode_tasks(raw)
