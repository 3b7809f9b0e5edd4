# SPDX-License-Identifier: MIT

import logging

from taskrecord.codec.bookmark import (
    decode_bookmark,
    decode_bookmark_content,
    encode_bookmark,
    encode_bookmark_content,
)
from taskrecord.codec.contextswitch import (
    decode_contextswitch,
    decode_contextswitch_metadata,
    encode_contextswitch,
    encode_contextswitch_metadata,
)
from taskrecord.codec.new_task import decode_new_task, encode_new_task
from taskrecord.codec.task import decode_task, decode_tasks, encode_task, encode_tasks
from taskrecord.configuration import (
    DEFAULT_CONFIGURATION,
    Configuration,
    load_configuration,
)
from taskrecord.errors import (
    ConfigurationError,
    DecodeError,
    InvalidFieldType,
    InvalidIdentifier,
    InvalidUri,
    MalformedTimestamp,
    MissingRequiredField,
    PayloadSyntaxError,
    UnknownVariant,
)
from taskrecord.model.bookmark import Bookmark, BookmarkContent
from taskrecord.model.contextswitch import ContextswitchData, ContextSwitchMetadata
from taskrecord.model.new_task import NewTask
from taskrecord.model.priority import Priority
from taskrecord.model.recurrence import Recurrence
from taskrecord.model.status import Status
from taskrecord.model.task import Task
from taskrecord.model.task_id import TaskId, generate_task_id
from taskrecord.payload import dumps_task, dumps_tasks, loads_task, loads_tasks
from taskrecord.template.task import get_task_template
from taskrecord.time import (
    datetime_from_tw_str,
    datetime_from_tw_str_optional,
    datetime_to_tw_str,
    datetime_to_tw_str_optional,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Bookmark",
    "BookmarkContent",
    "Configuration",
    "ConfigurationError",
    "ContextSwitchMetadata",
    "ContextswitchData",
    "DEFAULT_CONFIGURATION",
    "DecodeError",
    "InvalidFieldType",
    "InvalidIdentifier",
    "InvalidUri",
    "MalformedTimestamp",
    "MissingRequiredField",
    "NewTask",
    "PayloadSyntaxError",
    "Priority",
    "Recurrence",
    "Status",
    "Task",
    "TaskId",
    "UnknownVariant",
    "datetime_from_tw_str",
    "datetime_from_tw_str_optional",
    "datetime_to_tw_str",
    "datetime_to_tw_str_optional",
    "decode_bookmark",
    "decode_bookmark_content",
    "decode_contextswitch",
    "decode_contextswitch_metadata",
    "decode_new_task",
    "decode_task",
    "decode_tasks",
    "dumps_task",
    "dumps_tasks",
    "encode_bookmark",
    "encode_bookmark_content",
    "encode_contextswitch",
    "encode_contextswitch_metadata",
    "encode_new_task",
    "encode_task",
    "encode_tasks",
    "generate_task_id",
    "get_task_template",
    "load_configuration",
    "loads_task",
    "loads_tasks",
]
