# SPDX-License-Identifier: MIT

from typing import Any

from taskrecord.codec.field import (
    decode_str,
    expect_object,
    field_path,
    ignore_unknown_keys,
    require,
)
from taskrecord.model.new_task import NewTask


def encode_new_task(new_task: NewTask) -> dict[str, Any]:
    return {"definition": new_task["definition"]}


def decode_new_task(raw: Any, path: str = "new_task") -> NewTask:
    payload = expect_object(raw, path)
    ignore_unknown_keys(payload, ("definition",), path)
    return {
        "definition": decode_str(
            require(payload, "definition", path), field_path(path, "definition")
        )
    }
