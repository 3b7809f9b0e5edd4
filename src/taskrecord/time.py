# SPDX-License-Identifier: MIT

import datetime
import logging
import re
from typing import Any, Optional

import pendulum

from taskrecord.errors import MalformedTimestamp

logger = logging.getLogger(__name__)

TW_FORMAT = "YYYYMMDD[T]HHmmss[Z]"
TW_PATTERN = re.compile(
    r"(?P<year>[0-9]{4})(?P<month>[0-9]{2})(?P<day>[0-9]{2})"
    r"T(?P<hour>[0-9]{2})(?P<minute>[0-9]{2})(?P<second>[0-9]{2})Z"
)


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC").set(microsecond=0)


def python_to_pendulum_utc(python_value: datetime.datetime) -> pendulum.DateTime:
    """
    Convert a standard datetime to a pendulum.DateTime in UTC.

    Naive values are taken to already be in UTC, the only zone the wire
    format knows about.
    """
    if isinstance(python_value, pendulum.DateTime):
        return python_value.in_tz("UTC")
    pendulum_value = pendulum.instance(python_value, tz="UTC")
    return pendulum_value.in_tz("UTC")


def datetime_to_tw_str(datetime: datetime.datetime) -> str:
    return python_to_pendulum_utc(datetime).format(TW_FORMAT)


def datetime_to_tw_str_optional(
    datetime: Optional[datetime.datetime],
) -> Optional[str]:
    if datetime is None:
        return None
    return datetime_to_tw_str(datetime)


def datetime_from_tw_str(raw: Any, field: str = "timestamp") -> pendulum.DateTime:
    """
    Parse a `YYYYMMDDTHHMMSSZ` timestamp into a UTC pendulum.DateTime.

    Only that exact 16 character layout is accepted; separators, offsets,
    fractional seconds and out-of-range components all raise
    MalformedTimestamp.
    """
    if not isinstance(raw, str):
        logger.debug("%s: timestamp is not a string: %r", field, raw)
        raise MalformedTimestamp(field, raw)
    match = TW_PATTERN.fullmatch(raw)
    if match is None:
        logger.debug("%s: timestamp does not match format: %r", field, raw)
        raise MalformedTimestamp(field, raw)
    try:
        return pendulum.datetime(
            int(match["year"]),
            int(match["month"]),
            int(match["day"]),
            int(match["hour"]),
            int(match["minute"]),
            int(match["second"]),
            tz="UTC",
        )
    except ValueError as e:
        logger.debug("%s: timestamp out of range: %r (%s)", field, raw, e)
        raise MalformedTimestamp(field, raw) from e


def datetime_from_tw_str_optional(
    payload: dict[str, Any], key: str, prefix: Optional[str] = None
) -> Optional[pendulum.DateTime]:
    """
    Decode an optional timestamp key of `payload`.

    Unlike the other `_optional` helpers this takes the enclosing payload and
    a key rather than the value, since a missing key and a present value
    decode differently. `prefix` is the path of the payload in error messages.

    A missing key is absent. A present key is parsed strictly, so `null` or an
    empty string fails exactly like any other malformed value.
    """
    if key not in payload:
        return None
    return datetime_from_tw_str(payload[key], f"{prefix}.{key}" if prefix else key)
