# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Literal, Optional, TypedDict, cast

from yaml import YAMLError, load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]

from taskrecord.errors import ConfigurationError

logger = logging.getLogger(__name__)

PayloadFormat = Literal["json", "yaml"]
PAYLOAD_FORMATS: tuple[PayloadFormat, ...] = ("json", "yaml")


class Configuration(TypedDict):
    payload_format: PayloadFormat
    json_indent: Optional[int]
    ensure_ascii: bool


DEFAULT_CONFIGURATION: Configuration = {
    "payload_format": "json",
    "json_indent": None,
    "ensure_ascii": False,
}


def get_default_configuration() -> Configuration:
    return cast(Configuration, dict(DEFAULT_CONFIGURATION))


def load_configuration(path: Path) -> Configuration:
    """
    Read a YAML configuration file and merge it over the defaults.

    An empty file yields the defaults. Unknown keys and values of the wrong
    type raise ConfigurationError.
    """
    try:
        raw = load(path.read_text(), Loader=Loader)
    except YAMLError as e:
        raise ConfigurationError(f"{path}: invalid YAML: {e}") from e

    configuration = get_default_configuration()
    if raw is None:
        logger.debug("%s is empty, using default configuration", path)
        return configuration
    if not isinstance(raw, dict):
        raise ConfigurationError(f"{path}: expected a mapping at the top level")

    unknown = sorted(str(key) for key in raw.keys() - DEFAULT_CONFIGURATION.keys())
    if unknown:
        raise ConfigurationError(f"{path}: unknown keys: {', '.join(unknown)}")

    if "payload_format" in raw:
        if raw["payload_format"] not in PAYLOAD_FORMATS:
            raise ConfigurationError(
                f"{path}: payload_format must be one of {', '.join(PAYLOAD_FORMATS)}"
            )
        configuration["payload_format"] = raw["payload_format"]
    if "json_indent" in raw:
        json_indent = raw["json_indent"]
        if json_indent is not None and (
            isinstance(json_indent, bool)
            or not isinstance(json_indent, int)
            or json_indent < 0
        ):
            raise ConfigurationError(
                f"{path}: json_indent must be a non-negative integer or null"
            )
        configuration["json_indent"] = json_indent
    if "ensure_ascii" in raw:
        if not isinstance(raw["ensure_ascii"], bool):
            raise ConfigurationError(f"{path}: ensure_ascii must be a boolean")
        configuration["ensure_ascii"] = raw["ensure_ascii"]

    logger.debug("loaded configuration from %s: %r", path, configuration)
    return configuration
