# SPDX-License-Identifier: MIT

from typing import Any, Optional


class DecodeError(ValueError):
    """
    Raised when a payload cannot be turned into an entity.

    `field` is the dotted path of the offending key (e.g.
    `contextswitch.bookmarks[0].uri`) and `raw` the value found there.
    """

    reason = "could not be decoded"

    def __init__(self, field: str, raw: Any = None) -> None:
        self.field = field
        self.raw = raw
        super().__init__(self.describe())

    def describe(self) -> str:
        return f"{self.field}: {self.reason}: {self.raw!r}"


class MalformedTimestamp(DecodeError):
    reason = "expected a timestamp in YYYYMMDDTHHMMSSZ format"


class UnknownVariant(DecodeError):
    reason = "matches no known variant"

    def __init__(
        self, field: str, raw: Any = None, variants: Optional[list[str]] = None
    ) -> None:
        self.variants = variants or []
        super().__init__(field, raw)

    def describe(self) -> str:
        message = super().describe()
        if self.variants:
            message += f" (expected one of {', '.join(self.variants)})"
        return message


class InvalidIdentifier(DecodeError):
    reason = "is not a valid UUID"


class InvalidUri(DecodeError):
    reason = "is not a valid URI"


class InvalidFieldType(DecodeError):
    reason = "has an unexpected type or value"


class MissingRequiredField(DecodeError):
    reason = "is required but missing"

    def __init__(self, field: str) -> None:
        super().__init__(field, None)

    def describe(self) -> str:
        return f"{self.field}: {self.reason}"


class PayloadSyntaxError(DecodeError):
    reason = "is not a well-formed payload"

    def __init__(
        self, field: str, raw: Any = None, detail: Optional[str] = None
    ) -> None:
        self.detail = detail
        super().__init__(field, raw)

    def describe(self) -> str:
        if self.detail is None:
            return f"{self.field}: {self.reason}"
        return f"{self.field}: {self.reason}: {self.detail}"


class ConfigurationError(ValueError):
    pass
