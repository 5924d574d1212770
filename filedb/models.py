from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, field_validator

KEY_VALUE_SEP = ":"

_KEY_FORMAT = re.compile(r"[A-Za-z0-9_-]*")


def is_valid_key(key: str) -> bool:
    # ASCII only; \w would let unicode letters through.
    return _KEY_FORMAT.fullmatch(key) is not None


class Entry(BaseModel):
    """
    One persisted line: `<key>:<value>`.

    The key never contains the separator; the value may, since only the first
    separator on a line splits it.
    """

    model_config = ConfigDict(frozen=True)

    key: str
    value: str

    # Plain validators: values read with surrogateescape hold lone surrogates,
    # which pydantic's own str validation rejects.
    @field_validator("key", mode="plain")
    @classmethod
    def _check_key(cls, v: object) -> str:
        if not isinstance(v, str) or not is_valid_key(v):
            raise ValueError(f"key {v!r} must match [A-Za-z0-9_-]*")
        return v

    @field_validator("value", mode="plain")
    @classmethod
    def _check_value(cls, v: object) -> str:
        if not isinstance(v, str):
            raise ValueError("value must be a string")
        if "\n" in v:
            raise ValueError("value must not contain a newline")
        return v

    @classmethod
    def from_line(cls, line: str) -> "Entry":
        key, sep, value = line.partition(KEY_VALUE_SEP)
        if not sep:
            raise ValueError(f"missing {KEY_VALUE_SEP!r} separator")
        return cls(key=key, value=value)

    def to_line(self) -> str:
        return f"{self.key}{KEY_VALUE_SEP}{self.value}\n"
