"""Formatting of values inside failure messages."""

from __future__ import annotations

import os
from datetime import date, datetime
from typing import Any


class Representation:
    """Converts values to the strings shown in failure messages."""

    def to_string(self, value: Any) -> str:
        if value is None:
            return "null"
        if isinstance(value, str):
            return f'"{value}"'
        if isinstance(value, (bool, int, float)):
            return str(value)
        if isinstance(value, datetime):
            return value.isoformat(timespec="milliseconds")
        if isinstance(value, date):
            return value.isoformat()
        if isinstance(value, os.PathLike):
            return os.fspath(value)
        if isinstance(value, (bytes, bytearray)):
            return bytes(value).hex().upper()
        return repr(value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class StandardRepresentation(Representation):
    pass


class HexadecimalRepresentation(Representation):
    """Shows integers and byte strings in hexadecimal."""

    def to_string(self, value: Any) -> str:
        if isinstance(value, bool):
            return super().to_string(value)
        if isinstance(value, int):
            return hex(value)
        if isinstance(value, (bytes, bytearray)):
            return "0x" + bytes(value).hex().upper()
        return super().to_string(value)


STANDARD_REPRESENTATION = StandardRepresentation()
HEXADECIMAL_REPRESENTATION = HexadecimalRepresentation()
