import re
from enum import Enum
from typing import Type

from spark_bigquery.exceptions import InvalidEnumValue, InvalidIntegerValue

LONG_MIN = -(2 ** 63)
LONG_MAX = 2 ** 63 - 1

long_pattern = re.compile(r"[+-]?[0-9]+")


def parse_long(key: str, value: str) -> int:
    """
    Parses a signed 64-bit base-10 integer. Whitespace, underscores and
    out-of-range numbers are rejected.
    """
    if not isinstance(value, str) or not long_pattern.fullmatch(value):
        raise InvalidIntegerValue(key, value)

    parsed = int(value)
    if not LONG_MIN <= parsed <= LONG_MAX:
        raise InvalidIntegerValue(key, value)

    return parsed


def parse_enum(key: str, value: str, enum_class: Type[Enum]) -> Enum:
    """
    Maps a label onto a member of enum_class. Matching is exact and case-sensitive.
    """
    for member in enum_class:
        if member.value == value:
            return member

    raise InvalidEnumValue(key, value, [member.value for member in enum_class])
