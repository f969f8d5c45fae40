# uadetect/versions.py

import re
from typing import Optional, Pattern, Union

from uadetect.schemas import BrowserVersion

# ASCII digits only; "١٢٣" is not a version
_INT_PREFIX = re.compile(r"\s*([+-]?[0-9]+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)")


def parse_int_prefix(text: str) -> Optional[int]:
    """
    Parse the leading integer of a string, ignoring whatever follows.

    "119.0.0.0" -> 119, "17_0" -> 17, "abc" -> None
    """
    match = _INT_PREFIX.match(text)
    if not match:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        # digit runs past the interpreter's int conversion limit
        return None


def parse_float_prefix(text: str) -> Optional[float]:
    """
    Parse the leading decimal number of a string, ignoring whatever follows.

    "4.0.4; Galaxy" -> 4.0, "13)" -> 13.0, ";" -> None
    """
    match = _FLOAT_PREFIX.match(text)
    if not match:
        return None
    try:
        return float(match.group(1))
    except (ValueError, OverflowError):
        return None


def extract_int_version(pattern: Pattern, text: str) -> BrowserVersion:
    """Integer version from the first capture group, or False"""
    match = pattern.search(text)
    if not match or match.group(1) is None:
        return False
    version = parse_int_prefix(match.group(1))
    return False if version is None else version


def extract_float_version(pattern: Pattern, text: str) -> Optional[float]:
    """Float version from the first capture group, or None"""
    match = pattern.search(text)
    if not match or match.group(1) is None:
        return None
    return parse_float_prefix(match.group(1))


def is_number(value: Union[int, float, bool, None]) -> bool:
    # bool is an int subclass, but False is the "no version" sentinel
    return isinstance(value, (int, float)) and not isinstance(value, bool)
