# uadetect/comparison.py
"""
Browser version comparison helpers.

Versions are either a number or the False sentinel ("not this browser").
Ordering comparisons are False whenever either side is the sentinel;
equality holds between two sentinels.
"""

from typing import Union

from uadetect.schemas import BrowserVersion
from uadetect.versions import is_number

Comparable = Union[BrowserVersion, float]


def is_browser_version_greater_than(current_version: Comparable, compare_version: Comparable) -> bool:
    return is_number(current_version) and is_number(compare_version) and current_version > compare_version


def is_browser_version_greater_than_or_equal(current_version: Comparable, compare_version: Comparable) -> bool:
    return is_number(current_version) and is_number(compare_version) and current_version >= compare_version


def is_browser_version_less_than(current_version: Comparable, compare_version: Comparable) -> bool:
    return is_number(current_version) and is_number(compare_version) and current_version < compare_version


def is_browser_version_less_than_or_equal(current_version: Comparable, compare_version: Comparable) -> bool:
    return is_number(current_version) and is_number(compare_version) and current_version <= compare_version


def is_browser_version_equal(current_version: Comparable, compare_version: Comparable) -> bool:
    current_known = is_number(current_version)
    compare_known = is_number(compare_version)
    if not current_known and not compare_known:
        return True
    if current_known != compare_known:
        return False
    return current_version == compare_version


def is_browser_version_in_range(current_version: Comparable, min_version: Comparable, max_version: Comparable) -> bool:
    """Inclusive on both ends"""
    return (
        is_number(current_version)
        and is_number(min_version)
        and is_number(max_version)
        and min_version <= current_version <= max_version
    )
