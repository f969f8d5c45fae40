# uadetect/android.py

import re
from typing import Optional

from uadetect.schemas import AndroidResult
from uadetect.versions import extract_float_version, parse_float_prefix

ANDROID_PATTERN = re.compile(r"Android", re.IGNORECASE)
WEBKIT_VERSION_PATTERN = re.compile(r"AppleWebKit/([\d.]+)", re.ASCII)

ANDROID_MARKER = "Android"

# The stock (pre-Chromium) browser never shipped AppleWebKit 537 or later
STOCK_WEBKIT_CEILING = 537


def extract_android_version(user_agent: str) -> Optional[float]:
    """First number after "Android " ("Android 4.0.4;" -> 4.0)"""
    index = user_agent.find(ANDROID_MARKER)
    if index == -1:
        return None
    return parse_float_prefix(user_agent[index + len(ANDROID_MARKER) + 1:])


def extract_webkit_version(user_agent: str) -> Optional[float]:
    return extract_float_version(WEBKIT_VERSION_PATTERN, user_agent)


def detect_android(user_agent: str) -> AndroidResult:
    is_android = bool(ANDROID_PATTERN.search(user_agent))

    version = extract_android_version(user_agent)
    is_android_old = is_android and version is not None and version < 4

    is_android_stock = False
    if is_android:
        webkit_version = extract_webkit_version(user_agent)
        is_android_stock = webkit_version is not None and webkit_version < STOCK_WEBKIT_CEILING

    return AndroidResult(
        is_android=is_android,
        is_android_old=is_android_old,
        is_android_stock=is_android_stock,
    )
