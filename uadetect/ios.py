# uadetect/ios.py

import re
from typing import Dict

from uadetect.schemas import IOSResult, IOSVersion
from uadetect.versions import extract_int_version

# Device tokens right after the opening parenthesis, so "CPU iPhone OS"
# further along the string is never read as the device
IPAD_PATTERN = re.compile(r"\(iPad[;)]", re.IGNORECASE)
IPHONE_PATTERN = re.compile(r"\(iPhone[;)]", re.IGNORECASE)
IPOD_PATTERN = re.compile(r"\(iPod[;) ]", re.IGNORECASE)

APPLE_MOBILE_PLATFORM = re.compile(r"iP(hone|od|ad)")
IOS_VERSION_PATTERN = re.compile(r"OS (\d+)_\d+_?\d*", re.ASCII)

# Per-major flags use their own pattern, independent of IOS_VERSION_PATTERN
IOS_MAJOR_PATTERNS: Dict[int, re.Pattern] = {
    major: re.compile(rf"OS {major}(_\d)+ like Mac OS X", re.IGNORECASE | re.ASCII)
    for major in (5, 6, 7, 8, 9)
}


def extract_ios_version(user_agent: str, platform: str) -> IOSVersion:
    """
    Major iOS version, only trusted when the platform string itself
    names an Apple mobile device.
    """
    if not APPLE_MOBILE_PLATFORM.search(platform):
        return False
    return extract_int_version(IOS_VERSION_PATTERN, user_agent)


def detect_ios(user_agent: str, platform: str) -> IOSResult:
    is_ipad = bool(IPAD_PATTERN.search(user_agent))
    is_iphone = bool(IPHONE_PATTERN.search(user_agent))
    is_ipod = bool(IPOD_PATTERN.search(user_agent))

    majors = {major: bool(pattern.search(user_agent)) for major, pattern in IOS_MAJOR_PATTERNS.items()}

    return IOSResult(
        is_ipad=is_ipad,
        is_iphone=is_iphone,
        is_ipod=is_ipod,
        is_ios=is_ipad or is_iphone or is_ipod,
        is_ios5=majors[5],
        is_ios6=majors[6],
        is_ios7=majors[7],
        is_ios8=majors[8],
        is_ios9=majors[9],
        ios_version=extract_ios_version(user_agent, platform),
    )
