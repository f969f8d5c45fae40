# uadetect/device.py

import re
from typing import List, Tuple

from uadetect.schemas import DeviceResult, DeviceType

SMARTTV_PATTERN = re.compile(
    r"smart.?tv|googletv|apple.?tv|hbbtv|pov_tv|netcast|nettv|roku|dlnadoc|philips|panasonic"
    r"|lg.*smart|webos|crkey|chromecast",
    re.IGNORECASE,
)
CONSOLE_PATTERN = re.compile(r"playstation|xbox|nintendo|ouya|shield.*(gaming|portable)|retroid", re.IGNORECASE)
XR_PATTERN = re.compile(r"vr|quest|oculus|pico|glass|mobile.?vr", re.IGNORECASE)
WEARABLE_PATTERN = re.compile(r"watch|wearable|pebble|gear.?live|glass|tizen.*samsung|sm-r\d{3}", re.IGNORECASE | re.ASCII)
EMBEDDED_PATTERN = re.compile(r"tesla|vehicle|car.?browser|homepod|echo|alexa|windows.?iot|embedded", re.IGNORECASE)

# Model numbers like "sm-t976b" are only tablets when a mobile OS was detected
TABLET_PATTERN = re.compile(
    r"ipad|android 3|sch-i800|playbook|tablet|kindle|gt-p1000|sgh-t849|shw-m180s|a510|a511|a100"
    r"|dell streak|silk|sm-[tx]\d{3}",
    re.IGNORECASE | re.ASCII,
)
MOBILE_PATTERN = re.compile(
    r"iphone|ipod|android|blackberry|opera mini|opera mobi|skyfire|maemo|windows phone|palm"
    r"|iemobile|symbian|fennec",
    re.IGNORECASE,
)

# Special-purpose devices, matched in order - first match wins
SPECIAL_DEVICE_PATTERNS: List[Tuple[DeviceType, re.Pattern]] = [
    (DeviceType.SMARTTV, SMARTTV_PATTERN),
    (DeviceType.CONSOLE, CONSOLE_PATTERN),
    (DeviceType.XR, XR_PATTERN),
    (DeviceType.WEARABLE, WEARABLE_PATTERN),
    (DeviceType.EMBEDDED, EMBEDDED_PATTERN),
]


def determine_device_type(user_agent_lower: str, is_mobile_os: bool) -> DeviceType:
    for device, pattern in SPECIAL_DEVICE_PATTERNS:
        if pattern.search(user_agent_lower):
            return device

    if is_mobile_os and TABLET_PATTERN.search(user_agent_lower):
        return DeviceType.TABLET

    # Independent of OS flags: Windows Phone, BlackBerry and friends
    if MOBILE_PATTERN.search(user_agent_lower):
        return DeviceType.MOBILE

    return DeviceType.DESKTOP


def detect_device(user_agent: str, is_android: bool, is_ios: bool) -> DeviceResult:
    """
    Classify the device category.

    is_android / is_ios come from the OS classifiers and gate the tablet check.
    """
    device = determine_device_type(user_agent.lower(), is_android or is_ios)

    return DeviceResult(
        is_tablet=device == DeviceType.TABLET,
        is_mobile=device == DeviceType.MOBILE,
        is_desktop=device == DeviceType.DESKTOP,
        device=device,
    )
