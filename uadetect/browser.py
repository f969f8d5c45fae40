# uadetect/browser.py

import re
from typing import Optional, Pattern, Sequence, Union

from uadetect.schemas import BrowserResult, BrowserVersion, IEResult
from uadetect.versions import extract_float_version, extract_int_version

CHROME_VENDOR = "Google Inc."
APPLE_VENDOR = "Apple Computer, Inc."

IE_APP_NAME = "Microsoft Internet Explorer"
NETSCAPE_APP_NAME = "Netscape"

NOT_IE = -1

# Identity markers
EDGE_MARKER = re.compile(r"\b(?:Edg|Edge)/", re.IGNORECASE | re.ASCII)
OPERA_MARKER = re.compile(r"\b(?:OPR|Opera)/", re.IGNORECASE | re.ASCII)
# "safari" with no "chrome" anywhere before it
SAFARI_MARKER = re.compile(r"^(?:(?!chrome).)*safari", re.IGNORECASE | re.DOTALL)
SAFARI_TOKEN = re.compile(r"Safari", re.IGNORECASE)

# Version patterns, tried in order per browser
CHROME_VERSION = (re.compile(r"\bChrome/(\d+)", re.IGNORECASE | re.ASCII),)
FIREFOX_VERSION = (re.compile(r"\bFirefox/(\d+)", re.IGNORECASE | re.ASCII),)
SAFARI_VERSION = (re.compile(r"\bVersion/(\d+)", re.IGNORECASE | re.ASCII),)
EDGE_VERSION = (
    re.compile(r"\bEdg/(\d+)", re.IGNORECASE | re.ASCII),   # Chromium Edge
    re.compile(r"\bEdge/(\d+)", re.IGNORECASE | re.ASCII),  # EdgeHTML
)
OPERA_VERSION = (
    re.compile(r"\bOPR/(\d+)", re.IGNORECASE | re.ASCII),
    re.compile(r"\bOpera[\s/](\d+)", re.IGNORECASE | re.ASCII),
)

MSIE_VERSION = re.compile(r"MSIE (\d[\d.]*)", re.ASCII)
TRIDENT_VERSION = re.compile(r"Trident/.*rv:(\d[\d.]*)", re.ASCII)

IE_THRESHOLDS = (8, 9, 10, 11)


def _first_version(patterns: Sequence[Pattern], user_agent: str) -> BrowserVersion:
    for pattern in patterns:
        version = extract_int_version(pattern, user_agent)
        if version is not False:
            return version
    return False


def extract_chrome_version(user_agent: str) -> BrowserVersion:
    return _first_version(CHROME_VERSION, user_agent)


def extract_firefox_version(user_agent: str) -> BrowserVersion:
    return _first_version(FIREFOX_VERSION, user_agent)


def extract_safari_version(user_agent: str) -> BrowserVersion:
    if not SAFARI_TOKEN.search(user_agent):
        return False
    return _first_version(SAFARI_VERSION, user_agent)


def extract_edge_version(user_agent: str) -> BrowserVersion:
    return _first_version(EDGE_VERSION, user_agent)


def extract_opera_version(user_agent: str) -> BrowserVersion:
    return _first_version(OPERA_VERSION, user_agent)


def is_chrome_environment(native_client: Optional[bool], vendor: Optional[str]) -> bool:
    """Chrome exposes a native client object and reports Google's vendor string"""
    return native_client is not None and vendor == CHROME_VENDOR


def detect_browser(user_agent: str, native_client: Optional[bool] = None, vendor: Optional[str] = None) -> BrowserResult:
    """
    Detect Chrome, Firefox, Safari, Edge and Opera.

    Chromium-based Edge and Opera carry Chrome tokens and Chrome's native
    client object, so their markers exclude Chrome and Safari.
    """
    is_firefox = "firefox" in user_agent.lower()
    is_edge = bool(EDGE_MARKER.search(user_agent))
    is_opera = bool(OPERA_MARKER.search(user_agent))
    is_chrome = is_chrome_environment(native_client, vendor) and not is_edge and not is_opera
    is_safari = (
        vendor == APPLE_VENDOR
        and bool(SAFARI_MARKER.search(user_agent))
        and not is_edge
        and not is_opera
    )
    webp = (is_chrome or is_edge or is_opera) and not is_safari

    return BrowserResult(
        is_firefox=is_firefox,
        is_chrome=is_chrome,
        is_safari=is_safari,
        is_edge=is_edge,
        is_opera=is_opera,
        webp=webp,
        chrome_version=extract_chrome_version(user_agent) if is_chrome else False,
        firefox_version=extract_firefox_version(user_agent) if is_firefox else False,
        safari_version=extract_safari_version(user_agent) if is_safari else False,
        edge_version=extract_edge_version(user_agent) if is_edge else False,
        opera_version=extract_opera_version(user_agent) if is_opera else False,
    )


def extract_ie_version(user_agent: str, app_name: str) -> Union[int, float]:
    """IE version, or -1 when the client is not Internet Explorer"""
    version = None
    if app_name == IE_APP_NAME:
        version = extract_float_version(MSIE_VERSION, user_agent)
    elif app_name == NETSCAPE_APP_NAME:
        # IE11 reports itself as Netscape with a Trident/...rv: token
        version = extract_float_version(TRIDENT_VERSION, user_agent)
    if version is None:
        return NOT_IE
    # "MSIE 9.0" is version 9, not 9.0
    return int(version) if version.is_integer() else version


def create_ie_result(version: Union[int, float]) -> IEResult:
    is_ie = version > NOT_IE
    flags = {}
    for threshold in IE_THRESHOLDS:
        flags[f"is_ie{threshold}"] = version == threshold
        flags[f"is_ie{threshold}_down"] = version <= threshold and is_ie
        flags[f"is_ie{threshold}_up"] = version >= threshold and is_ie
    return IEResult(ie_version=version, is_ie=is_ie, **flags)


def detect_ie(user_agent: str, app_name: str) -> IEResult:
    return create_ie_result(extract_ie_version(user_agent, app_name))
