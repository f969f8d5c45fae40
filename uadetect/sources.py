# uadetect/sources.py

import re
from dataclasses import dataclass
from typing import Mapping, Optional, Protocol

from uadetect.browser import APPLE_VENDOR, CHROME_VENDOR, IE_APP_NAME, NETSCAPE_APP_NAME
from uadetect.schemas import IdentificationInput

CHROME_TOKEN = re.compile(r"\bChrome/", re.ASCII)
WEBKIT_TOKEN = re.compile(r"AppleWebKit/", re.ASCII)


class IdentificationSource(Protocol):
    """Where the identification strings of the current client come from"""

    user_agent: str
    platform: str
    app_name: str
    vendor: Optional[str]
    native_client: Optional[bool]


@dataclass(frozen=True)
class StaticSource:
    """Identification strings supplied explicitly"""
    user_agent: str = ""
    platform: str = ""
    app_name: str = ""
    vendor: Optional[str] = None
    native_client: Optional[bool] = None

    @classmethod
    def from_input(cls, identification: IdentificationInput) -> "StaticSource":
        return cls(
            user_agent=identification.user_agent,
            platform=identification.platform,
            app_name=identification.app_name,
            vendor=identification.vendor,
            native_client=identification.native_client,
        )


class EmptySource(StaticSource):
    """No hosting environment: empty strings, no vendor, no native client"""


def get_header(headers: Mapping[str, str], name: str) -> str:
    # Starlette headers are case-insensitive, plain dicts are not
    value = headers.get(name)
    if value is None:
        value = headers.get(name.lower())
    return value or ""


def unquote_header(value: str) -> str:
    """Structured-header strings arrive quoted: '"Windows"' -> 'Windows'"""
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] == '"':
        return value[1:-1]
    return value


def infer_vendor(user_agent: str, has_brand_list: bool) -> Optional[str]:
    """
    Vendor string the client would report, guessed from its headers.

    Chromium browsers report Google's vendor; every other WebKit browser
    (Safari and anything on iOS) reports Apple's.
    """
    if has_brand_list or CHROME_TOKEN.search(user_agent):
        return CHROME_VENDOR
    if WEBKIT_TOKEN.search(user_agent):
        return APPLE_VENDOR
    return None


@dataclass(frozen=True)
class HeaderSource(StaticSource):
    """Identification read from the HTTP request of the client being classified"""

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> "HeaderSource":
        user_agent = get_header(headers, "User-Agent")
        brands = get_header(headers, "Sec-CH-UA")

        # Browsers report "Netscape" except legacy IE
        app_name = IE_APP_NAME if "MSIE " in user_agent else NETSCAPE_APP_NAME

        # Only Chromium browsers send a client hints brand list
        native_client = True if brands else None

        return cls(
            user_agent=user_agent,
            platform=unquote_header(get_header(headers, "Sec-CH-UA-Platform")),
            app_name=app_name,
            vendor=infer_vendor(user_agent, bool(brands)),
            native_client=native_client,
        )
