# uadetect/client_hints.py
"""
User-Agent Client Hints.

Low entropy hints (brands, mobile, platform) are available synchronously.
High entropy hints are requested asynchronously and may be refused; a
refusal degrades to the low entropy subset instead of an error.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Protocol, Sequence, Tuple

from uadetect.config import settings
from uadetect.schemas import ClientHintsBrand, ClientHintsData, ClientHintsResult
from uadetect.sources import get_header, unquote_header

logger = logging.getLogger(__name__)

BRAND_PATTERN = re.compile(r'"((?:[^"\\]|\\.)*)"\s*;\s*v\s*=\s*"((?:[^"\\]|\\.)*)"')

# Client hint name -> request header carrying it
HIGH_ENTROPY_HEADERS: Dict[str, str] = {
    "architecture": "Sec-CH-UA-Arch",
    "bitness": "Sec-CH-UA-Bitness",
    "model": "Sec-CH-UA-Model",
    "platformVersion": "Sec-CH-UA-Platform-Version",
    "fullVersionList": "Sec-CH-UA-Full-Version-List",
}


class ExtendedIdentificationSource(Protocol):
    brands: Optional[Sequence[ClientHintsBrand]]
    mobile: bool
    platform: str

    async def get_high_entropy_values(self, hints: Sequence[str]) -> Mapping[str, Any]: ...


def parse_brand_list(value: str) -> Tuple[ClientHintsBrand, ...]:
    """'"Chromium";v="119", "Not?A_Brand";v="24"' -> brands"""
    return tuple(
        ClientHintsBrand(brand=brand, version=version)
        for brand, version in BRAND_PATTERN.findall(value)
    )


@dataclass
class HeaderClientHints:
    """Client hints carried by the request headers (Sec-CH-UA*)"""
    brands: Optional[Tuple[ClientHintsBrand, ...]]
    mobile: bool
    platform: str
    high_entropy: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> Optional["HeaderClientHints"]:
        """None when the client sent no brand list at all"""
        brand_header = get_header(headers, "Sec-CH-UA")
        if not brand_header:
            return None

        high_entropy: Dict[str, Any] = {}
        for hint, header_name in HIGH_ENTROPY_HEADERS.items():
            value = get_header(headers, header_name)
            if not value:
                continue
            if hint == "fullVersionList":
                high_entropy[hint] = parse_brand_list(value)
            else:
                high_entropy[hint] = unquote_header(value)

        return cls(
            brands=parse_brand_list(brand_header),
            mobile=get_header(headers, "Sec-CH-UA-Mobile").strip() == "?1",
            platform=unquote_header(get_header(headers, "Sec-CH-UA-Platform")),
            high_entropy=high_entropy,
        )

    async def get_high_entropy_values(self, hints: Sequence[str]) -> Mapping[str, Any]:
        if not self.high_entropy:
            # The server never negotiated Accept-CH for these hints
            raise PermissionError("high entropy client hints were not granted")

        values: Dict[str, Any] = {
            "brands": self.brands,
            "mobile": self.mobile,
            "platform": self.platform,
        }
        for hint in hints:
            if hint in self.high_entropy:
                values[hint] = self.high_entropy[hint]
        return values


def is_client_hints_supported(source: Optional[ExtendedIdentificationSource]) -> bool:
    return source is not None


def get_basic_client_hints(source: Optional[ExtendedIdentificationSource]) -> Optional[ClientHintsData]:
    if not is_client_hints_supported(source):
        return None

    return ClientHintsData(
        brands=source.brands,
        mobile=source.mobile,
        platform=source.platform,
    )


async def get_high_entropy_client_hints(
    source: Optional[ExtendedIdentificationSource],
    hints: Optional[Sequence[str]] = None,
) -> Optional[ClientHintsData]:
    if not is_client_hints_supported(source):
        return None

    if not callable(getattr(source, "get_high_entropy_values", None)):
        return get_basic_client_hints(source)

    requested = list(hints if hints is not None else settings.high_entropy_hints)

    try:
        values = await source.get_high_entropy_values(requested)
        return ClientHintsData.model_validate(dict(values))
    except Exception as e:
        # Permission denied or unsupported - fall back to the low entropy subset
        logger.warning(f"High entropy client hints unavailable: {e}")
        return get_basic_client_hints(source)


def create_client_hints_result(supported: bool, data: Optional[ClientHintsData]) -> ClientHintsResult:
    return ClientHintsResult(supported=supported, data=data)


def detect_client_hints(source: Optional[ExtendedIdentificationSource]) -> ClientHintsResult:
    """Low entropy hints only"""
    supported = is_client_hints_supported(source)
    data = get_basic_client_hints(source) if supported else None
    return create_client_hints_result(supported, data)


async def detect_client_hints_async(
    source: Optional[ExtendedIdentificationSource],
    hints: Optional[Sequence[str]] = None,
) -> ClientHintsResult:
    supported = is_client_hints_supported(source)
    data = await get_high_entropy_client_hints(source, hints) if supported else None
    return create_client_hints_result(supported, data)
