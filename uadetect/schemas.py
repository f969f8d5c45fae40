# uadetect/schemas.py

import re
from enum import Enum
from typing import List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict

# Browser and iOS versions: a number, or False when not applicable
BrowserVersion = Union[int, Literal[False]]
IOSVersion = Union[int, Literal[False]]

TransitionEndEvent = Optional[Literal["transitionend", "oTransitionEnd", "webkitTransitionEnd"]]
VisibilityChangeEvent = Optional[
    Literal["visibilitychange", "mozvisibilitychange", "msvisibilitychange", "webkitvisibilitychange"]
]
HiddenProperty = Optional[Literal["hidden", "mozHidden", "msHidden", "webkitHidden"]]

_UPPER_TOKEN = re.compile(r"^(ios|ie)(\d*)$")


def to_wire_name(field_name: str) -> str:
    """
    Map a snake_case field to the camelCase name used on the wire.

    IE and iOS keep their capitalisation: ``is_ie9_up`` -> ``isIE9Up``,
    ``ios_version`` -> ``IOSVersion``.
    """
    parts = []
    for index, token in enumerate(field_name.split("_")):
        match = _UPPER_TOKEN.match(token)
        if match:
            parts.append(match.group(1).upper() + match.group(2))
        elif index == 0:
            parts.append(token)
        else:
            parts.append(token.capitalize())
    return "".join(parts)


class DeviceType(str, Enum):
    DESKTOP = "desktop"
    MOBILE = "mobile"
    TABLET = "tablet"
    SMARTTV = "smarttv"
    CONSOLE = "console"
    WEARABLE = "wearable"
    XR = "xr"
    EMBEDDED = "embedded"


class RenderingEngine(str, Enum):
    BLINK = "Blink"
    WEBKIT = "WebKit"
    GECKO = "Gecko"
    TRIDENT = "Trident"
    EDGEHTML = "EdgeHTML"
    PRESTO = "Presto"
    UNKNOWN = "unknown"


class CPUArchitecture(str, Enum):
    AMD64 = "amd64"
    ARM64 = "arm64"
    ARM = "arm"
    ARMHF = "armhf"
    IA32 = "ia32"
    SPARC = "sparc"
    UNKNOWN = "unknown"


class FrozenRecord(BaseModel):
    """Immutable result record, serialized with wire (camelCase) names"""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_wire_name,
        populate_by_name=True,
        extra="ignore",
    )


class IdentificationInput(FrozenRecord):
    """Identification strings supplied once per classification call"""

    user_agent: str = ""
    platform: str = ""
    app_name: str = ""
    vendor: Optional[str] = None
    native_client: Optional[bool] = None


class IOSResult(FrozenRecord):
    is_ipad: bool
    is_iphone: bool
    is_ipod: bool
    is_ios: bool
    is_ios5: bool
    is_ios6: bool
    is_ios7: bool
    is_ios8: bool
    is_ios9: bool
    ios_version: IOSVersion


class AndroidResult(FrozenRecord):
    is_android: bool
    is_android_old: bool
    is_android_stock: bool


class DeviceResult(FrozenRecord):
    is_tablet: bool
    is_mobile: bool
    is_desktop: bool
    device: DeviceType


class IEResult(FrozenRecord):
    ie_version: Union[int, float]
    is_ie: bool
    is_ie11: bool
    is_ie11_down: bool
    is_ie11_up: bool
    is_ie10: bool
    is_ie10_down: bool
    is_ie10_up: bool
    is_ie9: bool
    is_ie9_down: bool
    is_ie9_up: bool
    is_ie8: bool
    is_ie8_down: bool
    is_ie8_up: bool


class BrowserResult(FrozenRecord):
    is_firefox: bool
    is_chrome: bool
    is_safari: bool
    is_edge: bool
    is_opera: bool
    webp: bool
    chrome_version: BrowserVersion
    firefox_version: BrowserVersion
    safari_version: BrowserVersion
    edge_version: BrowserVersion
    opera_version: BrowserVersion


class CapabilityResult(FrozenRecord):
    has_history: bool = False
    has_mouse_move: bool = False
    has_touch: bool = False
    has_fullscreen: bool = False
    has_canvas: bool = False
    has_webgl: bool = False


class DOMFeatureResult(FrozenRecord):
    transition_end: TransitionEndEvent = None
    visibility_change_event_name: VisibilityChangeEvent = None
    hidden_property_name: HiddenProperty = None


class PixelRatioResult(FrozenRecord):
    pixel_ratio: float
    is_retina: bool


class EngineResult(FrozenRecord):
    engine: RenderingEngine


class CPUResult(FrozenRecord):
    architecture: CPUArchitecture


class DetectorResult(
    IOSResult,
    AndroidResult,
    DeviceResult,
    IEResult,
    BrowserResult,
    CapabilityResult,
    DOMFeatureResult,
    PixelRatioResult,
    EngineResult,
    CPUResult,
):
    """Every classification domain merged into one flat record"""


class ClientHintsBrand(FrozenRecord):
    brand: str
    version: str


class ClientHintsData(FrozenRecord):
    brands: Optional[Tuple[ClientHintsBrand, ...]] = None
    mobile: Optional[bool] = None
    platform: Optional[str] = None
    architecture: Optional[str] = None
    bitness: Optional[str] = None
    model: Optional[str] = None
    platform_version: Optional[str] = None
    full_version_list: Optional[Tuple[ClientHintsBrand, ...]] = None


class ClientHintsResult(FrozenRecord):
    supported: bool
    data: Optional[ClientHintsData] = None


class ReportedCapabilities(FrozenRecord):
    """Capability probe outcomes reported by a client script"""

    has_history: bool = False
    has_touch: bool = False
    has_fullscreen: bool = False
    has_canvas: bool = False
    has_webgl: bool = False
    style_properties: Tuple[str, ...] = ()
    document_properties: Tuple[str, ...] = ()
    pixel_ratio: Optional[float] = None


class DetectRequest(IdentificationInput):
    """Incoming classification request"""

    capabilities: Optional[ReportedCapabilities] = None


class DetectResponse(BaseModel):
    status: str
    processed: int
    errors: int = 0
    results: List[DetectorResult] = []
