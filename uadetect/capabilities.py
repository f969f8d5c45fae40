# uadetect/capabilities.py
"""
Capability, DOM feature and pixel ratio assembly.

Probing the environment is left to a CapabilityProbe; this module only
orders the vendor-prefixed fallbacks and assembles the result records.
"""

from typing import Optional, Protocol, Tuple

from uadetect.config import settings
from uadetect.schemas import (
    CapabilityResult,
    DOMFeatureResult,
    HiddenProperty,
    PixelRatioResult,
    ReportedCapabilities,
    TransitionEndEvent,
    VisibilityChangeEvent,
)

# (style property, transitionend event name) - standard first
TRANSITION_VARIANTS: Tuple[Tuple[str, str], ...] = (
    ("transition", "transitionend"),
    ("OTransition", "oTransitionEnd"),
    ("MozTransition", "transitionend"),
    ("WebkitTransition", "webkitTransitionEnd"),
)

# (document hidden property, visibilitychange event name) - standard, moz, ms, webkit
VISIBILITY_VARIANTS: Tuple[Tuple[str, str], ...] = (
    ("hidden", "visibilitychange"),
    ("mozHidden", "mozvisibilitychange"),
    ("msHidden", "msvisibilitychange"),
    ("webkitHidden", "webkitvisibilitychange"),
)


class CapabilityProbe(Protocol):
    def is_available(self) -> bool: ...

    def has_history(self) -> bool: ...

    def has_touch(self) -> bool: ...

    def has_fullscreen(self) -> bool: ...

    def has_canvas(self) -> bool: ...

    def has_webgl(self) -> bool: ...

    def has_style_property(self, name: str) -> bool: ...

    def has_document_property(self, name: str) -> bool: ...

    def pixel_ratio(self) -> Optional[float]: ...


class NullProbe:
    """No environment to probe: every feature reads as absent"""

    def is_available(self) -> bool:
        return False

    def has_history(self) -> bool:
        return False

    def has_touch(self) -> bool:
        return False

    def has_fullscreen(self) -> bool:
        return False

    def has_canvas(self) -> bool:
        return False

    def has_webgl(self) -> bool:
        return False

    def has_style_property(self, name: str) -> bool:
        return False

    def has_document_property(self, name: str) -> bool:
        return False

    def pixel_ratio(self) -> Optional[float]:
        return None


class ReportedProbe:
    """Probe answered from capabilities a client script reported"""

    def __init__(self, reported: ReportedCapabilities):
        self._reported = reported

    def is_available(self) -> bool:
        return True

    def has_history(self) -> bool:
        return self._reported.has_history

    def has_touch(self) -> bool:
        return self._reported.has_touch

    def has_fullscreen(self) -> bool:
        return self._reported.has_fullscreen

    def has_canvas(self) -> bool:
        return self._reported.has_canvas

    def has_webgl(self) -> bool:
        return self._reported.has_webgl

    def has_style_property(self, name: str) -> bool:
        return name in self._reported.style_properties

    def has_document_property(self, name: str) -> bool:
        return name in self._reported.document_properties

    def pixel_ratio(self) -> Optional[float]:
        return self._reported.pixel_ratio


def detect_capabilities(
    has_history: bool,
    is_desktop: bool,
    has_touch: bool,
    has_fullscreen: bool,
    has_canvas: bool,
    has_webgl: bool,
) -> CapabilityResult:
    # Mouse movement is assumed on desktops only
    return CapabilityResult(
        has_history=has_history,
        has_mouse_move=is_desktop,
        has_touch=has_touch,
        has_fullscreen=has_fullscreen,
        has_canvas=has_canvas,
        has_webgl=has_webgl,
    )


def detect_capabilities_from_probe(probe: CapabilityProbe, is_desktop: bool) -> CapabilityResult:
    # Nothing was probed: no flag is assumed, not even mouse movement on desktops
    if not probe.is_available():
        return CapabilityResult()

    return detect_capabilities(
        has_history=probe.has_history(),
        is_desktop=is_desktop,
        has_touch=probe.has_touch(),
        has_fullscreen=probe.has_fullscreen(),
        has_canvas=probe.has_canvas(),
        has_webgl=probe.has_webgl(),
    )


def detect_transition_end(probe: CapabilityProbe) -> TransitionEndEvent:
    for style_property, event_name in TRANSITION_VARIANTS:
        if probe.has_style_property(style_property):
            return event_name
    return None


def detect_visibility(probe: CapabilityProbe) -> Tuple[VisibilityChangeEvent, HiddenProperty]:
    for hidden_property, event_name in VISIBILITY_VARIANTS:
        if probe.has_document_property(hidden_property):
            return event_name, hidden_property
    return None, None


def detect_dom_features(
    transition_end: TransitionEndEvent,
    visibility_change_event_name: VisibilityChangeEvent,
    hidden_property_name: HiddenProperty,
) -> DOMFeatureResult:
    return DOMFeatureResult(
        transition_end=transition_end,
        visibility_change_event_name=visibility_change_event_name,
        hidden_property_name=hidden_property_name,
    )


def detect_dom_features_from_probe(probe: CapabilityProbe) -> DOMFeatureResult:
    event_name, hidden_property = detect_visibility(probe)
    return detect_dom_features(detect_transition_end(probe), event_name, hidden_property)


def detect_pixel_ratio(pixel_ratio: float) -> PixelRatioResult:
    return PixelRatioResult(pixel_ratio=pixel_ratio, is_retina=pixel_ratio > 1)


def detect_pixel_ratio_from_probe(probe: CapabilityProbe) -> PixelRatioResult:
    # A missing or zero ratio falls back to the configured default
    pixel_ratio = probe.pixel_ratio()
    return detect_pixel_ratio(pixel_ratio or settings.default_pixel_ratio)
