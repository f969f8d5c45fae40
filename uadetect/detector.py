# uadetect/detector.py

import logging
from typing import Any, Callable, Dict, Optional, TypeVar

from uadetect.android import detect_android
from uadetect.browser import detect_browser, detect_ie
from uadetect.capabilities import (
    CapabilityProbe,
    NullProbe,
    ReportedProbe,
    detect_capabilities_from_probe,
    detect_dom_features_from_probe,
    detect_pixel_ratio_from_probe,
)
from uadetect.client_hints import ExtendedIdentificationSource, detect_client_hints_async
from uadetect.config import settings
from uadetect.cpu import detect_cpu
from uadetect.device import detect_device
from uadetect.engine import detect_engine
from uadetect.ios import detect_ios
from uadetect.schemas import (
    AndroidResult,
    BrowserResult,
    CapabilityResult,
    ClientHintsResult,
    CPUResult,
    DetectorResult,
    DetectRequest,
    DeviceResult,
    DOMFeatureResult,
    EngineResult,
    IdentificationInput,
    IEResult,
    IOSResult,
    PixelRatioResult,
)
from uadetect.sources import EmptySource, IdentificationSource, StaticSource

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Detector:
    """
    Lazily computes each classification domain for one client.

    Every domain is computed on first access and kept for the lifetime of
    the instance. Results are pure functions of the source, so the cache
    needs no locking.
    """

    def __init__(
        self,
        source: Optional[IdentificationSource] = None,
        probe: Optional[CapabilityProbe] = None,
        client_hints: Optional[ExtendedIdentificationSource] = None,
    ):
        self.source = source if source is not None else EmptySource()
        self.probe = probe if probe is not None else NullProbe()
        self.client_hints = client_hints
        self._results: Dict[str, Any] = {}

    def _memo(self, key: str, compute: Callable[[], T]) -> T:
        if key not in self._results:
            self._results[key] = compute()
        return self._results[key]

    def detect_ios(self) -> IOSResult:
        return self._memo("ios", lambda: detect_ios(self.source.user_agent, self.source.platform))

    def detect_android(self) -> AndroidResult:
        return self._memo("android", lambda: detect_android(self.source.user_agent))

    def detect_device(self) -> DeviceResult:
        return self._memo(
            "device",
            lambda: detect_device(
                self.source.user_agent,
                self.detect_android().is_android,
                self.detect_ios().is_ios,
            ),
        )

    def detect_ie(self) -> IEResult:
        return self._memo("ie", lambda: detect_ie(self.source.user_agent, self.source.app_name))

    def detect_browser(self) -> BrowserResult:
        return self._memo(
            "browser",
            lambda: detect_browser(self.source.user_agent, self.source.native_client, self.source.vendor),
        )

    def detect_capabilities(self) -> CapabilityResult:
        return self._memo(
            "capabilities",
            lambda: detect_capabilities_from_probe(self.probe, self.detect_device().is_desktop),
        )

    def detect_dom_features(self) -> DOMFeatureResult:
        return self._memo("dom_features", lambda: detect_dom_features_from_probe(self.probe))

    def detect_pixel_ratio(self) -> PixelRatioResult:
        return self._memo("pixel_ratio", lambda: detect_pixel_ratio_from_probe(self.probe))

    def detect_engine(self) -> EngineResult:
        return self._memo("engine", lambda: detect_engine(self.source.user_agent))

    def detect_cpu(self) -> CPUResult:
        return self._memo("cpu", lambda: detect_cpu(self.source.user_agent, self.source.platform))

    def detect_all(self) -> DetectorResult:
        """Every domain merged into one flat record"""
        merged: Dict[str, Any] = {}
        for result in (
            self.detect_ios(),
            self.detect_android(),
            self.detect_device(),
            self.detect_ie(),
            self.detect_browser(),
            self.detect_capabilities(),
            self.detect_dom_features(),
            self.detect_pixel_ratio(),
            self.detect_engine(),
            self.detect_cpu(),
        ):
            merged.update(result.model_dump())
        return DetectorResult(**merged)

    async def detect_client_hints(self) -> ClientHintsResult:
        # Not memoized: the high entropy request may be granted later
        return await detect_client_hints_async(self.client_hints)


def create_detector(
    source: Optional[IdentificationSource] = None,
    probe: Optional[CapabilityProbe] = None,
    client_hints: Optional[ExtendedIdentificationSource] = None,
) -> Detector:
    return Detector(source=source, probe=probe, client_hints=client_hints)


def classify(identification: IdentificationInput, probe: Optional[CapabilityProbe] = None) -> DetectorResult:
    return create_detector(StaticSource.from_input(identification), probe).detect_all()


def classify_request(request: DetectRequest) -> DetectorResult:
    """Classify a request, using its reported capabilities when present"""
    if request.capabilities is not None:
        return classify(request, ReportedProbe(request.capabilities))
    return classify_cached(request)


# Results for inputs already seen, keyed by the identification strings
KNOWN_INPUTS: Dict[IdentificationInput, DetectorResult] = {}


def classify_cached(identification: IdentificationInput) -> DetectorResult:
    """
    Classify with caching for repeated identification inputs.
    Capabilities are not part of the key, so the environment probe is not consulted.
    """
    key = IdentificationInput(
        user_agent=identification.user_agent,
        platform=identification.platform,
        app_name=identification.app_name,
        vendor=identification.vendor,
        native_client=identification.native_client,
    )
    if key in KNOWN_INPUTS:
        logger.debug("Classification cache hit")
        return KNOWN_INPUTS[key]

    result = classify(key)

    # Cache if we haven't exceeded limit (prevent memory issues)
    if len(KNOWN_INPUTS) < settings.cache_max_entries:
        KNOWN_INPUTS[key] = result

    return result
