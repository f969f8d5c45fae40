"""
Tests for the HTTP surface.
"""

from uadetect.detector import KNOWN_INPUTS
from user_agents import (
    ANDROID_CHROME,
    CHROME_VENDOR,
    CHROME_WINDOWS,
    FIREFOX_WINDOWS,
    IE11,
    IPHONE_SAFARI,
    SAFARI_MAC,
)

CHROME_HINTS = {
    "User-Agent": CHROME_WINDOWS,
    "Sec-CH-UA": '"Google Chrome";v="119", "Chromium";v="119", "Not?A_Brand";v="24"',
    "Sec-CH-UA-Mobile": "?0",
    "Sec-CH-UA-Platform": '"Windows"',
}


class TestDetectFromHeaders:
    """GET /api/detect classifies the caller."""

    def test_chrome_with_client_hints(self, client):
        """Chrome is recognised from its UA plus brand list."""
        response = client.get("/api/detect", headers=CHROME_HINTS)

        assert response.status_code == 200
        data = response.json()
        assert data["isChrome"] is True
        assert data["chromeVersion"] == 119
        assert data["engine"] == "Blink"
        assert data["device"] == "desktop"
        assert data["architecture"] == "amd64"
        assert data["IEVersion"] == -1

    def test_firefox(self, client):
        """No brand list: Firefox by its marker alone."""
        response = client.get("/api/detect", headers={"User-Agent": FIREFOX_WINDOWS})

        data = response.json()
        assert data["isFirefox"] is True
        assert data["firefoxVersion"] == 120
        assert data["isChrome"] is False
        assert data["engine"] == "Gecko"

    def test_ie11(self, client):
        """IE11 is classified through its Trident rv: token."""
        data = client.get("/api/detect", headers={"User-Agent": IE11}).json()

        assert data["isIE"] is True
        assert data["isIE11"] is True
        assert data["IEVersion"] == 11
        assert type(data["IEVersion"]) is int
        assert data["engine"] == "Trident"

    def test_safari(self, client):
        """Safari sends no brand list; its WebKit token implies Apple's vendor."""
        data = client.get("/api/detect", headers={"User-Agent": SAFARI_MAC}).json()

        assert data["isSafari"] is True
        assert data["safariVersion"] == 17
        assert data["isChrome"] is False
        assert data["webp"] is False
        assert data["engine"] == "WebKit"

    def test_iphone_safari(self, client):
        """Mobile Safari is Safari too."""
        data = client.get("/api/detect", headers={"User-Agent": IPHONE_SAFARI}).json()

        assert data["isSafari"] is True
        assert data["safariVersion"] == 17
        assert data["isIOS"] is True
        assert data["device"] == "mobile"

    def test_chrome_without_client_hints_is_not_safari(self, client):
        """Chrome over plain HTTP sends no brand list but is not Safari."""
        data = client.get("/api/detect", headers={"User-Agent": CHROME_WINDOWS}).json()

        assert data["isSafari"] is False
        assert data["safariVersion"] is False

    def test_capabilities_absent(self, client):
        """Server-side classification cannot probe capabilities."""
        data = client.get("/api/detect", headers=CHROME_HINTS).json()

        assert data["hasHistory"] is False
        assert data["hasMouseMove"] is False
        assert data["transitionEnd"] is None
        assert data["pixelRatio"] == 1.0


class TestDetectBatch:
    """POST /api/detect classifies reported identification strings."""

    def test_single_object(self, client):
        """A single object is accepted."""
        response = client.post("/api/detect", json={
            "userAgent": IPHONE_SAFARI,
            "platform": "iPhone",
        })

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ok"
        assert body["processed"] == 1
        assert body["errors"] == 0
        assert body["results"][0]["isIOS"] is True
        assert body["results"][0]["IOSVersion"] == 17
        assert body["results"][0]["device"] == "mobile"

    def test_list(self, client):
        """A list of objects is classified item by item."""
        response = client.post("/api/detect", json=[
            {"userAgent": CHROME_WINDOWS, "platform": "Win32", "vendor": CHROME_VENDOR, "nativeClient": True},
            {"userAgent": ANDROID_CHROME, "platform": "Linux armv8l"},
        ])

        body = response.json()
        assert body["status"] == "ok"
        assert body["processed"] == 2
        assert body["results"][0]["isChrome"] is True
        assert body["results"][1]["isAndroid"] is True
        assert body["results"][1]["architecture"] == "arm64"
        assert len(KNOWN_INPUTS) == 2

    def test_reported_capabilities(self, client):
        """Capabilities reported by a client script are assembled."""
        response = client.post("/api/detect", json={
            "userAgent": CHROME_WINDOWS,
            "capabilities": {
                "hasHistory": True,
                "hasCanvas": True,
                "styleProperties": ["transition"],
                "documentProperties": ["hidden"],
                "pixelRatio": 2,
            },
        })

        result = response.json()["results"][0]
        assert result["hasHistory"] is True
        assert result["hasCanvas"] is True
        assert result["hasMouseMove"] is True
        assert result["transitionEnd"] == "transitionend"
        assert result["visibilityChangeEventName"] == "visibilitychange"
        assert result["hiddenPropertyName"] == "hidden"
        assert result["isRetina"] is True

    def test_invalid_items_are_counted(self, client):
        """Invalid items are counted, valid ones still classified."""
        response = client.post("/api/detect", json=[
            {"userAgent": FIREFOX_WINDOWS},
            {"userAgent": ["not", "a", "string"]},
            "not an object",
        ])

        body = response.json()
        assert response.status_code == 200
        assert body["status"] == "partial"
        assert body["processed"] == 1
        assert body["errors"] == 2
        assert body["results"][0]["isFirefox"] is True

    def test_scalar_body(self, client):
        """A body that is neither an object nor a list is an error summary."""
        body = client.post("/api/detect", json="Mozilla/5.0").json()

        assert body == {"status": "error", "processed": 0, "errors": 1, "results": []}

    def test_empty_list(self, client):
        """Nothing to classify is still ok."""
        body = client.post("/api/detect", json=[]).json()

        assert body["status"] == "ok"
        assert body["processed"] == 0


class TestClientHintsEndpoint:
    """GET /api/client-hints."""

    def test_without_brand_list(self, client):
        """Clients that send no Sec-CH-UA do not support client hints."""
        data = client.get("/api/client-hints", headers={"User-Agent": FIREFOX_WINDOWS}).json()

        assert data == {"supported": False, "data": None}

    def test_low_entropy_only(self, client):
        """High entropy hints not granted: the basic subset."""
        data = client.get("/api/client-hints", headers=CHROME_HINTS).json()

        assert data["supported"] is True
        assert data["data"]["platform"] == "Windows"
        assert data["data"]["mobile"] is False
        assert data["data"]["brands"][0] == {"brand": "Google Chrome", "version": "119"}
        assert data["data"]["architecture"] is None

    def test_high_entropy(self, client):
        """Granted hints come back under their wire names."""
        headers = {
            **CHROME_HINTS,
            "Sec-CH-UA-Arch": '"arm"',
            "Sec-CH-UA-Bitness": '"64"',
            "Sec-CH-UA-Platform-Version": '"14.0.0"',
        }
        data = client.get("/api/client-hints", headers=headers).json()["data"]

        assert data["architecture"] == "arm"
        assert data["bitness"] == "64"
        assert data["platformVersion"] == "14.0.0"
        assert data["fullVersionList"] is None


class TestHealth:
    """GET /health."""

    def test_health(self, client):
        """Liveness probe."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}
