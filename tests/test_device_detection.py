"""
Tests for device category detection.
"""

import pytest

from uadetect.device import SPECIAL_DEVICE_PATTERNS, detect_device
from uadetect.schemas import DeviceType
from user_agents import ANDROID_CHROME, CHROME_WINDOWS, IPAD_SAFARI, IPHONE_SAFARI, SAFARI_MAC


class TestMobileAndTablet:
    """Phones, tablets and the mobile OS gate."""

    def test_iphone_is_mobile(self):
        """iPhone with the iOS flag is a phone."""
        result = detect_device(IPHONE_SAFARI, False, True)

        assert result.device == "mobile"
        assert result.is_mobile is True
        assert result.is_tablet is False
        assert result.is_desktop is False

    def test_android_phone_is_mobile(self):
        """Android phones are mobile."""
        assert detect_device(ANDROID_CHROME, True, False).device == DeviceType.MOBILE

    @pytest.mark.parametrize("ua", [
        "Mozilla/5.0 (Windows Phone 10.0; Android 6.0.1; Microsoft; Lumia 950) AppleWebKit/537.36",
        "Mozilla/5.0 (BlackBerry; U; BlackBerry 9900; en) AppleWebKit/534.11+",
    ])
    def test_mobile_without_os_flags(self, ua):
        """Windows Phone and BlackBerry are mobile without any OS flag."""
        assert detect_device(ua, False, False).device == DeviceType.MOBILE

    def test_ipad_is_tablet(self):
        """iPad with the iOS flag is a tablet."""
        result = detect_device(IPAD_SAFARI, False, True)

        assert result.device == "tablet"
        assert result.is_tablet is True
        assert result.is_mobile is False

    @pytest.mark.parametrize("ua", [
        "Mozilla/5.0 (Linux; Android 13; SM-X906C) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/119.0.0.0 Safari/537.36",
        "Mozilla/5.0 (Linux; Android 12; SM-T976B) AppleWebKit/537.36",
        "Mozilla/5.0 (Linux; Android 7.1.2; KFKAWI) AppleWebKit/537.36 (KHTML, like Gecko) Silk/119.6.3 like Chrome/119.0.6045.193 Safari/537.36",
    ])
    def test_android_tablets(self, ua):
        """Galaxy Tab model numbers and Kindle Silk are tablets on Android."""
        assert detect_device(ua, True, False).device == DeviceType.TABLET

    def test_tablet_model_needs_mobile_os(self):
        """A tablet-shaped model number alone does not make a tablet."""
        ua = "Mozilla/5.0 (X11; Linux x86_64; SM-T976B) AppleWebKit/537.36"

        assert detect_device(ua, False, False).device == DeviceType.DESKTOP


class TestSpecialDevices:
    """TV, console, XR, wearable and embedded devices."""

    @pytest.mark.parametrize("ua, device", [
        ("Mozilla/5.0 (SMART-TV; Linux; Tizen 6.5) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/85.0.4183.93 TV Safari/537.36", "smarttv"),
        ("Mozilla/5.0 (Web0S; Linux/SmartTV) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/79.0.3945.79 Safari/537.36 WebAppManager", "smarttv"),
        ("Mozilla/5.0 (X11; Linux armv7l) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/90.0.4430.225 Safari/537.36 CrKey/1.56.500000", "smarttv"),
        ("Roku/DVP-10.0 (10.0.0.4131-48)", "smarttv"),
        ("Mozilla/5.0 (PlayStation; PlayStation 5/2.26) AppleWebKit/605.1.15 (KHTML, like Gecko)", "console"),
        ("Mozilla/5.0 (Windows NT 10.0; Win64; x64; Xbox; Xbox One) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/48.0.2564.82 Safari/537.36 Edge/20.02", "console"),
        ("Mozilla/5.0 (Nintendo Switch; WifiWebAuthApplet) AppleWebKit/606.4 (KHTML, like Gecko) NF/6.0.1.15.4 NintendoBrowser/5.1.0.20393", "console"),
        ("Mozilla/5.0 (X11; Linux x86_64; Quest 3) AppleWebKit/537.36 (KHTML, like Gecko) OculusBrowser/31.0.0 SamsungBrowser/4.0 Chrome/120.0.0.0 Safari/537.36", "xr"),
        ("Mozilla/5.0 (Linux; Tizen 2.3; SAMSUNG SM-R720) AppleWebKit/537.3 (KHTML, like Gecko) Version/2.3 Mobile Safari/537.3", "wearable"),
        ("Mozilla/5.0 (X11; Linux) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/79.0.3945.130 Safari/537.36 Tesla/2020.16.2.1", "embedded"),
    ])
    def test_special_devices(self, ua, device):
        """Special-purpose devices win over phone and desktop."""
        assert detect_device(ua, False, False).device == device

    def test_tv_beats_mobile_os(self):
        """Smart TV tokens win even when a mobile OS was detected."""
        ua = "Mozilla/5.0 (Linux; Android 9; BRAVIA 4K GB ATV3) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/99.0 Safari/537.36 SmartTV"

        assert detect_device(ua, True, False).device == DeviceType.SMARTTV

    def test_special_order(self):
        """The special device table encodes the documented precedence."""
        assert [device for device, _ in SPECIAL_DEVICE_PATTERNS] == [
            DeviceType.SMARTTV,
            DeviceType.CONSOLE,
            DeviceType.XR,
            DeviceType.WEARABLE,
            DeviceType.EMBEDDED,
        ]


class TestDesktop:
    """Desktop is the fallback."""

    @pytest.mark.parametrize("ua", [
        CHROME_WINDOWS,
        SAFARI_MAC,
        "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/119.0.0.0 Safari/537.36",
        "",
    ])
    def test_desktop(self, ua):
        """Nothing matched means desktop."""
        result = detect_device(ua, False, False)

        assert result.device == DeviceType.DESKTOP
        assert result.is_desktop is True
        assert result.is_mobile is False
        assert result.is_tablet is False
