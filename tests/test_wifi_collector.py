"""Tests for controlmate.collectors.wifi_collector."""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

import pytest

from controlmate.collectors.wifi_collector import WifiCollector
from controlmate.errors import CommandError, ToolUnavailableError, UnsupportedSecurityError
from controlmate.models import SecurityType

RESCAN = ("nmcli", "device", "wifi", "rescan")
LIST = ("nmcli", "-t", "-f", "SSID,SIGNAL,SECURITY", "dev", "wifi", "list")
ACTIVE = ("nmcli", "-t", "-f", "ACTIVE,SSID,SIGNAL,SECURITY", "dev", "wifi")


@pytest.fixture
def collector(invoker):
    return WifiCollector(invoker, available=True, rescan_delay=0)


# ── availability ──────────────────────────────────────


class TestAvailability:
    @pytest.mark.asyncio
    async def test_every_operation_requires_nmcli(self, invoker):
        collector = WifiCollector(invoker, available=False, rescan_delay=0)
        with pytest.raises(ToolUnavailableError):
            await collector.scan()
        with pytest.raises(ToolUnavailableError):
            await collector.current()
        with pytest.raises(ToolUnavailableError) as info:
            await collector.connect("Home", "pw", "WPA2")
        assert info.value.http_status == 503
        assert invoker.calls == []


# ── scan ──────────────────────────────────────────────


class TestScan:
    @pytest.mark.asyncio
    async def test_rescan_then_list(self, collector, invoker):
        invoker.on(*RESCAN)
        invoker.on(*LIST, output="MyNet:67:WPA2\n--:80:\n\nHome:45:\n")
        networks = await collector.scan()
        assert [n.ssid for n in networks] == ["MyNet", "Home"]
        assert networks[0].security == SecurityType.WPA2
        assert networks[1].security == SecurityType.OPEN
        assert invoker.argvs == [RESCAN, LIST]

    @pytest.mark.asyncio
    async def test_collect_is_scan(self, collector, invoker):
        invoker.on(*RESCAN)
        invoker.on(*LIST, output="Cafe:30:WEP\n")
        networks = await collector.collect()
        assert networks[0].ssid == "Cafe"

    @pytest.mark.asyncio
    async def test_waits_between_rescan_and_list(self, invoker):
        collector = WifiCollector(invoker, available=True, rescan_delay=5.0)
        invoker.on(*RESCAN)
        invoker.on(*LIST, output="")
        with patch("controlmate.collectors.wifi_collector.asyncio.sleep", new=AsyncMock()) as sleep:
            await collector.scan()
        sleep.assert_awaited_once_with(5.0)

    @pytest.mark.asyncio
    async def test_rescan_failure(self, collector, invoker):
        invoker.fail(*RESCAN, message="Error: not authorized")
        with pytest.raises(CommandError) as info:
            await collector.scan()
        assert info.value.message.startswith("failed to rescan WiFi networks")
        assert "not authorized" in info.value.message
        assert invoker.argvs == [RESCAN]

    @pytest.mark.asyncio
    async def test_list_failure(self, collector, invoker):
        invoker.on(*RESCAN)
        invoker.fail(*LIST, message="Error: NetworkManager is not running")
        with pytest.raises(CommandError) as info:
            await collector.scan()
        assert info.value.message.startswith("failed to scan WiFi networks with nmcli")


# ── current ───────────────────────────────────────────


class TestCurrent:
    @pytest.mark.asyncio
    async def test_connected(self, collector, invoker):
        invoker.on(*ACTIVE, output="no:Other:40:WPA2\nyes:Home:70:WPA1 WPA2\n")
        current = await collector.current()
        assert current.connected is True
        assert current.ssid == "Home"
        assert current.signal == "70%"
        assert current.security == SecurityType.WPA2

    @pytest.mark.asyncio
    async def test_disconnected(self, collector, invoker):
        invoker.on(*ACTIVE, output="no:Other:40:WPA2\n")
        current = await collector.current()
        assert current.connected is False

    @pytest.mark.asyncio
    async def test_lookup_failure(self, collector, invoker):
        invoker.fail(*ACTIVE)
        with pytest.raises(CommandError):
            await collector.current()


# ── connect ───────────────────────────────────────────


class TestConnect:
    @pytest.mark.asyncio
    async def test_open_network_has_no_password(self, collector, invoker):
        argv = ("nmcli", "dev", "wifi", "connect", "Cafe")
        invoker.on(*argv)
        await collector.connect("Cafe", "", "Open")
        assert invoker.calls == [(argv, True)]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("security", ["WEP", "WPA", "WPA2", "WPA3"])
    async def test_secured_networks_pass_password(self, collector, invoker, security):
        argv = ("nmcli", "dev", "wifi", "connect", "Home", "password", "hunter2")
        invoker.on(*argv)
        await collector.connect("Home", "hunter2", security)
        assert invoker.argvs == [argv]

    @pytest.mark.asyncio
    async def test_ssid_is_a_single_argument(self, collector, invoker):
        argv = ("nmcli", "dev", "wifi", "connect", "My Net; rm -rf /")
        invoker.on(*argv)
        await collector.connect("My Net; rm -rf /", "", "Open")
        assert invoker.argvs == [argv]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("security", ["Unknown", "WPA/WPA2", "", "wpa2"])
    async def test_unsupported_security(self, collector, invoker, security):
        with pytest.raises(UnsupportedSecurityError) as info:
            await collector.connect("Home", "pw", security)
        assert info.value.http_status == 400
        assert invoker.calls == []

    @pytest.mark.asyncio
    async def test_failure_includes_tool_output(self, collector, invoker):
        argv = ("nmcli", "dev", "wifi", "connect", "Home", "password", "pw")
        invoker.fail(*argv, message="exited with status 10 (output: Error: No network with SSID 'Home' found.)")
        with pytest.raises(CommandError) as info:
            await collector.connect("Home", "pw", "WPA2")
        assert info.value.message.startswith("failed to connect to WiFi network Home")
        assert "No network with SSID" in info.value.message
