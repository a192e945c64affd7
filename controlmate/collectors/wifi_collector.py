from __future__ import annotations

import asyncio
import logging
from typing import Callable

from controlmate.collectors.base import BaseCollector
from controlmate.engine.invoker import CommandInvoker
from controlmate.errors import CommandError, ToolUnavailableError, UnsupportedSecurityError
from controlmate.models.enums import SecurityType
from controlmate.models.network import CurrentWiFi, WiFiNetwork
from controlmate.parsers.nmcli import (
    WIFI_ACTIVE_FIELDS,
    WIFI_LIST_FIELDS,
    parse_current_wifi,
    parse_wifi_list,
)

logger = logging.getLogger(__name__)

ConnectArgv = Callable[[str, str, str], list[str]]


def _open_argv(nmcli: str, ssid: str, password: str) -> list[str]:
    return [nmcli, "dev", "wifi", "connect", ssid]


def _password_argv(nmcli: str, ssid: str, password: str) -> list[str]:
    return [nmcli, "dev", "wifi", "connect", ssid, "password", password]


CONNECT_ARGV: dict[SecurityType, ConnectArgv] = {
    SecurityType.OPEN: _open_argv,
    SecurityType.WEP: _password_argv,
    SecurityType.WPA: _password_argv,
    SecurityType.WPA2: _password_argv,
    SecurityType.WPA3: _password_argv,
}


class WifiCollector(BaseCollector):
    """Scans and joins WiFi networks through NetworkManager's nmcli.

    ``available`` is the startup-time result of looking nmcli up on PATH;
    every operation fails fast with ToolUnavailableError when it is False.
    """

    name = "wifi_collector"

    def __init__(
        self,
        invoker: CommandInvoker | None = None,
        *,
        available: bool,
        nmcli: str = "nmcli",
        rescan_delay: float = 5.0,
    ) -> None:
        super().__init__(invoker)
        self.available = available
        self.nmcli = nmcli
        self.rescan_delay = rescan_delay

    async def collect(self) -> list[WiFiNetwork]:
        return await self.scan()

    async def scan(self) -> list[WiFiNetwork]:
        self._require_nmcli()
        try:
            await self._run([self.nmcli, "device", "wifi", "rescan"], combine_stderr=True)
        except CommandError as exc:
            raise exc.with_context("failed to rescan WiFi networks") from exc

        # nmcli returns before the radio finishes; give it time to populate.
        await asyncio.sleep(self.rescan_delay)

        try:
            result = await self._run(
                [self.nmcli, "-t", "-f", WIFI_LIST_FIELDS, "dev", "wifi", "list"]
            )
        except CommandError as exc:
            raise exc.with_context("failed to scan WiFi networks with nmcli") from exc

        networks = parse_wifi_list(result.output)
        logger.info("WiFi scan found %d networks", len(networks))
        return networks

    async def current(self) -> CurrentWiFi:
        self._require_nmcli()
        try:
            result = await self._run(
                [self.nmcli, "-t", "-f", WIFI_ACTIVE_FIELDS, "dev", "wifi"]
            )
        except CommandError as exc:
            raise exc.with_context("failed to read current WiFi connection") from exc
        return parse_current_wifi(result.output)

    async def connect(self, ssid: str, password: str, security: str) -> None:
        self._require_nmcli()
        build = CONNECT_ARGV.get(security)
        if build is None:
            raise UnsupportedSecurityError(security)

        logger.info("Connecting to WiFi network %r (%s)", ssid, security)
        try:
            await self._run(build(self.nmcli, ssid, password), combine_stderr=True)
        except CommandError as exc:
            raise exc.with_context(f"failed to connect to WiFi network {ssid}") from exc
        logger.info("Connected to WiFi network %r", ssid)

    def _require_nmcli(self) -> None:
        if not self.available:
            raise ToolUnavailableError(self.nmcli)
