from __future__ import annotations

import asyncio
import logging
import platform
import shutil
import time
from datetime import datetime
from functools import partial
from pathlib import Path

from controlmate.collectors.base import BaseCollector
from controlmate.engine.fallback import Strategy, first_success
from controlmate.engine.invoker import CommandInvoker
from controlmate.errors import CommandError
from controlmate.models.enums import HealthStatus
from controlmate.models.system import RebootResult, SystemHealth, ToolAvailability

logger = logging.getLogger(__name__)

REBOOT_COMMANDS: list[list[str]] = [
    ["systemctl", "reboot"],
    ["reboot"],
    ["shutdown", "-r", "now"],
]

# Hosts where a reboot request is only logged.
DEVELOPMENT_PLATFORMS = frozenset({"windows", "darwin"})


def detect_tools(nmcli: str = "nmcli") -> ToolAvailability:
    tools = ToolAvailability(nmcli=shutil.which(nmcli) is not None)
    logger.info("Host tools: nmcli=%s", tools.nmcli)
    return tools


def read_version(path: str | Path) -> str:
    try:
        return Path(path).read_text().strip() or "unknown"
    except OSError:
        return "unknown"


def format_uptime(seconds: float) -> str:
    total = max(int(seconds), 0)
    days, rem = divmod(total, 86400)
    hours, rem = divmod(rem, 3600)
    minutes = rem // 60
    if days:
        return f"{days}d {hours}h {minutes}m"
    if hours:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"


class SystemCollector(BaseCollector):
    """Service health (connectivity, uptime) and host reboot."""

    name = "system_collector"

    def __init__(
        self,
        invoker: CommandInvoker | None = None,
        *,
        started_at: float | None = None,
        connectivity_host: str = "8.8.8.8",
        connectivity_port: int = 53,
        connectivity_timeout: float = 3.0,
        platform_name: str | None = None,
    ) -> None:
        super().__init__(invoker)
        self.started_at = started_at if started_at is not None else time.monotonic()
        self.connectivity_host = connectivity_host
        self.connectivity_port = connectivity_port
        self.connectivity_timeout = connectivity_timeout
        self.platform_name = (platform_name or platform.system()).lower()

    async def collect(self) -> SystemHealth:
        return await self.health()

    async def health(self) -> SystemHealth:
        network_ok = await self.check_connectivity()
        return SystemHealth(
            status=HealthStatus.ONLINE if network_ok else HealthStatus.DEGRADED,
            uptime=format_uptime(time.monotonic() - self.started_at),
            network_check=network_ok,
            last_check=datetime.now().astimezone().isoformat(timespec="seconds"),
        )

    async def check_connectivity(self) -> bool:
        try:
            _, writer = await asyncio.wait_for(
                asyncio.open_connection(self.connectivity_host, self.connectivity_port),
                timeout=self.connectivity_timeout,
            )
        except (OSError, asyncio.TimeoutError):
            logger.debug(
                "Connectivity check to %s:%d failed",
                self.connectivity_host, self.connectivity_port,
            )
            return False
        writer.close()
        try:
            await writer.wait_closed()
        except OSError:
            logger.debug("Connectivity check socket closed with an error")
        return True

    async def reboot(self) -> RebootResult:
        if self.platform_name in DEVELOPMENT_PLATFORMS:
            logger.warning(
                "Reboot requested on %s (development machine) - logging instead of rebooting",
                self.platform_name,
            )
            return RebootResult(
                status="logged",
                message=f"Reboot action logged for {self.platform_name} development machine",
            )

        logger.warning("Reboot requested on %s system", self.platform_name)
        strategies = [
            Strategy(" ".join(argv), partial(self._run, argv, combine_stderr=True))
            for argv in REBOOT_COMMANDS
        ]
        try:
            await first_success(strategies)
        except CommandError as exc:
            raise exc.with_context("Failed to initiate reboot") from exc

        return RebootResult(status="success", message="System reboot initiated")
