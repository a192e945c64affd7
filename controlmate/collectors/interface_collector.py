from __future__ import annotations

import ipaddress
import logging
import socket

import psutil

from controlmate.collectors.base import BaseCollector
from controlmate.engine.classifier import classify_interface_role, classify_ip_kind
from controlmate.errors import EnumerationError
from controlmate.models.enums import InterfaceStatus
from controlmate.models.network import NetworkInterface

logger = logging.getLogger(__name__)


class InterfaceCollector(BaseCollector):
    """Lists non-loopback adapters with their IPv4 addresses and link state."""

    name = "interface_collector"

    async def collect(self) -> list[NetworkInterface]:
        try:
            addrs = psutil.net_if_addrs()
            stats = psutil.net_if_stats()
        except OSError as exc:
            raise EnumerationError(f"failed to enumerate network interfaces: {exc}") from exc

        names = list(addrs) + [n for n in stats if n not in addrs]
        interfaces: list[NetworkInterface] = []

        for name in names:
            addresses = addrs.get(name, [])
            stat = stats.get(name)
            if self._is_loopback(stat, addresses):
                continue

            ipv4 = [
                a.address
                for a in addresses
                if a.family == socket.AF_INET and not self._is_loopback_ip(a.address)
            ]
            status = InterfaceStatus.UP if stat and stat.isup else InterfaceStatus.DOWN
            role = classify_interface_role(name)

            interfaces.append(
                NetworkInterface(
                    name=name,
                    ip_addresses=ipv4,
                    ip_kinds=[classify_ip_kind(ip) for ip in ipv4],
                    status=status,
                    kind=role.kind,
                    type=role.label,
                )
            )

        return interfaces

    @staticmethod
    def _is_loopback_ip(address: str) -> bool:
        try:
            return ipaddress.ip_address(address).is_loopback
        except ValueError:
            return False

    @classmethod
    def _is_loopback(cls, stat, addresses) -> bool:
        flags = getattr(stat, "flags", "") or ""
        if "loopback" in flags.split(","):
            return True
        return any(
            a.family == socket.AF_INET and cls._is_loopback_ip(a.address)
            for a in addresses
        )
