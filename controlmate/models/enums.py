from __future__ import annotations

from enum import StrEnum


class SecurityType(StrEnum):
    OPEN = "Open"
    WEP = "WEP"
    WPA = "WPA"
    WPA2 = "WPA2"
    WPA3 = "WPA3"
    UNKNOWN = "Unknown"


# Security types a connection request may ask for.
CONNECTABLE_SECURITY: frozenset[SecurityType] = frozenset({
    SecurityType.OPEN,
    SecurityType.WEP,
    SecurityType.WPA,
    SecurityType.WPA2,
    SecurityType.WPA3,
})


class InterfaceStatus(StrEnum):
    UP = "up"
    DOWN = "down"


class InterfaceKind(StrEnum):
    ETHERNET = "ethernet"
    WIFI = "wifi"
    LOOPBACK = "loopback"
    PPP = "ppp"
    BRIDGE = "bridge"
    VPN_TUNNEL = "vpn_tunnel"
    AIRDROP = "airdrop"
    LOW_LATENCY_WIFI = "low_latency_wifi"
    GENERIC_TUNNEL = "generic_tunnel"
    SIX_TO_FOUR = "six_to_four"
    APPLE_NETWORK = "apple_network"
    ACCESS_POINT = "access_point"
    OTHER = "other"


class IPKind(StrEnum):
    PRIVATE = "private"
    PUBLIC = "public"
    V6 = "v6"


class HealthStatus(StrEnum):
    ONLINE = "online"
    DEGRADED = "degraded"
