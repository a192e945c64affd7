"""Normalisation of raw values reported by host tools.

Each classification is a single ordered table evaluated top to bottom; the
first matching row wins. Keep new rows in priority order.
"""

from __future__ import annotations

from typing import Callable, NamedTuple

from controlmate.models.enums import InterfaceKind, IPKind, SecurityType


# ── security ─────────────────────────────────────────

# WPA3 must be tested before WPA2 and WPA, otherwise "WPA3" reads as "WPA".
SECURITY_RULES: list[tuple[Callable[[str], bool], SecurityType]] = [
    (lambda s: "WPA3" in s, SecurityType.WPA3),
    (lambda s: "WPA2" in s, SecurityType.WPA2),
    (lambda s: "WPA" in s, SecurityType.WPA),
    (lambda s: "WEP" in s, SecurityType.WEP),
    (lambda s: s in ("", "--", "OPEN"), SecurityType.OPEN),
]


def normalize_security(raw: str | None) -> SecurityType:
    """Map an nmcli SECURITY field (e.g. ``"WPA1 WPA2"``) to a SecurityType."""
    value = (raw or "").strip().upper()
    for matches, result in SECURITY_RULES:
        if matches(value):
            return result
    return SecurityType.UNKNOWN


# ── interfaces ───────────────────────────────────────


class InterfaceRole(NamedTuple):
    kind: InterfaceKind
    label: str


INTERFACE_ROLES: list[tuple[str, InterfaceKind, str]] = [
    ("en", InterfaceKind.ETHERNET, "Ethernet"),
    ("eth", InterfaceKind.ETHERNET, "Ethernet"),
    ("wlan", InterfaceKind.WIFI, "WiFi"),
    ("wifi", InterfaceKind.WIFI, "WiFi"),
    ("wl", InterfaceKind.WIFI, "WiFi"),
    ("lo", InterfaceKind.LOOPBACK, "Loopback"),
    ("ppp", InterfaceKind.PPP, "PPP"),
    ("bridge", InterfaceKind.BRIDGE, "Bridge"),
    ("utun", InterfaceKind.VPN_TUNNEL, "VPN Tunnel"),
    ("awdl", InterfaceKind.AIRDROP, "AirDrop"),
    ("llw", InterfaceKind.LOW_LATENCY_WIFI, "Low Latency WiFi"),
    ("gif", InterfaceKind.GENERIC_TUNNEL, "Generic Tunnel"),
    ("stf", InterfaceKind.SIX_TO_FOUR, "6to4 Tunnel"),
    ("anpi", InterfaceKind.APPLE_NETWORK, "Apple Network"),
    ("ap", InterfaceKind.ACCESS_POINT, "Access Point"),
]

DEFAULT_INTERFACE_ROLE = InterfaceRole(InterfaceKind.OTHER, "Network Interface")


def classify_interface_role(name: str) -> InterfaceRole:
    for prefix, kind, label in INTERFACE_ROLES:
        if name.startswith(prefix):
            return InterfaceRole(kind, label)
    return DEFAULT_INTERFACE_ROLE


# ── signal ───────────────────────────────────────────

SIGNAL_BUCKETS: list[tuple[Callable[[int], bool], int]] = [
    (lambda n: n >= 75, 4),
    (lambda n: n >= 50, 3),
    (lambda n: n >= 25, 2),
    (lambda n: n > 0, 1),
]


def _signal_digits(signal: str | None) -> str:
    value = (signal or "").strip()
    if value.endswith("%"):
        value = value[:-1].strip()
    return value


def format_signal(raw: str | int | None) -> str:
    """Render a signal field as ``"N%"`` whether or not it is already suffixed."""
    value = _signal_digits(str(raw) if raw is not None else "")
    return f"{value or 0}%"


def bucket_signal_strength(signal: str | None) -> int:
    """Number of signal bars (0-4) for a ``"N%"`` field; malformed input is 0."""
    try:
        percent = int(_signal_digits(signal))
    except ValueError:
        return 0
    for matches, bars in SIGNAL_BUCKETS:
        if matches(percent):
            return bars
    return 0


# ── addresses ────────────────────────────────────────

PRIVATE_PREFIXES = ("10.", "172.", "192.168.")


def classify_ip_kind(ip: str) -> IPKind:
    """Presentation-only address grouping; not a security boundary."""
    if ":" in ip:
        return IPKind.V6
    if ip.startswith(PRIVATE_PREFIXES):
        return IPKind.PRIVATE
    return IPKind.PUBLIC
