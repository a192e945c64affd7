from __future__ import annotations

from controlmate.engine.classifier import (
    bucket_signal_strength,
    format_signal,
    normalize_security,
)
from controlmate.models.network import CurrentWiFi, WiFiNetwork
from controlmate.parsers.text import parse_delimited_records

# Field lists passed to ``nmcli -t -f``; parsers below rely on this order.
WIFI_LIST_FIELDS = "SSID,SIGNAL,SECURITY"
WIFI_ACTIVE_FIELDS = "ACTIVE,SSID,SIGNAL,SECURITY"

PLACEHOLDER = "--"
TERSE_DELIMITER = ":"
TERSE_ESCAPE = "\\"


def _is_real_ssid(ssid: str) -> bool:
    return ssid not in ("", PLACEHOLDER)


def _records(text: str, min_fields: int) -> list[list[str]]:
    return parse_delimited_records(text, TERSE_DELIMITER, min_fields, escape=TERSE_ESCAPE)


def parse_wifi_list(text: str) -> list[WiFiNetwork]:
    """Parse ``nmcli -t -f SSID,SIGNAL,SECURITY dev wifi list`` output."""
    networks: list[WiFiNetwork] = []
    for ssid, signal, security, *_ in _records(text, 3):
        if not _is_real_ssid(ssid):
            continue
        signal = format_signal(signal)
        networks.append(
            WiFiNetwork(
                ssid=ssid,
                signal=signal,
                security=normalize_security(security),
                bars=bucket_signal_strength(signal),
            )
        )
    return networks


def parse_current_wifi(text: str) -> CurrentWiFi:
    """Parse ``nmcli -t -f ACTIVE,SSID,SIGNAL,SECURITY dev wifi`` output.

    The first active line with a real SSID wins.
    """
    for active, ssid, signal, security, *_ in _records(text, 4):
        if active == "yes" and _is_real_ssid(ssid):
            return CurrentWiFi(
                ssid=ssid,
                signal=format_signal(signal),
                security=normalize_security(security),
                connected=True,
            )
    return CurrentWiFi()
