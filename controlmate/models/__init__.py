from .enums import (
    CONNECTABLE_SECURITY,
    HealthStatus,
    InterfaceKind,
    InterfaceStatus,
    IPKind,
    SecurityType,
)
from .network import ConnectionRequest, CurrentWiFi, NetworkInterface, WiFiNetwork
from .process import Process
from .system import RebootResult, SystemHealth, ToolAvailability

__all__ = [
    "CONNECTABLE_SECURITY",
    "ConnectionRequest",
    "CurrentWiFi",
    "HealthStatus",
    "InterfaceKind",
    "InterfaceStatus",
    "IPKind",
    "NetworkInterface",
    "Process",
    "RebootResult",
    "SecurityType",
    "SystemHealth",
    "ToolAvailability",
    "WiFiNetwork",
]
