from .base import BaseCollector
from .interface_collector import InterfaceCollector
from .process_collector import ProcessCollector
from .system_collector import SystemCollector, detect_tools, format_uptime, read_version
from .wifi_collector import WifiCollector

__all__ = [
    "BaseCollector",
    "InterfaceCollector",
    "ProcessCollector",
    "SystemCollector",
    "WifiCollector",
    "detect_tools",
    "format_uptime",
    "read_version",
]
