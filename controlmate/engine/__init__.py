from .classifier import (
    InterfaceRole,
    bucket_signal_strength,
    classify_interface_role,
    classify_ip_kind,
    format_signal,
    normalize_security,
)
from .fallback import Strategy, first_success
from .invoker import CommandInvoker, CommandResult

__all__ = [
    "CommandInvoker",
    "CommandResult",
    "InterfaceRole",
    "Strategy",
    "bucket_signal_strength",
    "classify_interface_role",
    "classify_ip_kind",
    "first_success",
    "format_signal",
    "normalize_security",
]
