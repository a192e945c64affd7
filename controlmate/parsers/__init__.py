from .nmcli import parse_current_wifi, parse_wifi_list
from .ps import parse_ps_aux, parse_ps_ef
from .text import (
    derive_process_name,
    parse_delimited_records,
    parse_whitespace_columns,
    split_escaped,
)

__all__ = [
    "derive_process_name",
    "parse_current_wifi",
    "parse_delimited_records",
    "parse_ps_aux",
    "parse_ps_ef",
    "parse_whitespace_columns",
    "parse_wifi_list",
    "split_escaped",
]
