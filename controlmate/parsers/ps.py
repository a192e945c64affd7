from __future__ import annotations

import logging

from controlmate.models.process import Process
from controlmate.parsers.text import derive_process_name, parse_whitespace_columns

logger = logging.getLogger(__name__)

# USER PID %CPU %MEM VSZ RSS TTY STAT START TIME COMMAND
PS_AUX_MIN_COLUMNS = 11
PS_AUX_COMMAND_COLUMN = 10

# UID PID PPID C STIME TTY TIME CMD
PS_EF_MIN_COLUMNS = 8
PS_EF_COMMAND_COLUMN = 7


def _pid(text: str) -> int | None:
    try:
        return int(text)
    except ValueError:
        return None


def parse_ps_aux(text: str) -> list[Process]:
    processes: list[Process] = []
    for row in parse_whitespace_columns(text, PS_AUX_MIN_COLUMNS, PS_AUX_COMMAND_COLUMN):
        pid = _pid(row[1])
        if pid is None:
            continue
        command = row[PS_AUX_COMMAND_COLUMN]
        processes.append(
            Process(
                pid=pid,
                name=derive_process_name(command),
                status=row[7],
                cpu_percent=f"{row[2]}%",
                mem_percent=f"{row[3]}%",
                user=row[0],
                command=command,
            )
        )
    logger.debug("Parsed %d processes from ps aux", len(processes))
    return processes


def parse_ps_ef(text: str) -> list[Process]:
    """``ps -ef`` has no state or usage columns; those are reported as R / 0%."""
    processes: list[Process] = []
    for row in parse_whitespace_columns(text, PS_EF_MIN_COLUMNS, PS_EF_COMMAND_COLUMN):
        pid = _pid(row[1])
        if pid is None:
            continue
        command = row[PS_EF_COMMAND_COLUMN]
        processes.append(
            Process(
                pid=pid,
                name=derive_process_name(command),
                status="R",
                cpu_percent="0%",
                mem_percent="0%",
                user=row[0],
                command=command,
            )
        )
    logger.debug("Parsed %d processes from ps -ef", len(processes))
    return processes
