"""Line-oriented helpers for scraping command output.

Malformed lines are dropped rather than raised: a partial listing from a
live command is more useful than none.
"""

from __future__ import annotations


def split_escaped(line: str, delimiter: str, escape: str) -> list[str]:
    """Split ``line`` on ``delimiter``, honouring ``escape`` before any character.

    ``nmcli -t`` writes a literal ``:`` inside a value as ``\\:``.
    """
    fields: list[str] = []
    current: list[str] = []
    i = 0
    while i < len(line):
        if line[i] == escape and i + 1 < len(line):
            current.append(line[i + 1])
            i += 2
        elif line.startswith(delimiter, i):
            fields.append("".join(current))
            current = []
            i += len(delimiter)
        else:
            current.append(line[i])
            i += 1
    fields.append("".join(current))
    return fields


def parse_delimited_records(
    text: str,
    delimiter: str,
    min_fields: int,
    escape: str | None = None,
) -> list[list[str]]:
    """Split each non-blank line of ``text`` into fields.

    Lines with fewer than ``min_fields`` fields are skipped. Extra fields
    are kept; callers take what they need.
    """
    records: list[list[str]] = []
    for raw in text.splitlines():
        line = raw.strip()
        if not line:
            continue
        if escape:
            fields = split_escaped(line, delimiter, escape)
        else:
            fields = line.split(delimiter)
        if len(fields) < min_fields:
            continue
        records.append(fields)
    return records


def parse_whitespace_columns(
    text: str,
    min_columns: int,
    command_column_index: int,
) -> list[list[str]]:
    """Split tabular output on runs of whitespace, skipping the header line.

    Everything from ``command_column_index`` onward is kept as one field,
    verbatim, since command lines contain spaces of their own.
    """
    # A row must reach the command column, whatever min_columns says.
    required = max(min_columns, command_column_index + 1)
    rows: list[list[str]] = []
    for index, raw in enumerate(text.splitlines()):
        if index == 0 or not raw.strip():
            continue
        if len(raw.split()) < required:
            continue
        columns = raw.strip().split(None, command_column_index)
        rows.append(columns[:command_column_index] + [columns[command_column_index]])
    return rows


def derive_process_name(command_line: str) -> str:
    head, sep, _ = command_line.partition(" ")
    if sep and head:
        return head
    return command_line
