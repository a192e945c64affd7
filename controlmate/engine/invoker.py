from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Sequence

from controlmate.errors import CommandError

logger = logging.getLogger(__name__)

# Argument values following these words are never logged or echoed back.
SECRET_FLAGS = frozenset({"password"})


@dataclass(frozen=True)
class CommandResult:
    argv: tuple[str, ...]
    returncode: int
    output: str


def redact(argv: Sequence[str]) -> list[str]:
    redacted: list[str] = []
    hide_next = False
    for arg in argv:
        redacted.append("******" if hide_next else arg)
        hide_next = arg in SECRET_FLAGS
    return redacted


class CommandInvoker:
    """Runs host programs with a discrete argument vector (never via a shell).

    ``run`` waits for the process to exit; no timeout is imposed. With
    ``combine_stderr`` the returned output interleaves stdout and stderr,
    which is what callers want when the text ends up in an error message.
    """

    async def run(
        self,
        argv: Sequence[str],
        *,
        combine_stderr: bool = False,
    ) -> CommandResult:
        if not argv:
            raise ValueError("argv must not be empty")
        shown = " ".join(redact(argv))
        logger.debug("Running: %s", shown)

        try:
            proc = await asyncio.create_subprocess_exec(
                *argv,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.STDOUT if combine_stderr else asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            logger.warning("Cannot start %s: %s", argv[0], exc)
            raise CommandError(
                f"failed to run {argv[0]}: {exc}", argv=redact(argv)
            ) from exc

        stdout, stderr = await proc.communicate()
        output = stdout.decode(errors="replace")
        returncode = proc.returncode if proc.returncode is not None else -1

        if returncode != 0:
            diagnostic = output if combine_stderr else (stderr or b"").decode(errors="replace")
            logger.warning("Command failed (%d): %s", returncode, shown)
            raise CommandError(
                f"{shown} exited with status {returncode}"
                + (f" (output: {diagnostic.strip()})" if diagnostic.strip() else ""),
                argv=redact(argv),
                returncode=returncode,
                output=diagnostic,
            )

        return CommandResult(argv=tuple(argv), returncode=returncode, output=output)
