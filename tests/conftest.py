"""Shared fixtures: a scripted stand-in for CommandInvoker."""

from __future__ import annotations

from typing import Sequence

import pytest

from controlmate.engine.invoker import CommandResult
from controlmate.errors import CommandError


class FakeInvoker:
    """Returns canned output per argv and records every call."""

    def __init__(self) -> None:
        self.responses: dict[tuple[str, ...], str | Exception] = {}
        self.calls: list[tuple[tuple[str, ...], bool]] = []

    def on(self, *argv: str, output: str = "", error: Exception | None = None) -> None:
        self.responses[argv] = error if error is not None else output

    def fail(self, *argv: str, message: str = "boom", output: str = "") -> None:
        self.on(*argv, error=CommandError(message, argv=argv, returncode=1, output=output))

    async def run(self, argv: Sequence[str], *, combine_stderr: bool = False) -> CommandResult:
        key = tuple(argv)
        self.calls.append((key, combine_stderr))
        if key not in self.responses:
            raise CommandError(f"unexpected command: {' '.join(key)}", argv=key, returncode=127)
        response = self.responses[key]
        if isinstance(response, Exception):
            raise response
        return CommandResult(argv=key, returncode=0, output=response)

    @property
    def argvs(self) -> list[tuple[str, ...]]:
        return [argv for argv, _ in self.calls]


@pytest.fixture
def invoker() -> FakeInvoker:
    return FakeInvoker()
