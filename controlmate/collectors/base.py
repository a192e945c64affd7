from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Sequence

from controlmate.engine.invoker import CommandInvoker, CommandResult

logger = logging.getLogger(__name__)


class BaseCollector(ABC):
    """Abstract base for all host collectors.

    Subclasses implement ``collect()`` which returns a fresh snapshot each
    call. Nothing is cached between calls; every request sees current state.
    """

    name: str = "base"

    def __init__(self, invoker: CommandInvoker | None = None) -> None:
        self._invoker = invoker or CommandInvoker()

    # ── abstract method ─────────────────────────────────

    @abstractmethod
    async def collect(self) -> Any:
        """Gather host data and return it as model objects."""
        ...

    # ── internals ───────────────────────────────────────

    async def _run(self, argv: Sequence[str], combine_stderr: bool = False) -> CommandResult:
        logger.debug("Collector [%s] invoking %s", self.name, argv[0])
        return await self._invoker.run(argv, combine_stderr=combine_stderr)
