from __future__ import annotations

from controlmate.collectors.base import BaseCollector
from controlmate.engine.fallback import Strategy, first_success
from controlmate.errors import CommandError
from controlmate.models.process import Process
from controlmate.parsers.ps import parse_ps_aux, parse_ps_ef


class ProcessCollector(BaseCollector):
    """Lists host processes via ``ps aux``, falling back to ``ps -ef``."""

    name = "process_collector"

    async def collect(self) -> list[Process]:
        strategies = [
            Strategy("ps aux", self._ps_aux),
            Strategy("ps -ef", self._ps_ef),
        ]
        try:
            return await first_success(strategies)
        except CommandError as exc:
            raise exc.with_context("failed to get process list") from exc

    async def _ps_aux(self) -> list[Process]:
        result = await self._run(["ps", "aux"])
        return parse_ps_aux(result.output)

    async def _ps_ef(self) -> list[Process]:
        result = await self._run(["ps", "-ef"])
        return parse_ps_ef(result.output)
