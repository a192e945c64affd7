from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Generic, Sequence, TypeVar

from controlmate.errors import ControlMateError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Strategy(Generic[T]):
    name: str
    run: Callable[[], Awaitable[T]]


async def first_success(strategies: Sequence[Strategy[T]]) -> T:
    """Try each strategy in order; return the first result.

    If every strategy fails, the last failure is raised.
    """
    if not strategies:
        raise ValueError("at least one strategy is required")

    last_error: ControlMateError | None = None
    for strategy in strategies:
        try:
            return await strategy.run()
        except ControlMateError as exc:
            logger.warning("Strategy [%s] failed: %s", strategy.name, exc.message)
            last_error = exc
    assert last_error is not None
    raise last_error
