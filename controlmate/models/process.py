from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Process(BaseModel):
    """One row of the host process table, derived from ``ps`` output."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    pid: int
    name: str
    status: str
    cpu_percent: str = Field(default="0%", alias="cpu")
    mem_percent: str = Field(default="0%", alias="memory")
    user: str
    command: str
