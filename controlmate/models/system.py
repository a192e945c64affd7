from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from controlmate.models.enums import HealthStatus


class SystemHealth(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: HealthStatus
    uptime: str
    network_check: bool
    last_check: str


class RebootResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: str
    message: str


class ToolAvailability(BaseModel):
    """Host tools detected once at startup; never mutated afterwards."""

    model_config = ConfigDict(frozen=True)

    nmcli: bool = False
