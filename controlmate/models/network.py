from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from controlmate.models.enums import (
    CONNECTABLE_SECURITY,
    InterfaceKind,
    InterfaceStatus,
    IPKind,
    SecurityType,
)


class NetworkInterface(BaseModel):
    """Snapshot of one non-loopback adapter.

    ``ip_kinds`` runs parallel to ``ip_addresses``; ``kind`` and ``type``
    are the role of the adapter as guessed from its name.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    ip_addresses: list[str] = Field(default_factory=list)
    ip_kinds: list[IPKind] = Field(default_factory=list)
    status: InterfaceStatus = InterfaceStatus.DOWN
    kind: InterfaceKind = InterfaceKind.OTHER
    type: str = "Network Interface"

    @model_validator(mode="after")
    def _kinds_match_addresses(self) -> NetworkInterface:
        if len(self.ip_kinds) != len(self.ip_addresses):
            raise ValueError("ip_kinds must have one entry per address")
        return self


class WiFiNetwork(BaseModel):
    """One line of a WiFi scan, in scan-tool order."""

    model_config = ConfigDict(frozen=True)

    ssid: str = Field(min_length=1)
    signal: str
    security: SecurityType
    bars: int = Field(default=0, ge=0, le=4)


class CurrentWiFi(BaseModel):
    """The active WiFi association, or an empty record when disconnected.

    ``security`` is null only while ``connected`` is false.
    """

    model_config = ConfigDict(frozen=True)

    ssid: str = ""
    signal: str = ""
    security: SecurityType | None = None
    connected: bool = False

    @model_validator(mode="after")
    def _security_when_connected(self) -> CurrentWiFi:
        if self.connected and self.security is None:
            raise ValueError("a connected network must report its security type")
        return self


class ConnectionRequest(BaseModel):
    ssid: str = Field(min_length=1)
    password: str = ""
    security: SecurityType

    @field_validator("security", mode="before")
    @classmethod
    def _connectable(cls, value: object) -> object:
        if not isinstance(value, str) or value not in CONNECTABLE_SECURITY:
            raise ValueError(f"unsupported security type: {value}")
        return value

    @model_validator(mode="after")
    def _password_required(self) -> ConnectionRequest:
        if self.security != SecurityType.OPEN and not self.password:
            raise ValueError(f"a password is required for {self.security} networks")
        return self
