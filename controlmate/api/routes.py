from __future__ import annotations

import logging

from fastapi import APIRouter, Request

from controlmate.models import (
    ConnectionRequest,
    CurrentWiFi,
    NetworkInterface,
    Process,
    RebootResult,
    SystemHealth,
    WiFiNetwork,
)

logger = logging.getLogger(__name__)

router = APIRouter()

# Collectors raise ControlMateError subclasses; controlmate.main maps them
# to status codes, so handlers here stay straight-line.


# ── service ───────────────────────────────────────────


@router.get("/api/version")
async def get_version(request: Request) -> dict:
    return {"version": request.app.state.version}


@router.get("/api/health")
async def get_health(request: Request) -> SystemHealth:
    return await request.app.state.system_collector.health()


@router.get("/api/nmcli/status")
async def get_nmcli_status(request: Request) -> dict:
    return {"available": request.app.state.tools.nmcli}


# ── network ───────────────────────────────────────────


@router.get("/api/interfaces")
async def get_interfaces(request: Request) -> list[NetworkInterface]:
    return await request.app.state.interface_collector.collect()


@router.get("/api/wifi/scan")
async def scan_wifi(request: Request) -> list[WiFiNetwork]:
    return await request.app.state.wifi_collector.scan()


@router.get("/api/wifi/current")
async def get_current_wifi(request: Request) -> CurrentWiFi:
    return await request.app.state.wifi_collector.current()


@router.post("/api/wifi/connect")
async def connect_wifi(body: ConnectionRequest, request: Request) -> dict:
    await request.app.state.wifi_collector.connect(body.ssid, body.password, body.security)
    return {"status": "success"}


# ── system ────────────────────────────────────────────


@router.get("/api/processes")
async def get_processes(request: Request) -> list[Process]:
    return await request.app.state.process_collector.collect()


@router.post("/api/system/reboot")
async def reboot_system(request: Request) -> RebootResult:
    return await request.app.state.system_collector.reboot()
