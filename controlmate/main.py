from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from controlmate.api.routes import router
from controlmate.collectors import (
    InterfaceCollector,
    ProcessCollector,
    SystemCollector,
    WifiCollector,
    detect_tools,
    read_version,
)
from controlmate.config import settings
from controlmate.engine import CommandInvoker
from controlmate.errors import ControlMateError

logger = logging.getLogger(__name__)

_TEMPLATES = Path(settings.templates_dir)
_STATIC = Path(settings.static_dir)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # ── startup ───────────────────────────────────────
    invoker = CommandInvoker()
    tools = detect_tools(settings.nmcli_binary)

    app.state.tools = tools
    app.state.version = read_version(settings.version_file)
    app.state.interface_collector = InterfaceCollector(invoker)
    app.state.wifi_collector = WifiCollector(
        invoker,
        available=tools.nmcli,
        nmcli=settings.nmcli_binary,
        rescan_delay=settings.wifi_rescan_delay,
    )
    app.state.process_collector = ProcessCollector(invoker)
    app.state.system_collector = SystemCollector(
        invoker,
        started_at=time.monotonic(),
        connectivity_host=settings.connectivity_host,
        connectivity_port=settings.connectivity_port,
        connectivity_timeout=settings.connectivity_timeout,
    )

    logger.info(
        "%s %s started (nmcli available: %s)",
        settings.app_name, app.state.version, tools.nmcli,
    )

    yield

    # ── shutdown ──────────────────────────────────────
    logger.info("%s shut down", settings.app_name)


app = FastAPI(title=settings.app_name, lifespan=lifespan)

app.include_router(router)


# ── error mapping ─────────────────────────────────────


@app.exception_handler(ControlMateError)
async def controlmate_error_handler(request: Request, exc: ControlMateError) -> JSONResponse:
    logger.error("[API] %s %s -> %d: %s", request.method, request.url.path, exc.http_status, exc.message)
    return JSONResponse(status_code=exc.http_status, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    problems = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        problems.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request body: " + "; ".join(problems)},
    )


# ── pages ─────────────────────────────────────────────


@app.get("/", include_in_schema=False)
async def home_page() -> FileResponse:
    return FileResponse(str(_TEMPLATES / "index.html"))


@app.get("/processes", include_in_schema=False)
async def processes_page() -> FileResponse:
    return FileResponse(str(_TEMPLATES / "processes.html"))


@app.get("/system", include_in_schema=False)
async def system_page() -> FileResponse:
    return FileResponse(str(_TEMPLATES / "system.html"))


if _STATIC.is_dir():
    app.mount("/static", StaticFiles(directory=str(_STATIC)), name="static")
