from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings

BASE_DIR = Path(__file__).resolve().parent
STATIC_DIR = BASE_DIR / "static"


class Settings(BaseSettings):
    # --- app ---
    app_name: str = "ControlMate Utils"
    debug: bool = False
    log_level: str = "INFO"

    # --- assets ---
    templates_dir: str = str(BASE_DIR / "templates")
    static_dir: str = str(STATIC_DIR)
    version_file: str = str(STATIC_DIR / "version.txt")

    # --- wifi ---
    nmcli_binary: str = "nmcli"
    wifi_rescan_delay: float = 5.0  # seconds between rescan and list

    # --- health ---
    connectivity_host: str = "8.8.8.8"
    connectivity_port: int = 53
    connectivity_timeout: float = 3.0

    # --- server ---
    host: str = "0.0.0.0"
    port: int = 9080

    model_config = {"env_file": ".env", "env_prefix": "CM_"}


settings = Settings()
