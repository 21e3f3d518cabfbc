from __future__ import annotations
import os
import yaml
from pathlib import Path
from typing import Optional
from pydantic import BaseModel, Field

DEFAULT_SETTINGS_PATH = Path(__file__).resolve().parents[1] / "config" / "settings.yaml"

class AppConfig(BaseModel):
    name: str = "Student Management System"
    environment: str = "dev"

class ApiConfig(BaseModel):
    base_url: str
    timeout_seconds: float = Field(default=10.0, gt=0)

class UiConfig(BaseModel):
    message_ttl_seconds: float = Field(default=3.0, gt=0)

class LoggingConfig(BaseModel):
    level: str = "INFO"
    file: Optional[str] = None

class Settings(BaseModel):
    app: AppConfig
    api: ApiConfig
    ui: UiConfig
    logging: LoggingConfig

def load_settings(path: str | Path | None = None) -> Settings:
    """Read settings.yaml; STUDENTS_SETTINGS / STUDENTS_API_BASE override the file and endpoint."""
    path = path or os.getenv("STUDENTS_SETTINGS") or DEFAULT_SETTINGS_PATH
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    api = dict(data.get("api") or {})
    base_override = os.getenv("STUDENTS_API_BASE")
    if base_override:
        api["base_url"] = base_override

    return Settings(
        app=AppConfig(**(data.get("app") or {})),
        api=ApiConfig(**api),
        ui=UiConfig(**(data.get("ui") or {})),
        logging=LoggingConfig(**(data.get("logging") or {})),
    )
