from enum import Enum

from pydantic import BaseModel, Field, field_validator, model_validator

from statuspage.services.uptime import normalize_percent

UNNAMED_SERVICE = "Unnamed service"


class ServiceStatus(str, Enum):
    up = "up"
    down = "down"
    degraded = "degraded"  # fallback for anything the monitor reports besides up/down


class ServiceRecord(BaseModel):
    """One entry of the uptime monitor's summary.json."""

    name: str = ""
    url: str = ""
    status: ServiceStatus = ServiceStatus.degraded
    uptime_day: float = Field(default=0.0, alias="uptimeDay")
    uptime_week: float = Field(default=0.0, alias="uptimeWeek")
    uptime_month: float = Field(default=0.0, alias="uptimeMonth")
    uptime_year: float = Field(default=0.0, alias="uptimeYear")
    uptime: str = ""  # all-time figure, display only

    model_config = {"populate_by_name": True, "extra": "ignore", "frozen": True}

    @field_validator("uptime_day", "uptime_week", "uptime_month", "uptime_year", mode="before")
    @classmethod
    def _percent(cls, value: object) -> float:
        return normalize_percent(value)

    @field_validator("status", mode="before")
    @classmethod
    def _status(cls, value: object) -> ServiceStatus:
        if value in (ServiceStatus.up, ServiceStatus.down):
            return ServiceStatus(value)
        return ServiceStatus.degraded

    @field_validator("name", "url", "uptime", mode="before")
    @classmethod
    def _text(cls, value: object) -> str:
        if value is None:
            return ""
        # JSON escapes can carry lone surrogates; swap them for "?"
        return str(value).encode("utf-8", "replace").decode("utf-8")

    @model_validator(mode="before")
    @classmethod
    def _display_name(cls, data: object) -> object:
        if isinstance(data, dict) and not str(data.get("name") or "").strip():
            data = {**data, "name": str(data.get("url") or "").strip() or UNNAMED_SERVICE}
        return data
