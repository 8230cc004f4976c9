from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, model_validator


class Severity(str, Enum):
    ok = "ok"
    warn = "warn"
    down = "down"

    @property
    def rank(self) -> int:
        """Ordering for comparisons: down < warn < ok."""
        return _SEVERITY_RANK[self]


_SEVERITY_RANK = {Severity.down: 0, Severity.warn: 1, Severity.ok: 2}


class Layout(str, Enum):
    windowed = "windowed"  # one bar per trailing window
    barcode = "barcode"  # stripe histogram of the aggregate percentage


# ── Config ────────────────────────────────────────────────────────────────────


class Thresholds(BaseModel):
    ok: float = 99.0
    warn: float = 95.0

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _ordered(self) -> "Thresholds":
        if self.warn > self.ok:
            raise ValueError("warn threshold must not exceed ok threshold")
        return self


class RenderConfig(BaseModel):
    input_path: Path
    output_path: Path
    layout: Layout = Layout.windowed
    seed: int | None = None
    title: str = "Status"
    description: str = ""
    thresholds: Thresholds = Thresholds()


# ── Rendered document ─────────────────────────────────────────────────────────


class RenderedSegment(BaseModel):
    label: str
    value: float
    severity: Severity


class RenderedCard(BaseModel):
    name: str
    url: str
    status: str  # "up", "down", or "degraded"
    status_label: str
    severity: Severity
    overall: float
    uptime: str = ""
    segments: list[RenderedSegment] = Field(default_factory=list)
    ticks: list[Severity] = Field(default_factory=list)


class StatusDocument(BaseModel):
    title: str
    description: str = ""
    layout: Layout
    cards: list[RenderedCard] = Field(default_factory=list)
