"""Status page rendering — service cards, page document, and HTML output."""

import math
import random

import structlog
from jinja2 import Environment, PackageLoader, select_autoescape

from statuspage.schemas.page import (
    Layout,
    RenderConfig,
    RenderedCard,
    RenderedSegment,
    Severity,
    StatusDocument,
    Thresholds,
)
from statuspage.schemas.summary import ServiceRecord
from statuspage.services.uptime import DEFAULT_THRESHOLDS, LabelStyle, classify, status_label

logger = structlog.get_logger()

TOTAL_SEGMENTS = 120
TEMPLATE_NAME = "status_page.html.j2"

_env = Environment(
    loader=PackageLoader("statuspage", "templates"),
    autoescape=select_autoescape(default=True, default_for_string=True),
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=False,
)
_env.filters["pct"] = lambda value: f"{value:.2f}"


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


# ── Cards ─────────────────────────────────────────────────────────────────────


def _windowed_card(record: ServiceRecord, thresholds: Thresholds) -> RenderedCard:
    windows = [
        ("24h", record.uptime_day),
        ("7d", record.uptime_week),
        ("30d", record.uptime_month),
        ("365d", record.uptime_year),
    ]
    segments = [
        RenderedSegment(label=label, value=value, severity=classify(value, thresholds))
        for label, value in windows
    ]
    return RenderedCard(
        name=record.name,
        url=record.url,
        status=record.status.value,
        status_label=status_label(record.status, LabelStyle.short),
        severity=classify(record.uptime_day, thresholds),
        overall=record.uptime_day,
        uptime=record.uptime,
        segments=segments,
    )


def barcode_ticks(overall: float, rng: random.Random) -> list[Severity]:
    """Build the shuffled stripe histogram for an aggregate percentage.

    Half of the downtime ticks (rounded up) are drawn as warnings, the rest as
    outages.
    """
    down_total = _round_half_up((100.0 - overall) / 100.0 * TOTAL_SEGMENTS)
    down_total = min(TOTAL_SEGMENTS, max(0, down_total))
    warn_ticks = min(down_total, math.ceil(down_total / 2))
    ticks = (
        [Severity.ok] * (TOTAL_SEGMENTS - down_total)
        + [Severity.warn] * warn_ticks
        + [Severity.down] * (down_total - warn_ticks)
    )
    rng.shuffle(ticks)
    return ticks


def _barcode_card(record: ServiceRecord, thresholds: Thresholds, rng: random.Random) -> RenderedCard:
    # Longest window that has data wins
    overall = record.uptime_year or record.uptime_month or record.uptime_week or record.uptime_day
    return RenderedCard(
        name=record.name,
        url=record.url,
        status=record.status.value,
        status_label=status_label(record.status, LabelStyle.long),
        severity=classify(overall, thresholds),
        overall=overall,
        uptime=record.uptime,
        ticks=barcode_ticks(overall, rng),
    )


def render_service(
    record: ServiceRecord,
    layout: Layout = Layout.windowed,
    thresholds: Thresholds = DEFAULT_THRESHOLDS,
    rng: random.Random | None = None,
) -> RenderedCard:
    """Render one service record into a card for the given layout."""
    if layout == Layout.barcode:
        return _barcode_card(record, thresholds, rng or random.Random())
    return _windowed_card(record, thresholds)


# ── Page ──────────────────────────────────────────────────────────────────────


def render_page(records: list[ServiceRecord], config: RenderConfig) -> StatusDocument:
    """Render all records, preserving input order."""
    rng = random.Random(config.seed)
    cards = [
        render_service(record, config.layout, config.thresholds, rng)
        for record in records
    ]
    logger.debug("status_page_rendered", layout=config.layout.value, cards=len(cards))
    return StatusDocument(
        title=config.title,
        description=config.description,
        layout=config.layout,
        cards=cards,
    )


def render_html(document: StatusDocument) -> str:
    """Render the document to a self-contained HTML page. Text fields are escaped."""
    template = _env.get_template(TEMPLATE_NAME)
    return template.render(page=document).strip()
