"""Uptime percentage helpers: parsing, severity classification, status labels."""

import math
from enum import Enum

from statuspage.schemas.page import Severity, Thresholds

DEFAULT_THRESHOLDS = Thresholds()


class LabelStyle(str, Enum):
    short = "short"  # UP / DOWN / DEGRADED
    long = "long"  # Operational / Outage / Degraded


_LABELS = {
    LabelStyle.short: {"up": "UP", "down": "DOWN", None: "DEGRADED"},
    LabelStyle.long: {"up": "Operational", "down": "Outage", None: "Degraded"},
}


def normalize_percent(value: object) -> float:
    """Coerce a summary percentage (``99.5``, ``"99.5%"``, ``None``) to a float in [0, 100].

    Permissive: anything missing or unparseable becomes 0.0. Never raises.
    """
    if not value or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip().removesuffix("%").strip()
        if "_" in text:
            # float() accepts digit separators; summary data never uses them
            return 0.0
        try:
            number = float(text) if text else 0.0
        except ValueError:
            return 0.0
    else:
        return 0.0

    if not math.isfinite(number):
        return 0.0
    return min(100.0, max(0.0, number))


def classify(percent: float, thresholds: Thresholds = DEFAULT_THRESHOLDS) -> Severity:
    """Map a percentage to ok/warn/down. Lower bounds are inclusive."""
    if percent >= thresholds.ok:
        return Severity.ok
    if percent >= thresholds.warn:
        return Severity.warn
    return Severity.down


def status_label(status: object, style: LabelStyle = LabelStyle.short) -> str:
    """Display label for a monitor status; unknown values get the degraded label."""
    labels = _LABELS[LabelStyle(style)]
    key = status.value if isinstance(status, Enum) else status
    if key in ("up", "down"):
        return labels[key]
    return labels[None]
