"""Reading the uptime summary and writing the exported page."""

import json
from pathlib import Path

import structlog
from pydantic import ValidationError

from statuspage.core.exceptions import InputUnavailableError, OutputWriteError
from statuspage.schemas.summary import ServiceRecord

logger = structlog.get_logger()


def load_summary(path: Path) -> list[ServiceRecord]:
    """Parse summary.json into service records.

    Raises InputUnavailableError if the file is missing or unreadable, is not
    valid JSON, or is not a list of objects.
    """
    try:
        contents = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise InputUnavailableError(
            f"Cannot read uptime summary at {path}.",
            details={"path": str(path), "reason": exc.strerror or str(exc)},
        ) from exc
    except UnicodeDecodeError as exc:
        raise InputUnavailableError(
            f"Uptime summary at {path} is not UTF-8 text.",
            details={"path": str(path), "reason": "not UTF-8", "position": exc.start},
        ) from exc

    try:
        data = json.loads(contents)
    except json.JSONDecodeError as exc:
        raise InputUnavailableError(
            f"Uptime summary at {path} is not valid JSON.",
            details={"path": str(path), "line": exc.lineno, "column": exc.colno},
        ) from exc

    if not isinstance(data, list):
        raise InputUnavailableError(
            f"Uptime summary at {path} must be a list of services.",
            details={"path": str(path), "found": type(data).__name__},
        )

    records = []
    for index, entry in enumerate(data):
        if not isinstance(entry, dict):
            raise InputUnavailableError(
                f"Uptime summary entry {index} is not an object.",
                details={"path": str(path), "index": index, "found": type(entry).__name__},
            )
        try:
            records.append(ServiceRecord.model_validate(entry))
        except ValidationError as exc:
            raise InputUnavailableError(
                f"Uptime summary entry {index} is malformed.",
                details={"path": str(path), "index": index, "errors": exc.error_count()},
            ) from exc

    logger.info("summary_loaded", path=str(path), services=len(records))
    return records


def write_page(path: Path, html: str) -> None:
    """Write the page, creating parent directories. Overwrites any previous export.

    The page is encoded before the file is opened, so an unencodable page
    leaves the previous export untouched.
    """
    try:
        payload = html.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise OutputWriteError(
            f"Status page for {path} is not encodable as UTF-8.",
            details={"path": str(path), "reason": exc.reason},
        ) from exc

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(payload)
    except OSError as exc:
        raise OutputWriteError(
            f"Cannot write status page to {path}.",
            details={"path": str(path), "reason": exc.strerror or str(exc)},
        ) from exc
    logger.info("status_page_written", path=str(path), bytes=len(payload))
