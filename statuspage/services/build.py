from pathlib import Path

import structlog

from statuspage.schemas.page import RenderConfig
from statuspage.services.renderer import render_html, render_page
from statuspage.services.summary import load_summary, write_page

logger = structlog.get_logger()


def build_status_page(config: RenderConfig) -> Path:
    """Read the summary, render it, and write the page. Returns the output path.

    Nothing is written unless the summary loads and renders completely.
    """
    records = load_summary(config.input_path)
    document = render_page(records, config)
    html = render_html(document)
    write_page(config.output_path, html)
    logger.info(
        "status_page_built",
        layout=config.layout.value,
        services=len(document.cards),
        output=str(config.output_path),
    )
    return config.output_path
