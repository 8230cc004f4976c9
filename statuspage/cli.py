from pathlib import Path

import structlog
import typer
from rich.console import Console
from rich.markup import escape

from statuspage.config import Settings
from statuspage.core.exceptions import StatusPageError
from statuspage.core.logging import configure_logging
from statuspage.schemas.page import Layout
from statuspage.services.build import build_status_page

console = Console()
err_console = Console(stderr=True)
logger = structlog.get_logger()
cli_app = typer.Typer(name="statuspage", help="Build a static status page from an uptime summary")


@cli_app.command()
def build(
    input_path: Path = typer.Option(None, "--input", help="Uptime summary JSON (default: history/summary.json)"),
    output_path: Path = typer.Option(None, "--output", help="HTML file to write"),
    layout: Layout = typer.Option(None, "--layout", help="Card layout: windowed or barcode"),
    seed: int = typer.Option(None, "--seed", help="Shuffle seed for the barcode layout"),
):
    """Render the uptime summary into a static HTML page."""
    settings = Settings()
    configure_logging(settings.log_level)

    config = settings.to_render_config()
    overrides = {
        "input_path": input_path,
        "output_path": output_path,
        "layout": layout,
        "seed": seed,
    }
    config = config.model_copy(update={k: v for k, v in overrides.items() if v is not None})

    try:
        written = build_status_page(config)
    except StatusPageError as exc:
        logger.error("status_page_build_failed", **exc.to_dict()["error"])
        err_console.print(f"[bold red]{escape(exc.message)}[/bold red]", soft_wrap=True)
        for key, value in exc.details.items():
            err_console.print(f"  [dim]{key}: {escape(str(value))}[/dim]", soft_wrap=True)
        raise typer.Exit(code=1)

    console.print(f"Wrote {written}", markup=False, highlight=False, soft_wrap=True)


def main():
    cli_app()


if __name__ == "__main__":
    main()
