from pathlib import Path

from pydantic_settings import BaseSettings

from statuspage.schemas.page import Layout, RenderConfig


class Settings(BaseSettings):
    """Build settings loaded from environment variables."""

    # Summary written by the uptime monitor
    input_path: str = "history/summary.json"

    # Exported page
    output_path: str = "site/status-page/__sapper__/export/index.html"

    # Rendering
    layout: Layout = Layout.windowed
    seed: int | None = None  # None = fresh shuffle each run (barcode layout only)
    title: str = "RCM Dev Status"
    description: str = (
        "Snapshot of dev stack readiness across trailing uptime windows. "
        "Labels read from live uptime checks."
    )

    # Logging
    log_level: str = "info"

    model_config = {
        "env_prefix": "STATUSPAGE_",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    def to_render_config(self) -> RenderConfig:
        return RenderConfig(
            input_path=Path(self.input_path),
            output_path=Path(self.output_path),
            layout=self.layout,
            seed=self.seed,
            title=self.title,
            description=self.description,
        )

