"""Static status page builder for uptime monitor summaries."""

__version__ = "0.1.0"
