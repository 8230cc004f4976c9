class StatusPageError(Exception):
    """Base exception for status page build errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict | None = None,
    ):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict:
        result = {
            "error": {
                "code": self.code,
                "message": self.message,
            }
        }
        if self.details:
            result["error"]["details"] = self.details
        return result


class InputUnavailableError(StatusPageError):
    """The uptime summary could not be read or parsed."""

    def __init__(self, message: str = "Uptime summary is unavailable.", details: dict | None = None):
        super().__init__(code="input_unavailable", message=message, details=details)


class OutputWriteError(StatusPageError):
    """The status page could not be written."""

    def __init__(self, message: str = "Failed to write status page.", details: dict | None = None):
        super().__init__(code="output_write_failed", message=message, details=details)
