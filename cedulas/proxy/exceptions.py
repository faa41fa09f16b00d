class ExtractorClientError(Exception):
    """Base exception for calls to the PDF extractor service."""


class ExtractorTimeoutError(ExtractorClientError):
    """Raised when the service does not answer within the timeout."""


class ExtractorNetworkError(ExtractorClientError):
    """Raised when the service cannot be reached."""


class ExtractorStatusError(ExtractorClientError):
    """Raised when the service answers with a non-success status."""

    def __init__(self, status_code: int, body: str = "") -> None:
        super().__init__(f"PDF extractor responded with status {status_code}")
        self.status_code = status_code
        self.body = body


class ExtractorResponseError(ExtractorClientError):
    """Raised when the service body is not a JSON object."""
