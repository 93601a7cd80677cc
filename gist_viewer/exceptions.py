"""Fetch errors and FastAPI exception handlers."""

from fastapi import Request
from fastapi.responses import JSONResponse


class FetchError(Exception):
    """Base class for failures while fetching JSON from the GitHub API."""

    def __init__(self, url: str, message: str):
        self.url = url
        self.message = message
        super().__init__(message)


class HttpError(FetchError):
    """Raised when the API answers with a non-success status."""

    def __init__(self, status_code: int, status_text: str, url: str, body: str):
        self.status_code = status_code
        self.status_text = status_text
        self.body = body
        super().__init__(
            url,
            f"HTTP error: {status_code} - {status_text}. URL: {url}. Response: {body}",
        )


class ParseError(FetchError):
    """Raised when a success response does not hold the expected JSON."""

    def __init__(self, url: str, detail: str, summary: str = "Invalid JSON response"):
        self.detail = detail
        super().__init__(url, f"{summary} from {url}: {detail}")


class NetworkError(FetchError):
    """Raised when the request never got a response (DNS, refused, timeout)."""

    def __init__(self, url: str, detail: str):
        self.detail = detail
        super().__init__(url, f"Network error requesting {url}: {detail}")


async def fetch_error_handler(
    request: Request,
    exc: FetchError,
) -> JSONResponse:
    """Handle FetchError raised outside the controller."""
    return JSONResponse(
        status_code=502,
        content={
            "error": "github_api_error",
            "message": "Error communicating with GitHub API",
            "detail": exc.message,
        },
    )
