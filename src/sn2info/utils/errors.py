"""Error types and structured error handling for agent-friendly output."""

from __future__ import annotations

import json
import sys

from rich.console import Console

console = Console(stderr=True)


class Sn2InfoError(RuntimeError):
    """Base class for every failure that aborts a lookup."""

    code = "RUNTIME_ERROR"


class NetworkError(Sn2InfoError):
    """The request never produced an HTTP response."""

    code = "NETWORK_ERROR"


class ApiError(Sn2InfoError):
    """The API answered with an HTTP error status."""

    code = "API_ERROR"

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class DecodeError(Sn2InfoError):
    """A response body was not JSON or did not match the expected schema."""

    code = "DECODE_ERROR"


class CredentialsError(Sn2InfoError):
    """Client credentials are missing or were rejected by the token endpoint."""

    code = "AUTH_ERROR"


class MissingSerialError(Sn2InfoError):
    code = "MISSING_SERIAL"


class ConfigError(Sn2InfoError):
    code = "CONFIG_ERROR"


# Actionable hints keyed by API status code; these win over message matching
_STATUS_HINTS: dict[int, str] = {
    401: "Token rejected: unset AUTH_TOKEN or check CLIENT_ID/CLIENT_SECRET",
    403: "Credentials are not entitled to this API; check the app's API access",
    404: "Serial number or endpoint not found; verify the serial and config/endpoints.yaml",
}

# Actionable hints keyed by error substring, first match wins
_ERROR_HINTS: list[tuple[str, str]] = [
    ("endpoints.yaml", "Check the URLs and YAML syntax in config/endpoints.yaml"),
    ("timeout", "Request timed out; try again or check network connectivity"),
    ("timed out", "Request timed out; try again or check network connectivity"),
    ("connect", "Connection error; check network connectivity and proxy settings"),
    ("cannot request", "Check the serial number for spaces or control characters"),
    ("serial number", "Pass the serial number with --serial"),
    ("client_id", "Set CLIENT_ID and CLIENT_SECRET, or AUTH_TOKEN, in the environment or .env"),
    ("401", _STATUS_HINTS[401]),
    ("403", _STATUS_HINTS[403]),
    ("token", "Token may be invalid or expired; unset AUTH_TOKEN to fetch a new one"),
    ("404", _STATUS_HINTS[404]),
    ("json", "The API returned an unexpected payload; rerun with --debug to inspect it"),
]


def _get_hint(error_message: str, status_code: int | None = None) -> str | None:
    """Match an error to an actionable hint, by status code first, then by message."""
    if status_code in _STATUS_HINTS:
        return _STATUS_HINTS[status_code]
    lower = error_message.lower()
    for pattern, hint in _ERROR_HINTS:
        if pattern.lower() in lower:
            return hint
    return None


def _get_code(error: Exception) -> str:
    """Pick an error code from the exception type, falling back to the message."""
    if isinstance(error, ApiError):
        if error.status_code in (401, 403):
            return "AUTH_ERROR"
        if error.status_code == 404:
            return "NOT_FOUND"
        return error.code
    if isinstance(error, Sn2InfoError):
        return error.code

    message = str(error).lower()
    if "timeout" in message or "timed out" in message:
        return "TIMEOUT"
    if "connect" in message:
        return "CONNECTION_ERROR"
    return "RUNTIME_ERROR"


def handle_error(error: Exception) -> None:
    """Handle an error with structured output to stdout and human-readable output to stderr.

    Outputs a JSON error object to stdout for agent consumption:
    {"error": true, "code": "DECODE_ERROR", "message": "...", "hint": "..."}

    Also prints a human-readable error to stderr.
    """
    message = str(error)
    hint = _get_hint(message, getattr(error, "status_code", None))
    code = _get_code(error)

    error_obj: dict[str, object] = {
        "error": True,
        "code": code,
        "message": message,
    }
    if hint:
        error_obj["hint"] = hint

    json.dump(error_obj, sys.stdout)
    sys.stdout.write("\n")

    console.print(f"[red]Error:[/red] {message}")
    if hint:
        console.print(f"[dim]Hint: {hint}[/dim]")
