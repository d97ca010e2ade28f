"""Structured error handling for CLI output."""

from __future__ import annotations

import json
import sys

import httpx
from pydantic import ValidationError
from rich.console import Console

from unipay.errors import ConfigurationError, ErrorResponse, SemanticError

console = Console(stderr=True)

_BAD_CREDENTIALS = "Credentials rejected, check PAYPAL_CLIENT_ID and PAYPAL_CLIENT_SECRET"
_BAD_REQUEST = "Request failed validation, see details for the offending fields"
_NO_PERMISSION = "The app lacks permission for this operation, check its enabled features"

# Actionable hints keyed by provider error name
_NAME_HINTS: dict[str, str] = {
    "AUTHENTICATION_FAILURE": _BAD_CREDENTIALS,
    "invalid_client": _BAD_CREDENTIALS,
    "invalid_token": "Token rejected, run `unipay auth token` to acquire a new one",
    "NOT_AUTHORIZED": _NO_PERMISSION,
    "PERMISSION_DENIED": _NO_PERMISSION,
    "VALIDATION_ERROR": _BAD_REQUEST,
    "INVALID_REQUEST": _BAD_REQUEST,
    "UNPROCESSABLE_ENTITY": "Request cannot be processed in the resource's current state",
    "RESOURCE_NOT_FOUND": "The specified resource does not exist, verify the ID",
    "DUPLICATE_REQUEST_ID": "This PayPal-Request-Id was already used with a different payload",
    "RATE_LIMIT_REACHED": "Rate limited, wait a moment and retry",
    "INTERNAL_SERVER_ERROR": "PayPal had an internal error, retry later with the same request ID",
}

_STATUS_CODES: dict[int, str] = {
    401: "AUTH_ERROR",
    403: "FORBIDDEN",
    404: "NOT_FOUND",
    422: "UNPROCESSABLE",
    429: "RATE_LIMITED",
}


def _classify(error: Exception) -> tuple[str, str | None]:
    """Map an exception to an error code and an optional hint."""
    if isinstance(error, ErrorResponse):
        if error.status_code >= 500:
            code = "PROVIDER_UNAVAILABLE"
        else:
            code = _STATUS_CODES.get(error.status_code, "PROVIDER_ERROR")
        return code, _NAME_HINTS.get(error.name)
    if isinstance(error, httpx.TimeoutException):
        return "TIMEOUT", "Request timed out, try again or check network connectivity"
    if isinstance(error, httpx.HTTPError):
        return "CONNECTION_ERROR", "Connection error, check network connectivity and the API base URL"
    if isinstance(error, ConfigurationError):
        return "CONFIG_ERROR", "Set credentials in .env or config/unipay.yaml"
    if isinstance(error, ValidationError):
        return "DECODE_ERROR", None
    if isinstance(error, SemanticError):
        return "UNUSABLE_RESULT", None
    return "RUNTIME_ERROR", None


def handle_error(error: Exception) -> None:
    """Handle an error with structured output to stdout and human-readable output to stderr.

    Outputs a JSON error object to stdout for scripts:
    {"error": true, "code": "PROVIDER_ERROR", "message": "...", "hint": "...", "provider": {...}}

    Also prints a human-readable error to stderr.
    """
    message = str(error)
    code, hint = _classify(error)

    error_obj: dict[str, object] = {
        "error": True,
        "code": code,
        "message": message,
    }
    if hint:
        error_obj["hint"] = hint
    if isinstance(error, ErrorResponse):
        error_obj["provider"] = error.to_dict()

    json.dump(error_obj, sys.stdout)
    sys.stdout.write("\n")

    # Human-readable to stderr
    console.print(f"[red]Error:[/red] {message}")
    if hint:
        console.print(f"[dim]Hint: {hint}[/dim]")
