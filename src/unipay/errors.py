"""Exception types raised by unipay.

ErrorResponse is the structured provider error built from any non-2xx reply.
Transport failures (httpx.HTTPError) and decode failures
(pydantic.ValidationError) are not wrapped and reach callers unchanged.
"""

from __future__ import annotations

import json
from typing import Any

import httpx
from pydantic import BaseModel, ValidationError, field_validator


class UnipayError(Exception):
    """Base class for errors raised by unipay itself."""


class ConfigurationError(UnipayError, ValueError):
    """Required configuration is missing or invalid. Not recoverable at runtime."""


class SemanticError(UnipayError, RuntimeError):
    """The HTTP exchange succeeded but its result cannot be used."""


class AgreementExecutionError(SemanticError):
    """An approved billing agreement was executed but no agreement ID came back."""


class ProfileLookupError(SemanticError):
    """A web experience profile is missing its ID."""


def _as_text(value: Any) -> str:
    return value if isinstance(value, str) else ""


class ErrorDetail(BaseModel):
    """One field-level issue reported by the provider."""
    field: str = ""
    issue: str = ""

    model_config = {"extra": "ignore"}

    @field_validator("field", "issue", mode="before")
    @classmethod
    def _text(cls, value: Any) -> str:
        return _as_text(value)


class _ErrorBody(BaseModel):
    name: str = ""
    debug_id: str = ""
    message: str = ""
    information_link: str = ""
    details: list[ErrorDetail] = []
    # OAuth endpoints answer with RFC 6749 error fields instead
    error: str = ""
    error_description: str = ""

    model_config = {"extra": "ignore"}

    @field_validator(
        "name", "debug_id", "message", "information_link", "error", "error_description",
        mode="before",
    )
    @classmethod
    def _text(cls, value: Any) -> str:
        return _as_text(value)

    @field_validator("details", mode="before")
    @classmethod
    def _usable_details(cls, value: Any) -> list[ErrorDetail]:
        # Entries that are not objects are dropped, the rest are kept in order
        if not isinstance(value, list):
            return []
        details = []
        for item in value:
            try:
                details.append(ErrorDetail.model_validate(item))
            except ValidationError:
                continue
        return details


class ErrorResponse(UnipayError):
    """Structured error for a non-2xx provider response.

    Carries the originating response for status inspection, the machine
    readable ``name``, a human ``message``, the documentation link and the
    ordered list of field-level ``details``.
    """

    def __init__(
        self,
        response: httpx.Response,
        name: str = "",
        message: str = "",
        debug_id: str = "",
        information_link: str = "",
        details: list[ErrorDetail] | None = None,
    ) -> None:
        self.response = response
        self.name = name
        self.message = message
        self.debug_id = debug_id
        self.information_link = information_link
        self.details: tuple[ErrorDetail, ...] = tuple(details or ())
        super().__init__(self._describe())

    @classmethod
    def from_response(cls, response: httpx.Response) -> ErrorResponse:
        """Build the error from a response whose body has already been read.

        Undecodable or empty bodies are tolerated. Each field is read on its
        own, so a null or mistyped field only blanks that field, and malformed
        entries in ``details`` are skipped.
        """
        body = _ErrorBody()
        try:
            data = json.loads(response.content) if response.content else None
        except ValueError:
            data = None
        if isinstance(data, dict):
            body = _ErrorBody.model_validate(data)

        return cls(
            response,
            name=body.name or body.error,
            message=body.message or body.error_description,
            debug_id=body.debug_id,
            information_link=body.information_link,
            details=body.details,
        )

    @property
    def status_code(self) -> int:
        return self.response.status_code

    def to_dict(self) -> dict[str, Any]:
        """Plain representation used by the CLI error handler."""
        return {
            "status": self.status_code,
            "name": self.name,
            "message": self.message,
            "debug_id": self.debug_id,
            "information_link": self.information_link,
            "details": [d.model_dump() for d in self.details],
        }

    def _describe(self) -> str:
        try:
            request = self.response.request
            prefix = f"{request.method} {request.url}: "
        except RuntimeError:
            prefix = ""
        details = [d.model_dump() for d in self.details]
        return f"{prefix}{self.status_code} {self.message}, {details}"
