"""PayPal REST API client.

Builds requests, keeps the OAuth2 bearer token fresh, applies default
headers and turns non-2xx responses into ErrorResponse.
"""

from __future__ import annotations

import base64
import json
import logging
from datetime import timedelta
from functools import lru_cache
from typing import Any, TextIO

import httpx
from pydantic import BaseModel, TypeAdapter

from unipay.auth import TokenGuard
from unipay.config import PayPalSettings
from unipay.errors import ErrorResponse
from unipay.models.auth import TokenResponse, TokenStatus

logger = logging.getLogger(__name__)


TOKEN_PATH = "/v1/oauth2/token"
IDENTITY_TOKEN_PATH = "/v1/identity/openidconnect/tokenservice"

# Idempotency header understood by the PayPal REST API
REQUEST_ID_HEADER = "PayPal-Request-Id"

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


@lru_cache(maxsize=256)
def _adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def _jsonable(payload: Any) -> Any:
    """Convert pydantic models (possibly nested in lists/dicts) into JSON-ready data."""
    if isinstance(payload, BaseModel):
        return payload.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(payload, (list, tuple)):
        return [_jsonable(item) for item in payload]
    if isinstance(payload, dict):
        return {key: _jsonable(value) for key, value in payload.items()}
    return payload


def _dump_response(response: httpx.Response) -> str:
    lines = [f"{response.http_version} {response.status_code} {response.reason_phrase}"]
    lines.extend(f"{name}: {value}" for name, value in response.headers.items())
    return "\n".join(lines) + "\n\n" + response.text


class PayPalClient:
    """HTTP client for the PayPal REST API with automatic token handling.

    One instance per credential set. Safe to share between threads: the
    token refresh is serialized by the client's TokenGuard while the
    request/response exchanges run in parallel.
    """

    def __init__(
        self,
        settings: PayPalSettings,
        *,
        http: httpx.Client | None = None,
        log_sink: TextIO | None = None,
        guard: TokenGuard | None = None,
    ) -> None:
        settings.require_credentials()

        self._settings = settings
        self._owns_http = http is None
        self._http = http or httpx.Client(timeout=settings.timeout)
        self._log_sink = log_sink
        self._owns_log_sink = False
        if log_sink is None and settings.log_file:
            self._log_sink = open(settings.log_file, "a", encoding="utf-8")
            self._owns_log_sink = True
        self._guard = guard or TokenGuard(threshold=timedelta(seconds=settings.refresh_threshold))
        self._return_representation = False

        logger.info("Initialized PayPal client for %s", settings.api_base)

    @property
    def settings(self) -> PayPalSettings:
        return self._settings

    @property
    def api_base(self) -> str:
        return self._settings.api_base.rstrip("/")

    @property
    def token_guard(self) -> TokenGuard:
        return self._guard

    # ── Request building ─────────────────────────────────────────────

    def new_request(
        self,
        method: str,
        url: str,
        payload: Any = None,
        *,
        params: dict[str, Any] | None = None,
        form: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Request:
        """Build an unauthenticated request.

        Args:
            method: HTTP method.
            url: Absolute URL, or a path appended to the API base.
            payload: JSON body; pydantic models are dumped by alias without None
                fields. Bytes are sent as they are.
            params: Query parameters. None values are dropped.
            form: Form fields, sent as application/x-www-form-urlencoded.
            headers: Extra headers such as the idempotency key.
        """
        if not url.startswith(("http://", "https://")):
            url = f"{self.api_base}/{url.lstrip('/')}"

        content = None
        if isinstance(payload, bytes):
            content = payload
        elif payload is not None:
            content = json.dumps(_jsonable(payload)).encode()

        query = None
        if params:
            query = {k: v for k, v in params.items() if v is not None}

        return self._http.build_request(
            method.upper(),
            url,
            content=content,
            data=form,
            params=query or None,
            headers=headers,
        )

    # ── Dispatch ─────────────────────────────────────────────────────

    def send_with_auth(self, request: httpx.Request, into: Any = None) -> Any:
        """Send with an OAuth2 bearer token, refreshing it first when near expiry.

        The token check runs under the guard's lock; the exchange itself does not.
        """
        token = self._guard.fresh_token(
            self._request_token,
            acquire_if_missing=self._settings.acquire_on_first_use,
        )
        if token:
            request.headers["Authorization"] = f"Bearer {token}"
        return self.send(request, into)

    def send_with_basic_auth(self, request: httpx.Request, into: Any = None) -> Any:
        """Send authenticated with the client ID and secret (token grants only)."""
        credentials = f"{self._settings.client_id}:{self._settings.client_secret}"
        encoded = base64.b64encode(credentials.encode()).decode()
        request.headers["Authorization"] = f"Basic {encoded}"
        return self.send(request, into)

    def send(self, request: httpx.Request, into: Any = None) -> Any:
        """Execute a request and decode the response.

        Args:
            request: The request to send. Default headers are added in place.
            into: None to skip decoding, a writable binary sink to receive the
                raw body, or a type (pydantic model, ``list[Model]``, ...) to
                decode the JSON body into.

        Returns:
            The decoded value, or None.

        Raises:
            ErrorResponse: For any status outside 200-299.
            httpx.HTTPError: For transport failures, unwrapped.
            pydantic.ValidationError: If the body does not fit ``into``.
        """
        request.headers["Accept"] = "application/json"
        request.headers["Accept-Language"] = "en_US"
        if "Content-Type" not in request.headers:
            request.headers["Content-Type"] = "application/json"
        if self._return_representation:
            request.headers["Prefer"] = "return=representation"

        logger.debug("%s %s", request.method, request.url)

        try:
            response = self._http.send(request, stream=True)
        except httpx.HTTPError:
            self._log_exchange(request, None)
            raise

        try:
            response.read()
            self._log_exchange(request, response)

            if not 200 <= response.status_code <= 299:
                raise ErrorResponse.from_response(response)

            return self._decode(response, into)
        finally:
            response.close()

    def _decode(self, response: httpx.Response, into: Any) -> Any:
        if into is None:
            return None
        if not isinstance(into, type) and hasattr(into, "write"):
            into.write(response.content)
            return None
        if not response.content:
            return None
        return _adapter(into).validate_json(response.content)

    def _log_exchange(self, request: httpx.Request, response: httpx.Response | None) -> None:
        """Write the request line and response dump to the log sink, if any."""
        if self._log_sink is None:
            return

        data = ""
        if request.headers.get("Content-Type", "").startswith(FORM_CONTENT_TYPE):
            data = request.content.decode(errors="replace")
        request_dump = f"{request.method} {request.url}. Data: {data}"
        response_dump = _dump_response(response) if response is not None else ""

        try:
            self._log_sink.write(f"Request: {request_dump}\nResponse: {response_dump}\n")
            self._log_sink.flush()
        except (OSError, ValueError) as e:
            logger.debug("Could not write to log sink: %s", e)

    # ── Convenience ──────────────────────────────────────────────────

    def call(
        self,
        method: str,
        path: str,
        payload: Any = None,
        *,
        into: Any = None,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Build and send a bearer-authenticated request in one step."""
        request = self.new_request(method, path, payload, params=params, headers=headers)
        return self.send_with_auth(request, into)

    def get(self, path: str, **kwargs: Any) -> Any:
        """Convenience method for GET requests."""
        return self.call("GET", path, **kwargs)

    def post(self, path: str, payload: Any = None, **kwargs: Any) -> Any:
        """Convenience method for POST requests."""
        return self.call("POST", path, payload, **kwargs)

    def put(self, path: str, payload: Any = None, **kwargs: Any) -> Any:
        """Convenience method for PUT requests."""
        return self.call("PUT", path, payload, **kwargs)

    def patch(self, path: str, payload: Any = None, **kwargs: Any) -> Any:
        """Convenience method for PATCH requests."""
        return self.call("PATCH", path, payload, **kwargs)

    def delete(self, path: str, **kwargs: Any) -> Any:
        """Convenience method for DELETE requests."""
        return self.call("DELETE", path, **kwargs)

    def set_return_representation(self) -> None:
        """Ask for full resource representations on every response (Prefer header)."""
        self._return_representation = True

    # ── Tokens ───────────────────────────────────────────────────────

    def get_access_token(self) -> TokenResponse:
        """Acquire a client-credentials token and make it the client's token.

        Endpoint: POST /v1/oauth2/token
        """
        return self._guard.refresh(self._request_token)

    def grant_token_from_auth_code(self, code: str, redirect_uri: str) -> TokenResponse:
        """Exchange an authorization code for a user token.

        The client's own token is not replaced.
        Endpoint: POST /v1/identity/openidconnect/tokenservice
        """
        request = self.new_request(
            "POST",
            IDENTITY_TOKEN_PATH,
            form={
                "grant_type": "authorization_code",
                "code": code,
                "redirect_uri": redirect_uri,
            },
        )
        return self.send_with_basic_auth(request, TokenResponse) or TokenResponse()

    def grant_token_from_refresh_token(self, refresh_token: str) -> TokenResponse:
        """Exchange a user refresh token for a new access token.

        The client's own token is not replaced.
        Endpoint: POST /v1/identity/openidconnect/tokenservice
        """
        request = self.new_request(
            "POST",
            IDENTITY_TOKEN_PATH,
            {"grant_type": "refresh_token", "refresh_token": refresh_token},
        )
        return self.send_with_auth(request, TokenResponse) or TokenResponse()

    def token_status(self) -> TokenStatus:
        return self._guard.status()

    def _request_token(self) -> TokenResponse:
        request = self.new_request(
            "POST", TOKEN_PATH, form={"grant_type": "client_credentials"}
        )
        return self.send_with_basic_auth(request, TokenResponse) or TokenResponse()

    # ── Lifecycle ────────────────────────────────────────────────────

    def close(self) -> None:
        """Close the HTTP client and log file this instance opened."""
        if self._owns_http:
            self._http.close()
        if self._owns_log_sink and self._log_sink is not None:
            self._log_sink.close()

    def __enter__(self) -> PayPalClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
