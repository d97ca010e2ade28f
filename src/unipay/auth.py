"""OAuth2 token state for PayPal clients.

Holds the bearer token behind a lock and decides when it must be refreshed.
"""

from __future__ import annotations

import logging
import threading
from datetime import datetime, timedelta, timezone
from typing import Callable

from unipay.models.auth import TokenResponse, TokenState, TokenStatus

logger = logging.getLogger(__name__)


# Request a new token when the held one expires within this window
REFRESH_THRESHOLD = timedelta(seconds=60)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TokenGuard:
    """Owns a client's TokenState and the lock that serializes its refresh.

    The lock covers only the check-and-maybe-refresh step. Callers receive the
    token value and perform their own network exchange after the lock is
    released, so slow business calls never queue behind each other.
    """

    def __init__(
        self,
        threshold: timedelta = REFRESH_THRESHOLD,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._threshold = threshold
        self._clock = clock
        self._lock = threading.Lock()
        self._state: TokenState | None = None

    @property
    def threshold(self) -> timedelta:
        return self._threshold

    def current(self) -> TokenState | None:
        """Snapshot of the held token, if any."""
        with self._lock:
            return self._state

    def fresh_token(
        self,
        acquire: Callable[[], TokenResponse],
        *,
        acquire_if_missing: bool = True,
    ) -> str | None:
        """Return a usable access token, acquiring a new one if needed.

        Args:
            acquire: Performs the client-credentials request. Called with the
                lock held, at most once per invocation.
            acquire_if_missing: Also acquire when no token has ever been held.
                When False and nothing is held, returns None.

        Returns:
            The token value read under the lock, or None.

        If ``acquire`` raises, the held state is left untouched (even if
        expired) and the exception propagates to the caller.
        """
        with self._lock:
            if self._state is None:
                if not acquire_if_missing:
                    return None
                self._replace(acquire(), reason="no token held")
            elif self._near_expiry(self._state):
                self._replace(acquire(), reason="token near expiry")
            return self._state.access_token if self._state else None

    def refresh(self, acquire: Callable[[], TokenResponse]) -> TokenResponse:
        """Unconditionally acquire and store a new token."""
        with self._lock:
            token = acquire()
            self._store_locked(token)
            return token

    def store(self, token: TokenResponse) -> None:
        """Replace the held token with one obtained elsewhere."""
        with self._lock:
            self._store_locked(token)

    def needs_refresh(self) -> bool:
        """True when no token is held or the held one is near expiry."""
        with self._lock:
            return self._state is None or self._near_expiry(self._state)

    def status(self) -> TokenStatus:
        """Get the current token status."""
        with self._lock:
            state = self._state
        if state is None:
            return TokenStatus(has_token=False, is_expired=True)

        now = self._clock()
        is_expired = now >= state.expires_at
        seconds_remaining = None
        if not is_expired:
            seconds_remaining = int((state.expires_at - now).total_seconds())

        return TokenStatus(
            has_token=True,
            is_expired=is_expired,
            expires_at=state.expires_at,
            seconds_remaining=seconds_remaining,
        )

    def _near_expiry(self, state: TokenState) -> bool:
        return state.expires_at - self._clock() < self._threshold

    def _replace(self, token: TokenResponse, reason: str) -> None:
        logger.info("Acquired new access token (%s)", reason)
        self._store_locked(token)

    def _store_locked(self, token: TokenResponse) -> None:
        # An empty token is never stored, matching a failed grant
        if not token.access_token:
            logger.warning("Token endpoint returned no access_token; keeping previous token")
            return
        self._state = TokenState.from_response(token, self._clock())
