"""Session registry: one client per credential fingerprint."""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from typing import Callable

from unipay.client import PayPalClient
from unipay.config import PayPalSettings

logger = logging.getLogger(__name__)


class SessionRegistry:
    """Bounded LRU of clients keyed by PayPalSettings.fingerprint().

    Entries evicted to respect ``maxsize`` are closed. Pass a private
    instance wherever isolation matters (tests, credential rotation).
    """

    def __init__(self, maxsize: int = 32) -> None:
        if maxsize < 1:
            raise ValueError("maxsize must be at least 1")
        self._maxsize = maxsize
        self._lock = threading.Lock()
        self._clients: OrderedDict[str, PayPalClient] = OrderedDict()

    def get_or_create(
        self,
        settings: PayPalSettings,
        build: Callable[[PayPalSettings], PayPalClient],
    ) -> PayPalClient:
        """Return the client for these credentials, building it on first use."""
        key = settings.fingerprint()
        with self._lock:
            client = self._clients.get(key)
            if client is not None:
                self._clients.move_to_end(key)
                return client

            client = build(settings)
            self._clients[key] = client
            logger.info("Registered PayPal session %s", key[:12])

            while len(self._clients) > self._maxsize:
                old_key, old_client = self._clients.popitem(last=False)
                logger.info("Evicting PayPal session %s", old_key[:12])
                old_client.close()

            return client

    def evict(self, settings: PayPalSettings) -> bool:
        """Drop and close the client for these credentials. Returns True if one existed."""
        with self._lock:
            client = self._clients.pop(settings.fingerprint(), None)
        if client is None:
            return False
        client.close()
        return True

    def clear(self) -> int:
        """Close and drop every client."""
        with self._lock:
            clients = list(self._clients.values())
            self._clients.clear()
        for client in clients:
            client.close()
        return len(clients)

    def __len__(self) -> int:
        return len(self._clients)

    def __contains__(self, settings: object) -> bool:
        if not isinstance(settings, PayPalSettings):
            return False
        return settings.fingerprint() in self._clients


default_registry = SessionRegistry()
