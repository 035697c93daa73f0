from __future__ import annotations

from typing import Any, Callable

from kivy.logger import Logger

from yommy.models import NOT_IMPLEMENTED, RelayMethod, RelayResult
from yommy.services.storage import PendingStore


class ShareRelay:
    """Request/response surface the main app polls for pending shares.

    ``getSharedURLs`` peeks and leaves the queue alone; the caller must send
    ``clearSharedURLs`` once it has consumed the list. ``getSharedUrl``
    drains the oldest entry, which is lost if the caller dies before using it.
    """

    def __init__(self, store: PendingStore, channel_name: str = "com.example.yommy/share"):
        self.store = store
        self.channel_name = channel_name
        self._handlers: dict[RelayMethod, Callable[[], Any]] = {
            RelayMethod.GET_SHARED_URL: self.get_shared_url,
            RelayMethod.GET_SHARED_URLS: self.get_shared_urls,
            RelayMethod.CLEAR_SHARED_URLS: self.clear_shared_urls,
        }

    def get_shared_url(self) -> str | None:
        return self.store.pop_first()

    def get_shared_urls(self) -> list[str]:
        return self.store.read_all()

    def clear_shared_urls(self) -> None:
        self.store.clear()

    def handle(self, name: str | RelayMethod | None) -> RelayResult:
        method = name if isinstance(name, RelayMethod) else RelayMethod.parse(name)
        if method is None:
            Logger.debug(f"Relay: {self.channel_name} has no method {name!r}")
            return NOT_IMPLEMENTED
        return RelayResult(method=method, value=self._handlers[method]())
