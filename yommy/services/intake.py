from __future__ import annotations

import re
from typing import Iterable
from urllib.parse import urlsplit

from kivy.event import EventDispatcher
from kivy.logger import Logger

from yommy.models import (
    PLAIN_TEXT_MIME,
    TYPE_PLAIN_TEXT,
    TYPE_URL,
    IntentAction,
    RawShareInput,
    ShareAttachment,
    ShareIntent,
)
from yommy.services.storage import PendingStore
from yommy.services.url_finder import extract


_WS_RE = re.compile(r"\s")


def _is_bare_url(text: str) -> bool:
    if not text or _WS_RE.search(text):
        return False
    try:
        return bool(urlsplit(text).scheme)
    except ValueError:
        return False


class ShareIntake(EventDispatcher):
    """Turns incoming share actions into queued URLs.

    Fires ``on_shared(url)`` after a URL has been handed to the store, which
    is where the share surface brings the main app forward.
    """

    __events__ = ("on_shared",)

    def __init__(self, store: PendingStore):
        super().__init__()
        self.store = store

    def on_shared(self, url: str) -> None:
        pass

    def share(self, raw: RawShareInput) -> str | None:
        url = extract(raw)
        if url is None:
            Logger.debug(f"Share: no URL in {raw.kind.value} input")
            return None
        if self.store.append(url):
            Logger.info(f"Share: queued {url}")
        self.dispatch("on_shared", url)
        return url

    def handle_intent(self, intent: ShareIntent | None) -> str | None:
        if intent is None:
            return None
        if intent.action == IntentAction.SEND.value:
            if intent.mime_type != PLAIN_TEXT_MIME or not intent.text:
                Logger.debug(f"Share: ignoring send of type {intent.mime_type!r}")
                return None
            return self.share(RawShareInput.text(intent.text))
        if intent.action == IntentAction.VIEW.value:
            if not intent.data:
                return None
            return self.share(RawShareInput.url(intent.data))
        Logger.debug(f"Share: ignoring action {intent.action!r}")
        return None

    def handle_attachments(self, attachments: Iterable[ShareAttachment]) -> str | None:
        for item in attachments or []:
            if item.type_identifier == TYPE_URL:
                if not isinstance(item.payload, str):
                    return None
                return self.share(RawShareInput.url(item.payload))
            if item.type_identifier == TYPE_PLAIN_TEXT:
                text = item.payload
                if not isinstance(text, str):
                    return None
                if _is_bare_url(text):
                    return self.share(RawShareInput.url(text))
                return self.share(RawShareInput.text(text))
        return None
