from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ShareKind(str, Enum):
    URL = "url"
    TEXT = "text"


@dataclass(frozen=True)
class RawShareInput:
    kind: ShareKind
    value: str

    @classmethod
    def url(cls, value: str) -> RawShareInput:
        return cls(kind=ShareKind.URL, value=value)

    @classmethod
    def text(cls, value: str) -> RawShareInput:
        return cls(kind=ShareKind.TEXT, value=value)


class IntentAction(str, Enum):
    SEND = "android.intent.action.SEND"
    VIEW = "android.intent.action.VIEW"


PLAIN_TEXT_MIME = "text/plain"


@dataclass(frozen=True)
class ShareIntent:
    """A share notification as delivered by the OS dispatcher."""

    action: str | None
    mime_type: str | None = None
    text: str | None = None
    data: str | None = None


TYPE_URL = "public.url"
TYPE_PLAIN_TEXT = "public.plain-text"


@dataclass(frozen=True)
class ShareAttachment:
    type_identifier: str
    payload: Any = None


class RelayMethod(str, Enum):
    GET_SHARED_URL = "getSharedUrl"
    GET_SHARED_URLS = "getSharedURLs"
    CLEAR_SHARED_URLS = "clearSharedURLs"

    @classmethod
    def parse(cls, name: str | None) -> RelayMethod | None:
        for m in cls:
            if m.value == name:
                return m
        return None


@dataclass(frozen=True)
class RelayResult:
    method: RelayMethod | None
    value: Any = None
    implemented: bool = True


NOT_IMPLEMENTED = RelayResult(method=None, value=None, implemented=False)
