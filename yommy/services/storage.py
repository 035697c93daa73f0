from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable, Protocol

from kivy.logger import Logger
from kivy.storage.jsonstore import JsonStore

from yommy.config import ShareConfig


class SharedNamespace(Protocol):
    def get(self, key: str) -> list[str] | None: ...

    def put(self, key: str, values: Iterable[str]) -> None: ...

    def delete(self, key: str) -> None: ...


class JsonNamespace:
    """Shared namespace kept in a single JSON file.

    The file is loaded when the namespace is opened, so callers open a fresh
    instance per operation to observe writes made by another process.
    """

    def __init__(self, path: Path):
        self.path = path
        try:
            self._store = JsonStore(str(path))
        except ValueError as e:
            # torn write or hand edit: move it aside and start empty
            aside = path.with_name(path.name + ".corrupt")
            Logger.warning(f"Storage: unreadable namespace {path} ({e}), moved to {aside.name}")
            path.replace(aside)
            self._store = JsonStore(str(path))

    def get(self, key: str) -> list[str] | None:
        if not self._store.exists(key):
            return None
        return [str(u) for u in self._store.get(key).get("urls", [])]

    def put(self, key: str, values: Iterable[str]) -> None:
        self._store.put(key, urls=list(values))

    def delete(self, key: str) -> None:
        if self._store.exists(key):
            self._store.delete(key)


class MemoryNamespace:
    def __init__(self) -> None:
        self._data: dict[str, list[str]] = {}

    def get(self, key: str) -> list[str] | None:
        values = self._data.get(key)
        return None if values is None else list(values)

    def put(self, key: str, values: Iterable[str]) -> None:
        self._data[key] = list(values)

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


def json_namespace_opener(config: ShareConfig) -> Callable[[], JsonNamespace]:
    path = config.namespace_file()

    def _open() -> JsonNamespace:
        return JsonNamespace(path)

    return _open


class PendingStore:
    """Ordered, duplicate-free list of pending shared URLs.

    ``append`` and ``pop_first`` are read-modify-write cycles without any
    lock on the namespace. Two processes sharing at the same moment can lose
    one of the updates.
    """

    def __init__(self, opener: Callable[[], SharedNamespace], key: str = "SharedURLs"):
        self._opener = opener
        self.key = key

    @classmethod
    def from_config(cls, config: ShareConfig) -> PendingStore:
        return cls(json_namespace_opener(config), key=config.shared_key)

    def _open(self) -> SharedNamespace | None:
        try:
            return self._opener()
        except Exception as e:  # noqa: BLE001
            Logger.warning(f"Storage: shared namespace unavailable ({e})")
            return None

    def append(self, url: str) -> bool:
        ns = self._open()
        if ns is None:
            return False
        try:
            urls = ns.get(self.key) or []
            if url in urls:
                return False
            urls.append(url)
            ns.put(self.key, urls)
            return True
        except Exception as e:  # noqa: BLE001
            Logger.warning(f"Storage: append failed ({e})")
            return False

    def read_all(self) -> list[str]:
        ns = self._open()
        if ns is None:
            return []
        try:
            return ns.get(self.key) or []
        except Exception as e:  # noqa: BLE001
            Logger.warning(f"Storage: read failed ({e})")
            return []

    def pop_first(self) -> str | None:
        ns = self._open()
        if ns is None:
            return None
        try:
            urls = ns.get(self.key) or []
            if not urls:
                return None
            first, rest = urls[0], urls[1:]
            if rest:
                ns.put(self.key, rest)
            else:
                ns.delete(self.key)
            return first
        except Exception as e:  # noqa: BLE001
            Logger.warning(f"Storage: drain failed ({e})")
            return None

    def clear(self) -> None:
        ns = self._open()
        if ns is None:
            return
        try:
            ns.delete(self.key)
        except Exception as e:  # noqa: BLE001
            Logger.warning(f"Storage: clear failed ({e})")
