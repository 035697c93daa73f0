from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping


DEFAULT_APP_GROUP = "group.com.example.yommy"
DEFAULT_SHARED_KEY = "SharedURLs"
DEFAULT_CHANNEL = "com.example.yommy/share"


def is_android(environ: Mapping[str, str] | None = None) -> bool:
    env = os.environ if environ is None else environ
    return bool(env.get("ANDROID_PRIVATE") or env.get("ANDROID_ARGUMENT"))


def private_dir(environ: Mapping[str, str] | None = None) -> Path:
    env = os.environ if environ is None else environ
    if is_android(env):
        p = env.get("ANDROID_PRIVATE")
        if p:
            return Path(p)
    return Path.home() / ".yommy"


@dataclass(frozen=True)
class ShareConfig:
    app_group_id: str = DEFAULT_APP_GROUP
    shared_key: str = DEFAULT_SHARED_KEY
    channel_name: str = DEFAULT_CHANNEL
    shared_dir: str | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ShareConfig:
        env = os.environ if environ is None else environ
        return cls(
            app_group_id=env.get("YOMMY_APP_GROUP") or DEFAULT_APP_GROUP,
            shared_key=env.get("YOMMY_SHARED_KEY") or DEFAULT_SHARED_KEY,
            channel_name=env.get("YOMMY_CHANNEL") or DEFAULT_CHANNEL,
            shared_dir=env.get("YOMMY_SHARED_DIR") or None,
        )

    def namespace_dir(self, environ: Mapping[str, str] | None = None) -> Path:
        """Directory holding the shared namespace file.

        Both the share surface and the main app must resolve the same path,
        so an explicit ``shared_dir`` always wins over the platform default.
        """
        if self.shared_dir:
            return Path(self.shared_dir)
        return private_dir(environ) / "shared" / self.app_group_id

    def namespace_file(self, environ: Mapping[str, str] | None = None) -> Path:
        return self.namespace_dir(environ) / f"{self.app_group_id}.json"
