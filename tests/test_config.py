"""Tests for configuration and platform helpers."""

from pathlib import Path

from yommy.app_state import AppState
from yommy.config import DEFAULT_APP_GROUP, ShareConfig, is_android, private_dir
from yommy.platform import android as android_platform
from yommy.platform.android import intent_from_java, on_kivy_thread


def test_defaults():
    cfg = ShareConfig.from_env({})
    assert cfg.app_group_id == DEFAULT_APP_GROUP
    assert cfg.shared_key == "SharedURLs"
    assert cfg.channel_name == "com.example.yommy/share"
    assert cfg.shared_dir is None


def test_env_overrides(tmp_path):
    env = {
        "YOMMY_APP_GROUP": "group.test",
        "YOMMY_SHARED_KEY": "Pending",
        "YOMMY_CHANNEL": "test/share",
        "YOMMY_SHARED_DIR": str(tmp_path),
    }
    cfg = ShareConfig.from_env(env)
    assert cfg.app_group_id == "group.test"
    assert cfg.shared_key == "Pending"
    assert cfg.channel_name == "test/share"
    assert cfg.namespace_file() == tmp_path / "group.test.json"


def test_android_private_dir():
    env = {"ANDROID_PRIVATE": "/data/user/0/org.yommy/files"}
    assert is_android(env)
    assert private_dir(env) == Path("/data/user/0/org.yommy/files")
    assert ShareConfig().namespace_dir(env) == Path(
        "/data/user/0/org.yommy/files/shared/group.com.example.yommy"
    )


def test_desktop_private_dir():
    assert not is_android({})
    assert private_dir({}) == Path.home() / ".yommy"


class _FakeIntent:
    def __init__(self, action, mime=None, extras=None, data=None):
        self._action = action
        self._mime = mime
        self._extras = extras or {}
        self._data = data

    def getAction(self):
        return self._action

    def getType(self):
        return self._mime

    def getStringExtra(self, key):
        return self._extras.get(key)

    def getDataString(self):
        return self._data


def test_intent_from_java_copies_fields():
    intent = _FakeIntent(
        "android.intent.action.SEND",
        mime="text/plain",
        extras={"android.intent.extra.TEXT": "see https://a.example"},
    )
    share = intent_from_java(intent)
    assert share.action == "android.intent.action.SEND"
    assert share.mime_type == "text/plain"
    assert share.text == "see https://a.example"
    assert share.data is None
    assert intent_from_java(None) is None


def test_app_state_receive_returns_new_only():
    state = AppState()
    assert state.receive(["A", "B"]) == ["A", "B"]
    assert state.receive(["B", "C"]) == ["C"]
    assert state.received_urls == ["A", "B", "C"]
    assert state.last_polled_at is not None


class _RecordingClock:
    def __init__(self):
        self.scheduled = []

    def schedule_once(self, fn, timeout=0):
        self.scheduled.append(fn)

    def tick(self):
        pending, self.scheduled = self.scheduled, []
        for fn in pending:
            fn(0)


def test_new_intent_is_handled_on_next_clock_tick(monkeypatch):
    clock = _RecordingClock()
    monkeypatch.setattr(android_platform, "Clock", clock)
    seen = []

    handler = on_kivy_thread(seen.append)
    handler(_FakeIntent("android.intent.action.VIEW", data="https://a.example"))

    # nothing touches the store until the Kivy thread runs the callback
    assert seen == []
    clock.tick()
    assert len(seen) == 1
    assert seen[0].action == "android.intent.action.VIEW"
    assert seen[0].data == "https://a.example"
