from __future__ import annotations

import os
import sys
import signal
import traceback
from datetime import datetime
import faulthandler

from yommy.config import ShareConfig, is_android, private_dir


def _write_crash_log(text: str) -> str | None:
    try:
        base = private_dir() / "crash_logs"
        base.mkdir(parents=True, exist_ok=True)
        p = base / f"yommy_crash_{datetime.now().strftime('%Y%m%d_%H%M%S')}.txt"
        p.write_text(text, encoding="utf-8")
        return str(p)
    except Exception:  # noqa: BLE001
        return None


def _setup_faulthandler() -> None:
    try:
        base = private_dir() / "crash_logs"
        base.mkdir(parents=True, exist_ok=True)
        f = open(base / "yommy_faulthandler.txt", "a", encoding="utf-8")
        f.write(f"\n=== START {datetime.now().isoformat()} ===\n")
        f.flush()
        faulthandler.enable(file=f, all_threads=True)
        for name in ("SIGABRT", "SIGILL", "SIGFPE", "SIGSEGV", "SIGBUS"):
            sig = getattr(signal, name, None)
            if sig is None:
                continue
            try:
                faulthandler.register(sig, file=f, all_threads=True)
            except Exception:  # noqa: BLE001
                pass
    except Exception:  # noqa: BLE001
        pass


def _excepthook(exc_type, exc, tb):
    _write_crash_log("".join(traceback.format_exception(exc_type, exc, tb)))
    sys.__excepthook__(exc_type, exc, tb)


sys.excepthook = _excepthook
_setup_faulthandler()

from kivy.lang import Builder
from kivy.clock import Clock
from kivy.logger import Logger
from kivy.properties import StringProperty
from kivy.uix.label import Label
from kivy.uix.screenmanager import Screen
from kivy.uix.screenmanager import ScreenManager

from kivymd.app import MDApp
from kivymd.uix.dialog import MDDialog
from kivymd.uix.button import MDFlatButton

from yommy.app_state import AppState
from yommy.models import RelayMethod
from yommy.services.intake import ShareIntake
from yommy.services.relay import ShareRelay
from yommy.services.storage import PendingStore
from yommy.ui import screens as _screens  # noqa: F401


class Root(ScreenManager):
    status_text = StringProperty("")


class YommyApp(MDApp):
    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.config_share = ShareConfig.from_env()
        self.state = AppState()
        self.store = PendingStore.from_config(self.config_share)
        self.intake = ShareIntake(self.store)
        self.intake.bind(on_shared=lambda *_: Clock.schedule_once(lambda *_: self.poll_shared(), 0))
        self.relay = ShareRelay(self.store, channel_name=self.config_share.channel_name)
        self._dialog: MDDialog | None = None

    def build(self):
        self.theme_cls.primary_palette = "Orange"
        self.theme_cls.theme_style = "Light"

        try:
            kv_path = os.path.join(os.path.dirname(__file__), "yommy", "ui", "yommy.kv")
            Builder.load_file(kv_path)
            return Root()
        except Exception:  # noqa: BLE001
            err = traceback.format_exc()
            _write_crash_log(err)
            Logger.error(f"Yommy: failed to build UI\n{err}")
            root = Root()
            scr = Screen(name="error")
            scr.add_widget(Label(text=err))
            root.add_widget(scr)
            root.current = "error"
            return root

    def on_start(self):
        if is_android():
            from yommy.platform import android

            self.intake.handle_intent(android.current_intent())
            android.bind_new_intent(self._on_new_intent)
        Clock.schedule_once(lambda *_: self.poll_shared(), 0)

    def on_resume(self):
        Clock.schedule_once(lambda *_: self.poll_shared(), 0)

    def _on_new_intent(self, intent):
        self.intake.handle_intent(intent)

    def poll_shared(self) -> None:
        result = self.relay.handle(RelayMethod.GET_SHARED_URLS)
        urls = list(result.value or [])
        if urls:
            added = self.state.receive(urls)
            self.relay.handle(RelayMethod.CLEAR_SHARED_URLS)
            Logger.info(f"Yommy: received {len(added)} new shared link(s)")
        if not self.root:
            return
        self.root.status_text = f"Last checked {datetime.now().strftime('%H:%M:%S')}"
        inbox = self.root.get_screen("inbox") if self.root.has_screen("inbox") else None
        if inbox is not None:
            inbox.show_urls(self.state.received_urls)

    def show_error(self, title: str, text: str):
        if self._dialog:
            self._dialog.dismiss()
            self._dialog = None

        self._dialog = MDDialog(
            title=title,
            text=text,
            buttons=[MDFlatButton(text="OK", on_release=lambda *_: self._dialog.dismiss())],
        )
        self._dialog.open()


if __name__ == "__main__":
    try:
        YommyApp().run()
    except Exception:  # noqa: BLE001
        _write_crash_log(traceback.format_exc())
        raise
