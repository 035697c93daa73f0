from __future__ import annotations

from kivy.app import App
from kivy.properties import StringProperty
from kivy.uix.screenmanager import Screen

from kivymd.uix.list import OneLineListItem

from yommy.models import RawShareInput
from yommy.services.url_finder import extract_urls


class InboxScreen(Screen):
    empty_text = StringProperty("Nothing shared yet")

    def show_urls(self, urls: list[str]) -> None:
        box = self.ids.url_list
        box.clear_widgets()
        for u in urls:
            box.add_widget(OneLineListItem(text=u))
        self.empty_text = "" if urls else "Nothing shared yet"

    def on_refresh(self) -> None:
        App.get_running_app().poll_shared()


class PasteScreen(Screen):
    def on_add(self) -> None:
        app = App.get_running_app()
        text = self.ids.paste_text.text or ""
        urls = extract_urls(text)
        if not urls:
            app.show_error("No link", "No http(s) link found in the pasted text.")
            return
        for u in urls:
            app.intake.share(RawShareInput.url(u))
        self.ids.paste_text.text = ""
        app.root.current = "inbox"
        app.poll_shared()
