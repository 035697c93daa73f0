from __future__ import annotations

from typing import Any, Callable

from kivy.clock import Clock

from yommy.models import ShareIntent


EXTRA_TEXT = "android.intent.extra.TEXT"


def intent_from_java(intent: Any) -> ShareIntent | None:
    """Copy the fields the intake cares about out of an ``android.content.Intent``."""
    if intent is None:
        return None
    return ShareIntent(
        action=intent.getAction(),
        mime_type=intent.getType(),
        text=intent.getStringExtra(EXTRA_TEXT),
        data=intent.getDataString(),
    )


def current_intent() -> ShareIntent | None:
    from jnius import autoclass  # type: ignore

    PythonActivity = autoclass("org.kivy.android.PythonActivity")
    return intent_from_java(PythonActivity.mActivity.getIntent())


def on_kivy_thread(callback: Callable[[ShareIntent | None], None]) -> Callable[[Any], None]:
    """Wrap ``callback`` so a Java-thread intent is handled on the Kivy thread.

    The intent fields are read right away; only the callback is deferred.
    """

    def _on_new_intent(intent: Any) -> None:
        share = intent_from_java(intent)
        Clock.schedule_once(lambda *_: callback(share), 0)

    return _on_new_intent


def bind_new_intent(callback: Callable[[ShareIntent | None], None]) -> None:
    from android import activity  # type: ignore

    activity.bind(on_new_intent=on_kivy_thread(callback))
