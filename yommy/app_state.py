from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable


@dataclass
class AppState:
    received_urls: list[str] = field(default_factory=list)
    last_polled_at: datetime | None = None

    def receive(self, urls: Iterable[str]) -> list[str]:
        """Record polled URLs and return the ones not seen before, in order."""
        self.last_polled_at = datetime.now()
        added: list[str] = []
        for u in urls:
            if u not in self.received_urls:
                self.received_urls.append(u)
                added.append(u)
        return added
