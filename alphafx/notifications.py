"""
User-facing notifications (toasts). Each one is logged, kept in a bounded
history for the front end, and relayed to Telegram when configured.
"""

from __future__ import annotations
import logging
from collections import deque
from typing import Deque, List, Optional

from alphafx.core.types import Notification
from alphafx.utils.telegram import TelegramRelay

logger = logging.getLogger("alphafx.notifications")


class Notifier:
    def __init__(self, relay: Optional[TelegramRelay] = None, history_size: int = 100):
        self._relay = relay
        self._history: Deque[Notification] = deque(maxlen=history_size)

    def notify(self, title: str, description: str = "", variant: str = "default") -> Notification:
        note = Notification(title=title, description=description, variant=variant)
        self._history.append(note)
        level = logging.WARNING if variant == "destructive" else logging.INFO
        logger.log(level, "%s | %s", title, description)
        if self._relay is not None and self._relay.enabled:
            self._relay.send(f"{title}\n{description}" if description else title)
        return note

    def error(self, description: str) -> Notification:
        return self.notify("Error", description, variant="destructive")

    @property
    def history(self) -> List[Notification]:
        return list(self._history)

    @property
    def last(self) -> Optional[Notification]:
        return self._history[-1] if self._history else None

    def clear(self) -> None:
        self._history.clear()
