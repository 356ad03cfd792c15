"""Relay notifications to a Telegram chat. Never log token or chat_id."""

from __future__ import annotations
import logging
from typing import Optional

import requests

logger = logging.getLogger("alphafx.utils.telegram")

API_URL = "https://api.telegram.org/bot{token}/sendMessage"


class TelegramRelay:
    """Posts plain-text messages through the Bot API. Disabled when token or chat id is empty."""

    def __init__(self, bot_token: str = "", chat_id: str = "", timeout: float = 10.0,
                 session: Optional[requests.Session] = None):
        self._bot_token = bot_token
        self._chat_id = chat_id
        self._timeout = timeout
        self._session = session

    @property
    def enabled(self) -> bool:
        return bool(self._bot_token and self._chat_id)

    def send(self, text: str) -> bool:
        """Send message. Returns True on HTTP 200; failures are logged, never raised."""
        if not self.enabled:
            logger.debug("Telegram not configured, skipping message (len=%d)", len(text))
            return False
        post = self._session.post if self._session is not None else requests.post
        try:
            r = post(
                API_URL.format(token=self._bot_token),
                json={"chat_id": self._chat_id, "text": text},
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            logger.warning("Telegram send error: %s", type(e).__name__)
            return False
        if r.status_code != 200:
            logger.warning("Telegram send failed: %s %s", r.status_code, r.text[:200])
            return False
        return True
