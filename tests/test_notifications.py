"""Unit tests for notifications and the Telegram relay."""

import requests

from alphafx.notifications import Notifier
from alphafx.utils.telegram import TelegramRelay


class FakeResponse:
    def __init__(self, status_code, text=""):
        self.status_code = status_code
        self.text = text


def test_history_is_bounded():
    notifier = Notifier(history_size=2)
    notifier.notify("a")
    notifier.notify("b")
    notifier.error("c")
    assert [n.title for n in notifier.history] == ["b", "Error"]
    assert notifier.last.description == "c"
    assert notifier.last.variant == "destructive"
    notifier.clear()
    assert notifier.last is None


def test_relay_disabled_without_credentials(monkeypatch):
    def fail(*args, **kwargs):
        raise AssertionError("should not post")

    monkeypatch.setattr(requests, "post", fail)
    relay = TelegramRelay("", "123")
    assert relay.enabled is False
    assert relay.send("hello") is False


def test_relay_posts_message(monkeypatch):
    sent = {}

    def fake_post(url, json, timeout):
        sent.update(url=url, json=json, timeout=timeout)
        return FakeResponse(200)

    monkeypatch.setattr(requests, "post", fake_post)
    assert TelegramRelay("TOKEN", "42").send("hi") is True
    assert sent["url"].endswith("/botTOKEN/sendMessage")
    assert sent["json"] == {"chat_id": "42", "text": "hi"}


def test_relay_failures_are_not_raised(monkeypatch):
    monkeypatch.setattr(requests, "post", lambda *a, **k: FakeResponse(500, "oops"))
    assert TelegramRelay("TOKEN", "42").send("hi") is False

    def raise_conn(*args, **kwargs):
        raise requests.ConnectionError("down")

    monkeypatch.setattr(requests, "post", raise_conn)
    assert TelegramRelay("TOKEN", "42").send("hi") is False


def test_notifier_relays_when_enabled(monkeypatch):
    texts = []
    monkeypatch.setattr(requests, "post", lambda url, json, timeout: texts.append(json["text"]) or FakeResponse(200))
    notifier = Notifier(TelegramRelay("TOKEN", "42"))
    notifier.notify("Trade Closed", "Trade TXN1 closed. P/L 4.89")
    assert texts == ["Trade Closed\nTrade TXN1 closed. P/L 4.89"]
