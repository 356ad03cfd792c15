"""Utils: display formatting, periodic ticks, Telegram relay."""

from alphafx.utils.formatting import format_money, format_rate, parse_amount, round_rate
from alphafx.utils.telegram import TelegramRelay
from alphafx.utils.timers import PeriodicTask, TickScheduler

__all__ = [
    "format_money",
    "format_rate",
    "parse_amount",
    "round_rate",
    "TelegramRelay",
    "PeriodicTask",
    "TickScheduler",
]
