"""
Demo profile: simulated signup/login and the one local JSON record that
seeds the desk's trade-size fields. No real accounts, no password storage.
"""

from __future__ import annotations
import json
import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from alphafx.notifications import Notifier
from alphafx.utils.formatting import parse_amount

logger = logging.getLogger("alphafx.profile")

SUPPORTED_CURRENCIES = {
    "USD": "US Dollar",
    "INR": "Indian Rupee",
    "AED": "UAE Dirham",
    "GBP": "British Pound",
    "EUR": "Euro",
    "JPY": "Japanese Yen",
}

FALLBACK_TRADE_AMOUNT = 1000.0
FALLBACK_MIN_TRADE_AMOUNT = 100.0


@dataclass
class DemoProfile:
    name: str
    email: str
    base_currency: str
    basic_trade_amount: float

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "email": self.email,
            "baseCurrency": self.base_currency,
            "basicTradeAmount": self.basic_trade_amount,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "DemoProfile":
        return cls(
            name=str(data.get("name", "")),
            email=str(data.get("email", "")),
            base_currency=str(data.get("baseCurrency", "")).upper(),
            basic_trade_amount=parse_amount(data.get("basicTradeAmount", "")),
        )


@dataclass
class SignupForm:
    name: str = ""
    email: str = ""
    password: str = ""
    user_type: str = "individual"  # "individual" | "organization"
    organization_name: str = ""
    base_currency: str = ""
    basic_trade_amount: str = "100"


@dataclass
class AuthResult:
    success: bool
    profile: Optional[DemoProfile] = None
    message: str = ""


def validate_signup(form: SignupForm) -> Optional[str]:
    """First validation error for the form, or None."""
    if not form.name.strip() or not form.email.strip() or not form.password:
        return "Please fill in name, email and password"
    if form.user_type == "organization" and not form.organization_name.strip():
        return "Please enter your organization name"
    if not form.base_currency:
        return "Please select a base currency"
    if form.base_currency.upper() not in SUPPORTED_CURRENCIES:
        return f"Unsupported base currency: {form.base_currency}"
    amount = parse_amount(form.basic_trade_amount)
    if not math.isfinite(amount) or amount <= 0:
        return "Please enter a valid basic trade amount"
    return None


def save_profile(profile: DemoProfile, path: Path) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(profile.to_dict(), f, indent=2)


def load_profile(path: Path) -> Optional[DemoProfile]:
    """Stored profile, or None when missing or unreadable (logged)."""
    path = Path(path)
    if not path.exists():
        return None
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Failed to read demo profile %s: %s", path, e)
        return None
    if not isinstance(data, dict):
        logger.warning("Demo profile %s is not an object, ignoring", path)
        return None
    profile = DemoProfile.from_dict(data)
    if not math.isfinite(profile.basic_trade_amount):
        logger.warning("Demo profile %s has an unusable basicTradeAmount %r, ignoring", path, data.get("basicTradeAmount"))
        return None
    return profile


def signup(form: SignupForm, path: Path, notifier: Optional[Notifier] = None) -> AuthResult:
    """Validate, store the demo profile and announce the account."""
    notifier = notifier or Notifier()
    error = validate_signup(form)
    if error:
        notifier.error(error)
        return AuthResult(success=False, message=error)
    profile = DemoProfile(
        name=form.name.strip(),
        email=form.email.strip(),
        base_currency=form.base_currency.upper(),
        basic_trade_amount=parse_amount(form.basic_trade_amount),
    )
    save_profile(profile, path)
    notifier.notify(
        "Account Created",
        f"Welcome to AlphaFxTrader! Your account has been created with {profile.base_currency} "
        f"as base currency. Basic trade amount: {profile.basic_trade_amount:g}",
    )
    return AuthResult(success=True, profile=profile)


def login(email: str, password: str, notifier: Optional[Notifier] = None) -> AuthResult:
    """Simulated login: any non-empty credentials succeed."""
    notifier = notifier or Notifier()
    if not email.strip() or not password:
        message = "Please enter your email and password"
        notifier.error(message)
        return AuthResult(success=False, message=message)
    notifier.notify("Login Successful", "Welcome to AlphaFxTrader!")
    return AuthResult(success=True)


def trade_defaults(
    profile: Optional[DemoProfile],
    default_amount: float = FALLBACK_TRADE_AMOUNT,
    default_minimum: float = FALLBACK_MIN_TRADE_AMOUNT,
) -> tuple[float, float]:
    """(trade amount, minimum trade amount) seeded from the profile's basic amount when usable."""
    if profile is not None:
        amount = profile.basic_trade_amount
        if math.isfinite(amount) and amount > 0:
            return amount, amount
    return default_amount, default_minimum
