"""Demo profile: simulated signup/login and local profile storage."""

from alphafx.profile.store import (
    AuthResult,
    DemoProfile,
    SignupForm,
    SUPPORTED_CURRENCIES,
    load_profile,
    login,
    save_profile,
    signup,
    trade_defaults,
)

__all__ = [
    "AuthResult",
    "DemoProfile",
    "SignupForm",
    "SUPPORTED_CURRENCIES",
    "load_profile",
    "login",
    "save_profile",
    "signup",
    "trade_defaults",
]
