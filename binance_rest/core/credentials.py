"""API credential containers and slot resolution."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeAlias

from .config import DEFAULT_API_KEY_NAME, DEFAULT_API_SECRET_NAME, Settings
from .errors import ConfigMissingError


@dataclass(frozen=True, slots=True)
class Credentials:
    """API key and secret used to sign one request."""

    api_key: str
    api_secret: str = field(repr=False)

    def __post_init__(self) -> None:
        if not self.api_key:
            raise ConfigMissingError("api_key", "API key missing")
        if not self.api_secret:
            raise ConfigMissingError("api_secret", "Secret key missing")


@dataclass(frozen=True, slots=True)
class DefaultSlot:
    """Use the default ``BINANCE_API_KEY`` / ``BINANCE_API_SECRET`` settings."""


@dataclass(frozen=True, slots=True)
class NamedSlot:
    """Use an alternate pair of setting names, e.g. for a second account."""

    key_name: str
    secret_name: str


CredentialSlot: TypeAlias = DefaultSlot | NamedSlot

DEFAULT_SLOT = DefaultSlot()


def resolve_credentials(settings: Settings, slot: CredentialSlot = DEFAULT_SLOT) -> Credentials:
    """Read the key/secret pair selected by ``slot`` from ``settings``.

    Raises :class:`ConfigMissingError` naming the missing half; empty values
    count as missing.
    """

    if isinstance(slot, DefaultSlot):
        key_name, secret_name = DEFAULT_API_KEY_NAME, DEFAULT_API_SECRET_NAME
    elif isinstance(slot, NamedSlot):
        key_name, secret_name = slot.key_name, slot.secret_name
    else:
        raise TypeError(f"Unsupported credential slot: {slot!r}")

    api_key = settings.get(key_name)
    if not api_key:
        raise ConfigMissingError("api_key", f"API key missing ({key_name} is not set)")
    api_secret = settings.get(secret_name)
    if not api_secret:
        raise ConfigMissingError("api_secret", f"Secret key missing ({secret_name} is not set)")
    return Credentials(api_key=api_key, api_secret=api_secret)
