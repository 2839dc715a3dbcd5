"""Configuration values consumed by the credential resolver."""

from __future__ import annotations

import os
from collections.abc import Iterator, Mapping
from pathlib import Path

from dotenv import dotenv_values

DEFAULT_API_KEY_NAME = "BINANCE_API_KEY"
DEFAULT_API_SECRET_NAME = "BINANCE_API_SECRET"


class Settings(Mapping[str, str]):
    """Read-only snapshot of configuration values keyed by name.

    Built once at startup and shared by every client; lookups never touch the
    environment again, so swapping slots per call only reads this snapshot.
    """

    def __init__(self, values: Mapping[str, str | None] | None = None) -> None:
        self._values = {key: value for key, value in (values or {}).items() if value is not None}

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        dotenv_path: str | Path | None = None,
    ) -> Settings:
        """Load values from an optional ``.env`` file overlaid by the environment."""

        values: dict[str, str | None] = {}
        if dotenv_path is not None:
            values.update(dotenv_values(dotenv_path))
        values.update(os.environ if environ is None else environ)
        return cls(values)

    def __getitem__(self, name: str) -> str:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Settings(keys={sorted(self._values)!r})"
