"""Startup errors that keep the bridge from activating."""
from __future__ import annotations

from collections.abc import Iterable

ENV_NAMES = {
    "zone_id": "ARMOURY_CF_ZONE_ID",
    "api_token": "ARMOURY_CF_API_TOKEN",
}


class PurgeBridgeError(Exception):
    """Base error."""

    notice: str = "purge-bridge is not active."


class DependencyMissingError(PurgeBridgeError):
    notice = (
        "purge-bridge requires the origin cache purge event source "
        "to be installed and active."
    )

    def __init__(self):
        super().__init__(self.notice)


class ConfigMissingError(PurgeBridgeError):
    def __init__(self, missing: Iterable[str]):
        self.missing = list(missing)
        self.notice = (
            f"Please set {ENV_NAMES['zone_id']} and {ENV_NAMES['api_token']} "
            f"(missing: {', '.join(ENV_NAMES.get(m, m) for m in self.missing)})"
        )
        super().__init__(self.notice)
