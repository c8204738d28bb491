from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict

DEFAULT_API_BASE = "https://api.cloudflare.com/client/v4"
DEFAULT_TIMEOUT = 30.0


class PurgeEvent(BaseModel):
    """Origin cache purge notification."""

    success: bool

    model_config = ConfigDict(frozen=True)


class PurgeConfig(BaseModel):
    zone_id: str = ""
    api_token: str = ""
    api_base: str = DEFAULT_API_BASE
    timeout: float = DEFAULT_TIMEOUT

    # dump raw responses on failure
    verbose: bool = False

    model_config = ConfigDict(frozen=True)

    @property
    def missing(self) -> list[str]:
        """Names of required fields that are empty."""
        return [
            name
            for name in ("zone_id", "api_token")
            if not getattr(self, name).strip()
        ]

    @property
    def is_complete(self) -> bool:
        return not self.missing


class PurgeOutcome(Enum):
    SUCCESS = "success"
    API_ERROR = "api_error"
    TRANSPORT_ERROR = "transport_error"


class PurgeResult(BaseModel):
    outcome: PurgeOutcome
    message: str | None = None
    code: int | str | None = None
    raw: str | None = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def success(cls, raw: str | None = None) -> PurgeResult:
        return cls(outcome=PurgeOutcome.SUCCESS, raw=raw)

    @classmethod
    def api_error(
        cls, message: str, code: int | str, raw: str | None = None
    ) -> PurgeResult:
        return cls(outcome=PurgeOutcome.API_ERROR, message=message, code=code, raw=raw)

    @classmethod
    def transport_error(cls, message: str, raw: str | None = None) -> PurgeResult:
        return cls(outcome=PurgeOutcome.TRANSPORT_ERROR, message=message, raw=raw)

    @property
    def ok(self) -> bool:
        return self.outcome is PurgeOutcome.SUCCESS

    def describe(self) -> str:
        """Human readable outcome line."""
        if self.outcome is PurgeOutcome.API_ERROR:
            return f"CDN purge failed: {self.message} (Code: {self.code})"
        if self.outcome is PurgeOutcome.TRANSPORT_ERROR:
            return f"CDN API error: {self.message}"
        return "Successfully purged all CDN cache after origin site purge."
