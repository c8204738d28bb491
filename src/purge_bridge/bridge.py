"""Origin purge -> CDN purge bridge."""
from __future__ import annotations

import logging

import httpx

from purge_bridge.errors import ConfigMissingError, DependencyMissingError
from purge_bridge.models.purge import PurgeConfig, PurgeEvent, PurgeResult
from purge_bridge.utils.cf_cache import purge_everything

__all__ = ["PurgeBridge"]


class PurgeBridge:
    def __init__(
        self,
        config: PurgeConfig,
        logger: logging.Logger | None = None,
        client: httpx.Client | None = None,
        source_available: bool = True,
    ):
        """
        Bridge an origin cache purge to a full CDN purge.

        ``logger`` is the sink for outcome messages, ``client`` an optional
        pre-built http client, and ``source_available`` whether the origin
        purge event source is present at all.
        """
        self.config = config
        self.logger = logger or logging.getLogger(__name__)
        self.client = client
        self.source_available = source_available

    def is_configured(self) -> bool:
        return self.config.is_complete

    def check_requirements(self) -> None:
        """Raise if the bridge must not be activated."""
        if not self.source_available:
            raise DependencyMissingError()
        if not self.is_configured():
            raise ConfigMissingError(self.config.missing)

    def purge_all(self) -> PurgeResult:
        """Run one full purge. Raises ConfigMissingError on incomplete config."""
        if not self.is_configured():
            raise ConfigMissingError(self.config.missing)
        return purge_everything(self.config, self.client)

    def on_origin_purged(self, event: PurgeEvent | bool) -> None:
        """Handle an origin site purge. Failures end here, in the log."""
        if isinstance(event, bool):
            event = PurgeEvent(success=event)

        # origin purge failed, or the bridge was never configured
        if not event.success or not self.is_configured():
            return

        self.report(self.purge_all())

    def report(self, result: PurgeResult) -> None:
        if result.ok:
            self.logger.info(result.describe())
            return

        self.logger.error(result.describe())
        if self.config.verbose and result.raw is not None:
            self.logger.error(f"Full CDN response: {result.raw}")
