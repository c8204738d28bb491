"""Wires the bridge into the origin purge event at startup."""
from __future__ import annotations

import logging

import httpx

from purge_bridge.bridge import PurgeBridge
from purge_bridge.errors import PurgeBridgeError
from purge_bridge.events import PurgeEventSource
from purge_bridge.models.keyring_config import ConfigKey, KeyringConfig
from purge_bridge.models.purge import PurgeConfig
from purge_bridge.models.settings import EnvSettings

logger = logging.getLogger(__name__)


def resolve_config(
    settings: EnvSettings, stored: KeyringConfig | None = None
) -> PurgeConfig:
    """Environment values, with keyring values filling the gaps."""
    config = settings.to_purge_config()
    if stored is None:
        return config

    return settings.to_purge_config(
        zone_id=config.zone_id or stored.value_of(ConfigKey.CF_ZONE_ID),
        api_token=config.api_token or stored.value_of(ConfigKey.CF_API_TOKEN),
    )


def build_bridge(
    source: PurgeEventSource | None,
    settings: EnvSettings,
    stored: KeyringConfig | None = None,
    sink: logging.Logger | None = None,
    client: httpx.Client | None = None,
) -> PurgeBridge:
    return PurgeBridge(
        resolve_config(settings, stored),
        logger=sink,
        client=client,
        source_available=source is not None and source.available,
    )


def setup_bridge(
    source: PurgeEventSource | None,
    settings: EnvSettings | None = None,
    stored: KeyringConfig | None = None,
    sink: logging.Logger | None = None,
    client: httpx.Client | None = None,
) -> PurgeBridge | None:
    """
    Subscribe a bridge to ``source`` if everything it needs is present.

    Returns None, without subscribing, when the source is unavailable or the
    zone id / API token are missing; the operator notice is logged as a warning.
    """
    bridge = build_bridge(source, settings or EnvSettings(), stored, sink, client)
    try:
        bridge.check_requirements()
    except PurgeBridgeError as e:
        logger.warning(e.notice)
        return None

    source.subscribe(bridge.on_origin_purged)
    logger.debug("Subscribed to origin purge events")
    return bridge
