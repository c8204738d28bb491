"""Cloudflare cache management."""
import json
import logging

import httpx

from purge_bridge.models.purge import PurgeConfig, PurgeResult
from purge_bridge.utils import uris

__all__ = ["purge_everything", "parse_purge_response", "purge_cache_url"]

logger = logging.getLogger(__name__)

PURGE_PAYLOAD = {"purge_everything": True}


def purge_cache_url(config: PurgeConfig) -> str:
    return uris.zone_endpoint(config.api_base, config.zone_id, "purge_cache")


def purge_everything(
    config: PurgeConfig, client: httpx.Client | None = None
) -> PurgeResult:
    """Purge every cached file of the configured zone. Never raises."""
    api_url = purge_cache_url(config)
    post = client.post if client is not None else httpx.post

    logger.debug("POST %s", api_url)
    try:
        res = post(
            api_url,
            headers={
                "Authorization": f"Bearer {config.api_token}",
                "Content-Type": "application/json",
            },
            content=json.dumps(PURGE_PAYLOAD),
            timeout=config.timeout,
        )
    except (httpx.HTTPError, httpx.InvalidURL, UnicodeError) as e:
        return PurgeResult.transport_error(str(e) or type(e).__name__)

    return parse_purge_response(res)


def parse_purge_response(res: httpx.Response) -> PurgeResult:
    """Classify a Cloudflare API envelope."""
    raw = res.text
    try:
        data = json.loads(raw)
    except (ValueError, RecursionError) as e:
        return PurgeResult.transport_error(
            f"Invalid JSON response (HTTP {res.status_code}): {e}", raw=raw
        )

    if not isinstance(data, dict) or not data.get("success"):
        message, code = _first_error(data)
        return PurgeResult.api_error(message, code, raw=raw)

    return PurgeResult.success(raw=raw)


def _first_error(data) -> tuple[str, int | str]:
    message, code = "Unknown error", "Unknown code"
    errors = data.get("errors") if isinstance(data, dict) else None
    if isinstance(errors, list) and errors and isinstance(errors[0], dict):
        first = errors[0]
        if first.get("message") is not None:
            message = str(first["message"])
        if first.get("code") is not None:
            code = first["code"]
            if not isinstance(code, (int, str)):
                code = str(code)
    return message, code
