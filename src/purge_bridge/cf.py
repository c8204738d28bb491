"""Cloudflare purge commands."""
from __future__ import annotations

import logging

import keyring.errors
import rich
import typer
from typing_extensions import Annotated

from purge_bridge.events import PurgeEventSource
from purge_bridge.host import build_bridge, setup_bridge
from purge_bridge.models.keyring_config import KeyringConfig
from purge_bridge.models.settings import EnvSettings

app = typer.Typer(no_args_is_help=True)
cp = rich.print
logger = logging.getLogger(__name__)


def load_settings(ctx: typer.Context) -> EnvSettings:
    settings = EnvSettings()
    if ctx.obj and ctx.obj.get("verbose"):
        settings = settings.model_copy(update={"verbose": True})
    return settings


def load_stored() -> KeyringConfig | None:
    try:
        return KeyringConfig.load_from_keyring()
    except keyring.errors.KeyringError as e:
        logger.debug(f"Keyring unavailable: {e}")
        return None


def mask(value: str) -> str:
    if not value:
        return "(not set)"
    return value[:4] + "****" if len(value) > 8 else "********"


@app.command()
def purge(ctx: typer.Context):
    """Purge everything from the zone's Cloudflare cache now."""
    settings = load_settings(ctx)
    bridge = build_bridge(PurgeEventSource(), settings, load_stored())
    if not bridge.is_configured():
        cp(f"❌ [yellow]Missing config: {', '.join(bridge.config.missing)}")
        raise typer.Exit(1)

    typer.echo(f"Purging all cached files of zone {bridge.config.zone_id!r}...")
    result = bridge.purge_all()
    bridge.report(result)

    if not result.ok:
        raise typer.Exit(1)

    typer.echo("✅ Purged")
    if settings.verbose and result.raw:
        rich.print_json(result.raw)


@app.command()
def check(ctx: typer.Context):
    """Show whether the bridge would activate."""
    bridge = build_bridge(PurgeEventSource(), load_settings(ctx), load_stored())
    cp(f"zone id:   {bridge.config.zone_id or '(not set)'}")
    cp(f"api token: {mask(bridge.config.api_token)}")
    cp(f"endpoint:  {bridge.config.api_base}")

    if not bridge.is_configured():
        cp(f"❌ [yellow]Inactive, missing: {', '.join(bridge.config.missing)}")
        raise typer.Exit(1)
    cp("✅ Ready")


@app.command()
def trigger(
    ctx: typer.Context,
    failed: Annotated[
        bool, typer.Option("--failed", help="Report the origin purge as failed")
    ] = False,
):
    """Fire an origin purge event through the bridge."""
    source = PurgeEventSource()
    bridge = setup_bridge(source, load_settings(ctx), load_stored())
    if bridge is None:
        cp("❌ [yellow]Bridge not active")
        raise typer.Exit(1)

    source.fire(not failed)
    typer.echo(f"Fired origin purge event (success={not failed})")
