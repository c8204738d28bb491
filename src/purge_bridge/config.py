"""Configuration"""
from __future__ import annotations

from typing import Optional

import rich
import typer
from typing_extensions import Annotated

from purge_bridge.models.keyring_config import ConfigKey, KeyringConfig

app = typer.Typer(no_args_is_help=True)
cp = rich.print


@app.command(name="set")
def set_config(
        key: ConfigKey,
        value: Annotated[Optional[str], typer.Argument()] = None
):
    """Store a value in the keyring, or clear it when no value is given."""
    with KeyringConfig.load_from_keyring() as config:
        if value is None:
            config.pop(ConfigKey(key), None)
        else:
            config[ConfigKey(key)] = value.strip()

    cp(f"{'Cleared' if value is None else 'Saved'} key {repr(key.value)}")


@app.command()
def show():
    """Show the stored configuration, masked."""
    config = KeyringConfig.load_from_keyring()
    cp(config.to_keys_json())
