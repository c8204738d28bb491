from purge_bridge import cf, config
from purge_bridge.models.settings import EnvSettings
from purge_bridge.utils.logs import setup_logging

import typer
from typing_extensions import Annotated

app = typer.Typer(no_args_is_help=True)
app.add_typer(cf.app, name="cf")
app.add_typer(config.app, name="config")


@app.callback()
def main(
    ctx: typer.Context,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Dump raw API responses")
    ] = False,
):
    """Mirror origin cache purges to Cloudflare."""
    ctx.obj = {"verbose": verbose}
    setup_logging(verbose or EnvSettings().verbose)
