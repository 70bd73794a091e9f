"""CLI entry point for Starsky."""

from __future__ import annotations

# Python version check - must be before any imports that use 3.12+ syntax.
import sys

if sys.version_info < (3, 12):  # noqa: UP036
    print("Error: Starsky requires Python 3.12 or higher.")
    print(
        "You are running Python {}.{}".format(  # noqa: UP032
            sys.version_info.major, sys.version_info.minor
        )
    )
    sys.exit(1)

import click  # noqa: E402

from starsky import __version__  # noqa: E402


@click.command()
@click.option("--version", is_flag=True, help="Show version and exit")
@click.option(
    "--seed", type=int, default=None, help="Seed the random source for a repeatable sky"
)
@click.pass_context
def cli(ctx: click.Context, version: bool, seed: int | None) -> None:
    """Animated terminal sky. Keys 1, 2, 3 switch theme; q quits."""
    if version:
        click.echo(f"starsky {__version__}")
        ctx.exit(0)

    from starsky.app import StarskyApp
    from starsky.config import SkyConfig

    app = StarskyApp(SkyConfig(seed=seed))
    try:
        app.run()
    except Exception as exc:
        click.echo(f"Error running program: {exc}")
        sys.exit(1)

    if app.return_code:
        sys.exit(app.return_code)


if __name__ == "__main__":
    cli()
