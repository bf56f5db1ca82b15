"""Command line entry points: build the site or serve the welcome page."""

import logging

import typer

from personalsite.config import settings
from personalsite.core.errors import SiteError

app = typer.Typer(
    name="personalsite",
    help="Build the personal website or serve the welcome page.",
    no_args_is_help=True,
)


@app.callback()
def main() -> None:
    """Configure logging for every command."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def build() -> None:
    """Generate the static site and deploy it when a remote is configured."""
    from personalsite.build import build_site

    try:
        build_site(settings)
    except SiteError as e:
        typer.echo(f"Build failed: {e}", err=True)
        raise typer.Exit(1) from e


@app.command()
def serve() -> None:
    """Run the welcome page server."""
    import uvicorn

    uvicorn.run("personalsite.main:app", log_level=settings.log_level.lower())


if __name__ == "__main__":
    app()
