from typing import Optional

import typer

from pshot.cli.common import verbose_callback
from pshot.cli.config import show_config_callback
from pshot.console import err_console
from pshot.errors import PshotError
from pshot.shot import save_screenshot

app = typer.Typer(
    name="pshot",
    help="Capture a full-length screenshot of a web page.",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print the installed pshot version for `--version` and stop."""
    if value:
        from pshot.__about__ import __version__

        typer.echo(f"{__version__}")
        raise typer.Exit()


@app.command()
def capture(
    url: Optional[str] = typer.Argument(
        None,
        help="page to capture",
        show_default=False,
    ),
    version: bool = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
    ),
    show_config: bool = typer.Option(
        None,
        "--show-config",
        callback=show_config_callback,
        is_eager=True,
        help="show the resolved configuration",
    ),
    verbose: bool = typer.Option(
        False,
        callback=verbose_callback,
        help="show the log messages",
    ),
) -> None:
    """
    Scrolls through URL one viewport at a time and stitches the captures into
    a single PNG named after the last segment of the URL path.
    """
    if not url:
        err_console.print(
            "Usage: pshot <URL>", soft_wrap=True, markup=False, highlight=False
        )
        raise typer.Exit(1)

    try:
        path = save_screenshot(url)
    except PshotError as e:
        err_console.print(
            f"[Error] {e}", soft_wrap=True, markup=False, highlight=False
        )
        raise typer.Exit(1)

    typer.echo(f"Saved screenshot: {path.name}")


if __name__ == "__main__":
    app()
