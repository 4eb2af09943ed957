from rich.console import Console
import typer

from pshot.config import get_config
from pshot.console import err_console
from pshot.errors import PshotError


def show_config_callback(value: bool) -> None:
    """Print the resolved configuration and exit."""
    if not value:
        return
    try:
        config = get_config()
    except PshotError as e:
        err_console.print(
            f"[Error] {e}", soft_wrap=True, markup=False, highlight=False
        )
        raise typer.Exit(1)
    Console().print(config)
    raise typer.Exit()
