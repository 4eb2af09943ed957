from pshot.console import console


def verbose_callback(value: bool) -> None:
    """Show the console log messages only when ``--verbose`` is passed."""
    console.quiet = not value
