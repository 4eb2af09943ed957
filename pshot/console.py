from rich.console import Console

console = Console(stderr=True, quiet=True)
err_console = Console(stderr=True)
