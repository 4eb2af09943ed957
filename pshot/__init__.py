from pshot.__about__ import __version__
from pshot.shot import save_screenshot, take_full_page_screenshot

__all__ = ["__version__", "save_screenshot", "take_full_page_screenshot"]
