import os
import tempfile
from pathlib import Path
from typing import Optional

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page, sync_playwright

from pshot.capturer import capture_tiles
from pshot.compositor import composite_tiles
from pshot.config import Config, get_config
from pshot.console import console
from pshot.errors import BrowserError, OutputError
from pshot.models import CaptureSession
from pshot.preparer import measure_page_height, prepare_page
from pshot.urls import output_filename, validate_url


def capture_page(page: Page, url: str, config: Config) -> bytes:
    """Run the prepare, plan, capture and stitch steps against an open page."""
    session = CaptureSession.from_config(url, config)

    prepare_page(page, session, config)

    session.page_height = measure_page_height(page)
    console.log(f"Page height: {session.page_height}px")

    tiles = capture_tiles(page, session)

    console.log(f"Stitching {len(tiles)} tiles")
    return composite_tiles(tiles, session.viewport_width, session.page_height)


def take_full_page_screenshot(url: str, config: Optional[Config] = None) -> bytes:
    """Capture ``url`` as one tall PNG using a single browser instance."""
    config = config or get_config()

    try:
        p = sync_playwright().start()
    except PlaywrightError as e:
        raise BrowserError(f"Failed to start Playwright: {e.message}") from e

    try:
        console.log("Launching browser")
        try:
            browser = p.chromium.launch(
                headless=config.headless, args=config.browser_args
            )
        except PlaywrightError as e:
            raise BrowserError(f"Failed to launch browser: {e.message}") from e

        try:
            try:
                context = browser.new_context(
                    viewport=config.viewport, device_scale_factor=1
                )
                page = context.new_page()
            except PlaywrightError as e:
                raise BrowserError(f"Failed to open browser page: {e.message}") from e

            return capture_page(page, url, config)
        finally:
            try:
                browser.close()
            except PlaywrightError as e:
                console.log(f"Failed to close browser: {e.message}")
    finally:
        p.stop()


def write_output(path: Path, data: bytes) -> Path:
    """Write ``data`` to ``path`` without leaving a partial file behind."""
    path = Path(path)
    tmp_name = None
    try:
        with tempfile.NamedTemporaryFile(
            dir=path.parent, prefix=f".{path.stem}-", suffix=".tmp", delete=False
        ) as tmp:
            tmp_name = tmp.name
            tmp.write(data)
        os.replace(tmp_name, path)
    except (OSError, ValueError) as e:
        if tmp_name and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise OutputError(f"Failed to write {path}: {e}") from e
    return path


def save_screenshot(
    url: str,
    config: Optional[Config] = None,
    directory: Optional[Path] = None,
) -> Path:
    """Capture ``url`` and save it as ``<last path segment>.png``.

    Args:
        url: Page to capture.
        config: Capture settings, defaults to the cached environment config.
        directory: Where to write the image, defaults to the working directory.

    Returns:
        Path: The written file.
    """
    url = validate_url(url)
    config = config or get_config()
    directory = Path(directory) if directory is not None else Path.cwd()

    image = take_full_page_screenshot(url, config)
    return write_output(directory / output_filename(url, config.default_basename), image)
