from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page

from pshot.config import Config
from pshot.console import console
from pshot.errors import CaptureError, NavigationError
from pshot.models import CaptureSession

# Hide fixed/sticky chrome without taking it out of the layout flow, so the
# page height and everything below it stays put.
SUPPRESS_FIXED_ELEMENTS_JS = """
() => {
  let hidden = 0;
  for (const el of document.querySelectorAll('*')) {
    const position = window.getComputedStyle(el).position;
    if (position === 'fixed' || position === 'sticky') {
      el.style.setProperty('visibility', 'hidden', 'important');
      hidden++;
    }
  }
  return hidden;
}
"""

PAGE_HEIGHT_JS = "() => document.documentElement.scrollHeight"


def prepare_page(page: Page, session: CaptureSession, config: Config) -> None:
    """Load ``session.url`` in a fixed viewport and hide fixed/sticky elements."""
    try:
        page.set_viewport_size(
            {"width": session.viewport_width, "height": session.viewport_height}
        )
    except PlaywrightError as e:
        raise CaptureError(f"Failed to set viewport size: {e.message}") from e

    console.log(f"Loading {session.url}")
    try:
        page.goto(
            session.url,
            wait_until="networkidle",
            timeout=config.navigation_timeout_ms,
        )
        page.wait_for_timeout(config.load_settle_ms)
    except PlaywrightError as e:
        raise NavigationError(f"Failed to load {session.url}: {e.message}") from e

    hidden = suppress_fixed_elements(page)
    console.log(f"Hid {hidden} fixed/sticky elements")
    try:
        page.wait_for_timeout(config.suppress_settle_ms)
    except PlaywrightError as e:
        raise CaptureError(
            f"Failed to wait after hiding fixed elements: {e.message}"
        ) from e


def suppress_fixed_elements(page: Page) -> int:
    """Hide every element whose computed position is fixed or sticky.

    Only elements that are fixed/sticky right now are touched; anything that
    turns sticky later is left alone.
    """
    try:
        return int(page.evaluate(SUPPRESS_FIXED_ELEMENTS_JS) or 0)
    except PlaywrightError as e:
        raise CaptureError(f"Failed to hide fixed elements: {e.message}") from e


def measure_page_height(page: Page) -> int:
    try:
        height = page.evaluate(PAGE_HEIGHT_JS)
    except PlaywrightError as e:
        raise CaptureError(f"Failed to measure page height: {e.message}") from e

    if isinstance(height, bool) or not isinstance(height, (int, float)):
        raise CaptureError(f"Page height is not a number: {height!r}")
    return int(height)
