from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page

from pshot.console import console
from pshot.errors import CaptureError
from pshot.models import CaptureSession, Tile
from pshot.planner import plan_offsets

SCROLL_TO_JS = "(y) => window.scrollTo(0, y)"


def capture_tiles(page: Page, session: CaptureSession) -> list[Tile]:
    """Scroll through the page one viewport at a time and grab each viewport.

    Steps run one after another on the same page; each capture has to see
    the scroll that came before it. The planned offset is recorded as the
    tile's position, whatever the browser's actual scroll position ends up
    being.
    """
    offsets = plan_offsets(session.page_height, session.tile_height)
    tiles = []

    for number, offset in enumerate(offsets, start=1):
        session.advance_to(offset)
        console.log(f"Capturing tile {number}/{len(offsets)} (y={offset})")
        try:
            page.evaluate(SCROLL_TO_JS, offset)
            page.wait_for_timeout(session.scroll_delay_ms)
            image = page.screenshot(full_page=False, type="png")
        except PlaywrightError as e:
            raise CaptureError(
                f"Failed to capture tile {number} at y={offset}: {e.message}"
            ) from e
        tiles.append(Tile(image=image, top=offset))

    return tiles
