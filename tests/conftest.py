"""Shared pytest fixtures: fake Playwright page, browser and config."""

from __future__ import annotations

import io
from typing import Any, Dict, List, Optional, Tuple

import pytest
from PIL import Image

from pshot.capturer import SCROLL_TO_JS
from pshot.config import Config
from pshot.console import console
from pshot.preparer import PAGE_HEIGHT_JS, SUPPRESS_FIXED_ELEMENTS_JS

# One colour per tile so stitched rows can be traced back to their capture.
PALETTE: List[Tuple[int, int, int, int]] = [
    (255, 0, 0, 255),
    (0, 255, 0, 255),
    (0, 0, 255, 255),
    (255, 255, 0, 255),
    (0, 255, 255, 255),
    (255, 0, 255, 255),
]


def solid_png(width: int, height: int, color) -> bytes:
    buffer = io.BytesIO()
    Image.new("RGBA", (width, height), color).save(buffer, format="PNG")
    return buffer.getvalue()


class FakePage:
    """Stands in for ``playwright.sync_api.Page``.

    Screenshots are solid images coloured by how many viewports the page
    has been scrolled, so tile ``n`` is ``PALETTE[n]``.
    """

    def __init__(
        self,
        height: int = 2000,
        hidden: int = 2,
        fail_on: Optional[str] = None,
        error: Optional[Exception] = None,
        fail_at: int = 1,
    ):
        self.height = height
        self.hidden = hidden
        self.fail_on = fail_on
        self.error = error
        self.fail_at = fail_at
        self.seen: Dict[str, int] = {}
        self.viewport: Dict[str, int] = {"width": 0, "height": 0}
        self.scroll_y = 0
        self.calls: List[Tuple[str, Any]] = []

    def _maybe_fail(self, name: str) -> None:
        """Raise ``error`` on the ``fail_at``-th call of ``fail_on``."""
        self.seen[name] = self.seen.get(name, 0) + 1
        if self.fail_on == name and self.seen[name] == self.fail_at:
            raise self.error

    def set_viewport_size(self, size: Dict[str, int]) -> None:
        self.calls.append(("set_viewport_size", size))
        self._maybe_fail("set_viewport_size")
        self.viewport = dict(size)

    def goto(self, url: str, wait_until: str = "load", timeout: float = 0) -> None:
        self.calls.append(("goto", (url, wait_until, timeout)))
        self._maybe_fail("goto")

    def wait_for_timeout(self, timeout: float) -> None:
        self.calls.append(("wait_for_timeout", timeout))
        self._maybe_fail("wait_for_timeout")

    def evaluate(self, expression: str, arg: Any = None) -> Any:
        if expression == SCROLL_TO_JS:
            self.calls.append(("scroll", arg))
            self._maybe_fail("scroll")
            self.scroll_y = arg
            return None
        if expression == SUPPRESS_FIXED_ELEMENTS_JS:
            self.calls.append(("suppress", None))
            self._maybe_fail("suppress")
            return self.hidden
        if expression == PAGE_HEIGHT_JS:
            self.calls.append(("measure", None))
            self._maybe_fail("measure")
            return self.height
        raise AssertionError(f"unexpected script: {expression}")

    def screenshot(self, full_page: bool = False, type: str = "png") -> bytes:
        self.calls.append(("screenshot", full_page))
        self._maybe_fail("screenshot")
        index = self.scroll_y // self.viewport["height"]
        return solid_png(
            self.viewport["width"],
            self.viewport["height"],
            PALETTE[index % len(PALETTE)],
        )

    def call_names(self) -> List[str]:
        return [name for name, _ in self.calls]


class FakeContext:
    def __init__(self, page: FakePage):
        self.page = page

    def new_page(self) -> FakePage:
        return self.page


class FakeBrowser:
    def __init__(self, page: FakePage):
        self.page = page
        self.closed = 0
        self.context_kwargs: Dict[str, Any] = {}

    def new_context(self, **kwargs) -> FakeContext:
        self.context_kwargs = kwargs
        return FakeContext(self.page)

    def close(self) -> None:
        self.closed += 1


class FakePlaywright:
    def __init__(self, browser: FakeBrowser, start_error: Optional[Exception] = None):
        self.browser = browser
        self.chromium = self
        self.launch_kwargs: Dict[str, Any] = {}
        self.start_error = start_error
        self.stopped = 0

    def launch(self, **kwargs) -> FakeBrowser:
        self.launch_kwargs = kwargs
        return self.browser

    def __call__(self):
        return self

    def start(self) -> "FakePlaywright":
        if self.start_error:
            raise self.start_error
        return self

    def stop(self) -> None:
        self.stopped += 1


@pytest.fixture(autouse=True)
def quiet_console():
    console.quiet = True
    yield
    console.quiet = True


@pytest.fixture()
def config() -> Config:
    """Small viewport, no settle delays."""

    return Config(
        viewport_width=40,
        viewport_height=800,
        scroll_delay_ms=0,
        load_settle_ms=0,
        suppress_settle_ms=0,
        navigation_timeout_ms=1000,
    )


@pytest.fixture()
def fake_browser(monkeypatch):
    """Patch ``sync_playwright`` with a fake and return a factory for it."""

    def install(
        page: FakePage, start_error: Optional[Exception] = None
    ) -> FakePlaywright:
        playwright = FakePlaywright(FakeBrowser(page), start_error)
        monkeypatch.setattr("pshot.shot.sync_playwright", playwright)
        return playwright

    return install
