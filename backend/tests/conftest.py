import asyncio
import pytest
import os
import sys
from contextlib import asynccontextmanager
from pathlib import Path

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))


async def _poll(check, timeout=0.2, interval=0.01):
    """Re-evaluate ``check`` until it holds or ``timeout`` seconds pass."""
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout
    while True:
        if check():
            return True
        if loop.time() >= deadline:
            return False
        await asyncio.sleep(interval)


class FakeElement:
    """In-memory stand-in for a located element."""

    def __init__(self, xpath, visible=True, text="", options=()):
        self.xpath = xpath
        self.visible = visible
        self.text = text
        self.options = list(options)
        self.clicked = 0
        self.filled = None
        self.selected = None
        self.scrolled = False

    async def click(self):
        self.clicked += 1

    async def fill(self, value):
        self.filled = value

    async def select_option(self, label):
        if label not in self.options:
            raise ValueError(f"No option with label {label!r}")
        self.selected = label

    async def scroll_into_view(self):
        self.scrolled = True

    async def is_visible(self):
        return self.visible

    async def text_content(self):
        return self.text

    async def expect_visible(self):
        if not await _poll(lambda: self.visible):
            raise AssertionError(f"Element not visible: {self.xpath}")

    async def expect_to_contain_text(self, text):
        if not await _poll(lambda: text in (self.text or "")):
            raise AssertionError(f"Expected element {self.xpath} to contain {text!r}, got {self.text!r}")


class MissingElement:
    def __init__(self, xpath):
        self.xpath = xpath

    def _fail(self):
        raise TimeoutError(f"Timeout 5000ms exceeded waiting for xpath={self.xpath}")

    async def click(self):
        self._fail()

    async def fill(self, value):
        self._fail()

    async def select_option(self, label):
        self._fail()

    async def scroll_into_view(self):
        self._fail()

    async def is_visible(self):
        return False

    async def text_content(self):
        self._fail()

    async def expect_visible(self):
        raise AssertionError(f"Element not found: {self.xpath}")

    async def expect_to_contain_text(self, text):
        raise AssertionError(f"Element not found: {self.xpath}")


class FakePage:
    """In-memory BrowserPage: screenshots are written as tiny files."""

    def __init__(self, elements=None, url="about:blank", fail_navigation=False, fail_screenshots=False):
        self.elements = {e.xpath: e for e in (elements or [])}
        self.url = url
        self.fail_navigation = fail_navigation
        self.fail_screenshots = fail_screenshots
        self.navigated = []
        self.located = []
        self.waits = []
        self.screenshots = []

    def add(self, element):
        self.elements[element.xpath] = element
        return element

    async def navigate(self, url):
        if self.fail_navigation:
            raise RuntimeError(f"net::ERR_NAME_NOT_RESOLVED at {url}")
        self.navigated.append(url)
        self.url = url

    def locate(self, xpath):
        self.located.append(xpath)
        return self.elements.get(xpath) or MissingElement(xpath)

    async def wait_for(self, xpath, timeout_ms):
        self.waits.append((xpath, timeout_ms))
        if xpath not in self.elements:
            raise TimeoutError(f"Timeout {timeout_ms}ms exceeded waiting for xpath={xpath}")

    async def screenshot(self, path: Path):
        if self.fail_screenshots:
            raise RuntimeError("Target page, context or browser has been closed")
        path.write_bytes(b"\x89PNG")
        self.screenshots.append(path.name)

    def current_url(self):
        return self.url

    async def expect_url(self, url):
        if not await _poll(lambda: self.url == url):
            raise AssertionError(f"Expected URL {url!r}, got {self.url!r}")


class FakeBrowser:
    """Replacement for open_browser_session that hands out FakePages."""

    def __init__(self, page_factory=None, fail_launch=False):
        self.page_factory = page_factory or (lambda: FakePage())
        self.fail_launch = fail_launch
        self.launches = []
        self.pages = []
        self.closed = 0

    @asynccontextmanager
    async def __call__(self, headless=True):
        self.launches.append(headless)
        if self.fail_launch:
            raise RuntimeError("Executable doesn't exist at /ms-playwright/chromium")
        page = self.page_factory()
        self.pages.append(page)
        try:
            yield page
        finally:
            self.closed += 1


@pytest.fixture(autouse=True)
def screenshots_dir(monkeypatch, tmp_path):
    """Point every run at a per-test screenshots directory."""
    import backend.config as config_mod
    import backend.services.automation_service as automation_mod
    import backend.services.run_service as run_mod
    shots = tmp_path / "screenshots"
    shots.mkdir()
    monkeypatch.setattr(config_mod, "SCREENSHOTS_DIR", shots)
    monkeypatch.setattr(automation_mod, "SCREENSHOTS_DIR", shots)
    monkeypatch.setattr(run_mod, "SCREENSHOTS_DIR", shots)
    yield shots


@pytest.fixture
def page():
    return FakePage(url="https://example.com/")


@pytest.fixture
def fake_browser(monkeypatch):
    import backend.services.automation_service as automation_mod
    browser = FakeBrowser(page_factory=lambda: FakePage(elements=[FakeElement("//h1", text="Example Domain")]))
    monkeypatch.setattr(automation_mod, "open_browser_session", browser)
    return browser
