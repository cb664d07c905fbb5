"""
Browser capability used by the step executor, backed by Playwright.

The executor only talks to ``BrowserPage`` / ``ElementHandle``; everything
Playwright-specific (selector engines, timeouts, launch/teardown, retrying
assertions) lives here.
"""
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Optional, Protocol

from playwright.async_api import Locator, Page, async_playwright, expect

from backend.config import ACTION_TIMEOUT_MS, NAVIGATION_TIMEOUT_MS
from backend.logger import get_logger

logger = get_logger("browser")


class ElementHandle(Protocol):
    async def click(self) -> None: ...

    async def fill(self, value: str) -> None: ...

    async def select_option(self, label: str) -> None: ...

    async def scroll_into_view(self) -> None: ...

    async def is_visible(self) -> bool: ...

    async def text_content(self) -> Optional[str]: ...

    async def expect_visible(self) -> None: ...

    async def expect_to_contain_text(self, text: str) -> None: ...


class BrowserPage(Protocol):
    async def navigate(self, url: str) -> None: ...

    def locate(self, xpath: str) -> ElementHandle: ...

    async def wait_for(self, xpath: str, timeout_ms: int) -> None: ...

    async def screenshot(self, path: Path) -> None: ...

    def current_url(self) -> str: ...

    async def expect_url(self, url: str) -> None: ...


def xpath_selector(xpath: str) -> str:
    """Prefix a locator with Playwright's xpath engine unless it already is."""
    if xpath.startswith("xpath="):
        return xpath
    return f"xpath={xpath}"


class PlaywrightElement:
    def __init__(self, locator: Locator, timeout_ms: int = ACTION_TIMEOUT_MS):
        self._locator = locator
        self._timeout_ms = timeout_ms

    async def click(self) -> None:
        await self._locator.click()

    async def fill(self, value: str) -> None:
        await self._locator.fill(value)

    async def select_option(self, label: str) -> None:
        await self._locator.select_option(label=label)

    async def scroll_into_view(self) -> None:
        await self._locator.scroll_into_view_if_needed()

    async def is_visible(self) -> bool:
        return await self._locator.is_visible()

    async def text_content(self) -> Optional[str]:
        return await self._locator.text_content()

    async def expect_visible(self) -> None:
        """Retry until the element is visible; AssertionError after the action timeout."""
        await expect(self._locator).to_be_visible(timeout=self._timeout_ms)

    async def expect_to_contain_text(self, text: str) -> None:
        await expect(self._locator).to_contain_text(text, timeout=self._timeout_ms)


class PlaywrightPage:
    def __init__(self, page: Page):
        self._page = page

    async def navigate(self, url: str) -> None:
        await self._page.goto(url, timeout=NAVIGATION_TIMEOUT_MS)
        await self._page.wait_for_load_state("networkidle", timeout=NAVIGATION_TIMEOUT_MS)

    def locate(self, xpath: str) -> PlaywrightElement:
        return PlaywrightElement(self._page.locator(xpath_selector(xpath)))

    async def wait_for(self, xpath: str, timeout_ms: int) -> None:
        # Existence only; the element does not have to be visible
        await self._page.wait_for_selector(xpath_selector(xpath), state="attached", timeout=timeout_ms)

    async def screenshot(self, path: Path) -> None:
        await self._page.screenshot(path=str(path))

    def current_url(self) -> str:
        return self._page.url

    async def expect_url(self, url: str) -> None:
        await expect(self._page).to_have_url(url, timeout=ACTION_TIMEOUT_MS)


@asynccontextmanager
async def open_browser_session(headless: bool = True) -> AsyncIterator[PlaywrightPage]:
    """Launch Chromium, yield one page, and always tear the browser down."""
    async with async_playwright() as playwright:
        browser = await playwright.chromium.launch(headless=headless)
        logger.debug("Browser launched (headless=%s)", headless)
        try:
            page = await browser.new_page()
            page.set_default_timeout(ACTION_TIMEOUT_MS)
            page.set_default_navigation_timeout(NAVIGATION_TIMEOUT_MS)
            yield PlaywrightPage(page)
        finally:
            await browser.close()
            logger.debug("Browser closed")
