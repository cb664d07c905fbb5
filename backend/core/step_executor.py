"""Executes a single automation step against a browser page."""
import re
from pathlib import Path
from typing import Optional

from backend.config import DEFAULT_WAIT_TIMEOUT_MS
from backend.core.browser import BrowserPage
from backend.core.errors import UnknownActionError
from backend.logger import get_logger
from backend.models.step import Step, StepAction, StepResult

logger = get_logger("steps")

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def strip_quotes(xpath: str) -> str:
    """Remove one layer of matching single or double quotes around a locator."""
    if len(xpath) >= 2 and xpath[0] == xpath[-1] and xpath[0] in ("'", '"'):
        return xpath[1:-1]
    return xpath


def parse_wait_timeout(value: Optional[str]) -> int:
    """Leading integer of ``value`` in milliseconds, falling back to the default."""
    if not value:
        return DEFAULT_WAIT_TIMEOUT_MS
    match = _LEADING_INT.match(value)
    if not match:
        return DEFAULT_WAIT_TIMEOUT_MS
    timeout = int(match.group(1))
    if timeout <= 0:
        return DEFAULT_WAIT_TIMEOUT_MS
    return timeout


def screenshot_name(index: int, failed: bool) -> str:
    return f"step-{index}-error.png" if failed else f"step-{index}.png"


async def _locate_visible(page: BrowserPage, xpath: str):
    element = page.locate(xpath)
    await element.expect_visible()
    return element


async def perform_action(page: BrowserPage, step: Step) -> None:
    """Run the step's action. Raises on any failure."""
    try:
        action = StepAction(step.action)
    except ValueError:
        raise UnknownActionError(step.action) from None

    if action is StepAction.CLICK:
        element = await _locate_visible(page, step.xpath)
        await element.click()
    elif action is StepAction.FILL:
        element = await _locate_visible(page, step.xpath)
        await element.fill(step.value or "")
    elif action is StepAction.WAIT:
        await page.wait_for(step.xpath, parse_wait_timeout(step.value))
    elif action is StepAction.VALIDATE:
        xpath = strip_quotes(step.xpath)
        if step.value:
            await page.locate(xpath).expect_to_contain_text(step.value)
        else:
            await _locate_visible(page, xpath)
    elif action is StepAction.ASSERT_URL:
        await page.expect_url(step.value or "")
    elif action is StepAction.SELECT:
        element = await _locate_visible(page, step.xpath)
        await element.select_option(step.value or "")
    elif action is StepAction.SCROLL:
        await page.locate(step.xpath).scroll_into_view()


async def execute_step(
    page: BrowserPage,
    step: Step,
    index: int,
    run_dir: Path,
    url_prefix: str,
) -> StepResult:
    """Execute one step and capture a screenshot whatever the outcome.

    ``index`` is the 1-based position of the step in the run. Failures are
    recorded in the returned result and never raised.
    """
    try:
        await perform_action(page, step)
        name = screenshot_name(index, failed=False)
        await page.screenshot(run_dir / name)
        return StepResult(
            action=step.action,
            xpath=step.xpath,
            value=step.value,
            status="success",
            screenshot_url=f"{url_prefix}/{name}",
        )
    except Exception as e:
        error = str(e) or e.__class__.__name__
        logger.warning("Step %d (%s %s) failed: %s", index, step.action, step.xpath, error)

    name = screenshot_name(index, failed=True)
    screenshot_url = f"{url_prefix}/{name}"
    try:
        await page.screenshot(run_dir / name)
    except Exception as e:
        logger.error("Failed to capture error screenshot for step %d: %s", index, e)
        screenshot_url = None
    return StepResult(
        action=step.action,
        xpath=step.xpath,
        value=step.value,
        status="failure",
        screenshot_url=screenshot_url,
        error=error,
    )
