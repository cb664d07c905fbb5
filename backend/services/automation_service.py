"""Run orchestration: one browser session, sequential steps, one report."""
import uuid
from typing import Sequence

from backend.config import SCREENSHOTS_DIR, SCREENSHOTS_URL_PREFIX
from backend.core.browser import open_browser_session
from backend.core.errors import RunFailedError
from backend.core.report_renderer import render_report
from backend.core.step_executor import execute_step
from backend.logger import get_logger
from backend.models.step import RunSession, Step

logger = get_logger("runs")

REPORT_FILENAME = "result.html"


def _create_session(url: str, steps: Sequence[Step]) -> RunSession:
    session_id = str(uuid.uuid4())
    return RunSession(session_id=session_id, url=url, steps=list(steps), run_dir=SCREENSHOTS_DIR / session_id)


def _discard_empty_run_dir(session: RunSession) -> None:
    """Remove the run directory of a failed run if nothing was written to it."""
    run_dir = session.run_dir
    if run_dir.is_dir() and not any(run_dir.iterdir()):
        run_dir.rmdir()


def _write_report(session: RunSession) -> str:
    report_path = session.run_dir / REPORT_FILENAME
    report_path.write_text(render_report(session.url, session.results), encoding="utf-8")
    return f"{SCREENSHOTS_URL_PREFIX}/{session.session_id}/{REPORT_FILENAME}"


async def run_automation(url: str, steps: Sequence[Step], headless: bool = True) -> RunSession:
    """Replay ``steps`` against ``url`` and write the run's report.

    Step failures are recorded in the session's results. Anything that stops
    the run itself (launch, navigation, report write) raises RunFailedError.
    """
    session = _create_session(url, steps)
    url_prefix = f"{SCREENSHOTS_URL_PREFIX}/{session.session_id}"
    logger.info("Run %s started: %s (%d steps, headless=%s)", session.session_id, url, len(steps), headless)

    try:
        async with open_browser_session(headless=headless) as page:
            session.run_dir.mkdir(parents=True, exist_ok=True)
            await page.navigate(url)
            for index, step in enumerate(session.steps, start=1):
                result = await execute_step(page, step, index, session.run_dir, url_prefix)
                session.results.append(result)
        session.report_url = _write_report(session)
    except Exception as e:
        logger.error("Run %s failed: %s", session.session_id, e)
        _discard_empty_run_dir(session)
        raise RunFailedError(str(e) or e.__class__.__name__, session_id=session.session_id) from e

    failed = sum(1 for r in session.results if not r.succeeded)
    logger.info(
        "Run %s finished: %d/%d steps passed, report at %s",
        session.session_id, len(session.results) - failed, len(session.results), session.report_url,
    )
    return session
