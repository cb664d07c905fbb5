"""Look up finished runs in the screenshots directory."""
import re
import uuid
from typing import Optional

from backend.config import SCREENSHOTS_DIR, SCREENSHOTS_URL_PREFIX
from backend.services.automation_service import REPORT_FILENAME

_SCREENSHOT_RE = re.compile(r"^step-(\d+)(-error)?\.png$")


def _is_session_id(value: str) -> bool:
    try:
        return str(uuid.UUID(value)) == value
    except ValueError:
        return False


def _summary(run_dir) -> dict:
    report = run_dir / REPORT_FILENAME
    return {
        "session_id": run_dir.name,
        "report_url": f"{SCREENSHOTS_URL_PREFIX}/{run_dir.name}/{REPORT_FILENAME}",
        "created_at": report.stat().st_mtime,
    }


def list_runs(limit: int = 50) -> list[dict]:
    """Runs with a written report, newest first."""
    if not SCREENSHOTS_DIR.exists():
        return []
    runs = [
        _summary(d) for d in SCREENSHOTS_DIR.iterdir()
        if d.is_dir() and _is_session_id(d.name) and (d / REPORT_FILENAME).is_file()
    ]
    runs.sort(key=lambda r: r["created_at"], reverse=True)
    return runs[:limit]


def get_run(session_id: str) -> Optional[dict]:
    """Report and screenshot URLs of one run, screenshots in step order."""
    if not _is_session_id(session_id):
        return None
    run_dir = SCREENSHOTS_DIR / session_id
    if not (run_dir / REPORT_FILENAME).is_file():
        return None

    shots = []
    for path in run_dir.iterdir():
        match = _SCREENSHOT_RE.match(path.name)
        if match:
            shots.append((int(match.group(1)), path.name))
    shots.sort()
    result = _summary(run_dir)
    result["screenshot_urls"] = [f"{SCREENSHOTS_URL_PREFIX}/{session_id}/{name}" for _, name in shots]
    return result
