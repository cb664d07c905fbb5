"""Static HTML report for a finished run."""
from html import escape
from typing import Sequence

from backend.models.step import StepResult

_STATUS_COLORS = {"success": "green", "failure": "red"}


def _render_step(number: int, result: StepResult) -> str:
    color = _STATUS_COLORS.get(result.status, "black")
    parts = [
        '    <div class="step">',
        f"      <p><strong>Step {number}:</strong> {escape(result.action)} - "
        f"{escape(result.xpath)}"
        + (f" - {escape(result.value)}" if result.value else "")
        + f' - <span class="status {result.status}" style="color: {color};">{result.status}</span></p>',
    ]
    if result.error:
        parts.append(f'      <p class="error" style="color: red;">Error: {escape(result.error)}</p>')
    if result.screenshot_url:
        parts.append(
            f'      <img src="{escape(result.screenshot_url, quote=True)}" '
            f'alt="Step {number}" width="300" />'
        )
    parts.append("    </div>")
    return "\n".join(parts)


def render_report(url: str, results: Sequence[StepResult]) -> str:
    """Render the report document for ``results`` (in step order)."""
    passed = sum(1 for r in results if r.succeeded)
    steps_html = "\n".join(_render_step(i, r) for i, r in enumerate(results, start=1))
    return (
        "<!DOCTYPE html>\n"
        "<html>\n"
        "  <head>\n"
        '    <meta charset="utf-8" />\n'
        "    <title>Automation Report</title>\n"
        "  </head>\n"
        "  <body>\n"
        "    <h1>Automation Report</h1>\n"
        f"    <p>URL: {escape(url)}</p>\n"
        f"    <p>Passed: {passed}/{len(results)}</p>\n"
        f"{steps_html}\n"
        "  </body>\n"
        "</html>\n"
    )
