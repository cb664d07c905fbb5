#!/usr/bin/env python3
"""Replay a step file against a URL from the terminal.

Usage:
    python scripts/replay_steps.py https://example.com steps.csv
    python scripts/replay_steps.py https://example.com steps.json --headed --set 2:value=hello
"""
import argparse
import asyncio
import json
import sys
from pathlib import Path

from backend.core.errors import RunFailedError
from backend.core.step_csv import parse_steps_csv
from backend.models.step import Step, StepField
from backend.services.automation_service import run_automation
from backend.services.step_editor import update_step_at


def load_steps(path: Path) -> list[Step]:
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        return [Step(**item) for item in json.loads(text)]
    return parse_steps_csv(text)


def parse_edit(text: str) -> tuple[int, StepField, str]:
    """Parse ``N:field=value`` where N is the 1-based step number."""
    target, _, value = text.partition("=")
    number, _, field = target.partition(":")
    try:
        return int(number) - 1, StepField(field.strip()), value
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid edit {text!r}, expected N:action|xpath|value=VALUE")


async def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("url")
    parser.add_argument("steps_file", type=Path, help="CSV (action,xpath,value) or JSON list of steps")
    parser.add_argument("--headed", action="store_true", help="Show the browser window")
    parser.add_argument("--set", dest="edits", type=parse_edit, action="append", default=[],
                        metavar="N:FIELD=VALUE", help="Override one field of step N before running")
    args = parser.parse_args()

    steps = load_steps(args.steps_file)
    for index, field, value in args.edits:
        try:
            steps = update_step_at(steps, index, field, value)
        except IndexError as e:
            parser.error(str(e))

    try:
        session = await run_automation(args.url, steps, headless=not args.headed)
    except RunFailedError as e:
        print(f"Run failed: {e}", file=sys.stderr)
        return 1

    for number, result in enumerate(session.results, start=1):
        line = f"{number:>3}. [{result.status:<7}] {result.action} {result.xpath}"
        if result.error:
            line += f" -> {result.error}"
        print(line)
    print(f"Report: {session.run_dir / 'result.html'}")
    return 0 if all(r.succeeded for r in session.results) else 2


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
