"""Parse uploaded delimited-text step files into steps."""
import csv
import io

from backend.core.errors import StepFileError
from backend.models.step import Step

REQUIRED_COLUMNS = ("action", "xpath")
_DELIMITERS = (",", ";", "\t", "|")


def detect_delimiter(header_line: str) -> str:
    """Pick the candidate delimiter that occurs most often in the header row."""
    counts = {d: header_line.count(d) for d in _DELIMITERS}
    best = max(_DELIMITERS, key=lambda d: counts[d])
    return best if counts[best] else ","


def _cell(row: dict, key: str) -> str:
    value = row.get(key)
    return value.strip() if isinstance(value, str) else ""


def parse_steps_csv(text: str) -> list[Step]:
    """Turn a header-row CSV (action, xpath[, value]) into an ordered list of steps.

    Fields are trimmed, blank lines skipped and a blank ``value`` is treated
    as absent.
    """
    text = text.lstrip("\ufeff").lstrip("\r\n")
    if not text.strip():
        return []

    first_line = text.splitlines()[0]
    reader = csv.DictReader(io.StringIO(text), delimiter=detect_delimiter(first_line))
    header = [(name or "").strip().lower() for name in reader.fieldnames or []]
    missing = [col for col in REQUIRED_COLUMNS if col not in header]
    if missing:
        raise StepFileError(f"Step file is missing required column(s): {', '.join(missing)}")
    reader.fieldnames = header

    steps = []
    for row in reader:
        if not any(_cell(row, col) for col in header):
            continue
        steps.append(Step(
            action=_cell(row, "action"),
            xpath=_cell(row, "xpath"),
            value=_cell(row, "value") or None,
        ))
    return steps
