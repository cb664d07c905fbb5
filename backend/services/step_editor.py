"""Step list editing: add, update and remove steps without mutating them."""
from typing import Optional, Sequence

from backend.models.step import Step, StepAction, StepField


def new_step() -> Step:
    """The blank step the form appends when a user adds a row."""
    return Step(action=StepAction.CLICK.value, xpath="", value=None)


def add_step(steps: Sequence[Step], step: Optional[Step] = None) -> list[Step]:
    return [*steps, step or new_step()]


def update_step(step: Step, field: StepField, value: Optional[str]) -> Step:
    """Return a copy of ``step`` with one field replaced.

    A blank ``value`` is stored as absent; ``action`` and ``xpath`` are never None.
    """
    field = StepField(field)
    if field is StepField.VALUE:
        return step.model_copy(update={"value": value or None})
    return step.model_copy(update={field.value: value or ""})


def update_step_at(steps: Sequence[Step], index: int, field: StepField, value: Optional[str]) -> list[Step]:
    if not 0 <= index < len(steps):
        raise IndexError(f"Step index {index} out of range (0..{len(steps) - 1})")
    updated = list(steps)
    updated[index] = update_step(steps[index], field, value)
    return updated


def remove_step(steps: Sequence[Step], index: int) -> list[Step]:
    if not 0 <= index < len(steps):
        raise IndexError(f"Step index {index} out of range (0..{len(steps) - 1})")
    return [s for i, s in enumerate(steps) if i != index]
