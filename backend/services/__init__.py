"""UI Step Runner Service Layer"""
from backend.services import (
    automation_service,
    run_service,
    step_editor,
)

__all__ = [
    "automation_service",
    "run_service",
    "step_editor",
]
