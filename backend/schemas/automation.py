"""Request/Response schemas for automation endpoints."""
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from backend.models.step import Step, StepResult


# ── Request schemas ───────────────────────────────────────────────────────

class RunAutomationRequest(BaseModel):
    # Optional so a missing field becomes a 400 "Missing parameters" instead of a 422
    url: Optional[str] = None
    steps: Optional[list[Step]] = None
    headless: bool = True


# ── Response schemas ──────────────────────────────────────────────────────

class AutomationResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    status: Literal["success", "error"]
    message: str
    report_url: Optional[str] = None
    step_results: Optional[list[StepResult]] = None


class ParsedStepsResponse(BaseModel):
    steps: list[Step]


class RunSummary(BaseModel):
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    session_id: str
    report_url: str
    created_at: float


class RunDetail(RunSummary):
    screenshot_urls: list[str]
