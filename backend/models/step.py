"""
Pydantic models for automation steps and their results
"""
from enum import Enum
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class StepAction(str, Enum):
    CLICK = "click"
    FILL = "fill"
    WAIT = "wait"
    VALIDATE = "validate"
    ASSERT_URL = "assert-url"
    SELECT = "select"
    SCROLL = "scroll"


class StepField(str, Enum):
    """Fields of a step that the form lets a user edit."""
    ACTION = "action"
    XPATH = "xpath"
    VALUE = "value"


StepStatus = Literal["success", "failure"]


class Step(BaseModel):
    model_config = ConfigDict(frozen=True)

    # Kept as a plain string so unknown actions fail at execution time
    action: str
    xpath: str = ""
    value: Optional[str] = None


class StepResult(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    action: str
    xpath: str
    value: Optional[str] = None
    status: StepStatus
    screenshot_url: Optional[str] = None
    error: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.status == "success"


class RunSession(BaseModel):
    """One end-to-end execution of a step list against one browser session."""
    session_id: str
    url: str
    steps: list[Step]
    run_dir: Path
    results: list[StepResult] = Field(default_factory=list)
    report_url: Optional[str] = None
