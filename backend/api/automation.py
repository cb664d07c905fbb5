"""Automation Run API Routes"""
from fastapi import APIRouter, File, HTTPException, UploadFile

from backend.config import MAX_UPLOAD_BYTES
from backend.core.errors import StepFileError
from backend.core.step_csv import parse_steps_csv
from backend.logger import logger
from backend.schemas.automation import AutomationResponse, ParsedStepsResponse, RunAutomationRequest
from backend.services import automation_service

router = APIRouter()


@router.post("/run-automation", response_model=AutomationResponse, response_model_exclude_none=True)
async def run_automation(request: RunAutomationRequest):
    """Replay the submitted steps against the URL and return per-step results."""
    if not request.url or request.steps is None:
        raise HTTPException(status_code=400, detail="Missing parameters")

    session = await automation_service.run_automation(request.url, request.steps, request.headless)
    return AutomationResponse(
        status="success",
        message="Automation completed!",
        report_url=session.report_url,
        step_results=session.results,
    )


@router.post("/steps/parse", response_model=ParsedStepsResponse)
async def parse_step_file(file: UploadFile = File(..., description="CSV with action, xpath, value columns")):
    """Parse an uploaded step file into the step list the form submits."""
    content = await file.read(MAX_UPLOAD_BYTES + 1)
    if len(content) > MAX_UPLOAD_BYTES:
        raise HTTPException(status_code=400, detail=f"Step file too large (max {MAX_UPLOAD_BYTES} bytes)")
    try:
        text = content.decode("utf-8")
    except UnicodeDecodeError:
        raise HTTPException(status_code=400, detail="Step file must be UTF-8 text")
    try:
        steps = parse_steps_csv(text)
    except StepFileError as e:
        raise HTTPException(status_code=400, detail=str(e))
    logger.info("Parsed %d steps from %s", len(steps), file.filename)
    return ParsedStepsResponse(steps=steps)
