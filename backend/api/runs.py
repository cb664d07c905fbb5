"""Run History API Routes"""
from typing import List

from fastapi import APIRouter, HTTPException, Query

from backend.schemas.automation import RunDetail, RunSummary
from backend.services import run_service

router = APIRouter()


@router.get("/", response_model=List[RunSummary])
async def list_runs(limit: int = Query(50, ge=1, le=500)):
    return run_service.list_runs(limit)


@router.get("/{session_id}", response_model=RunDetail)
async def get_run(session_id: str):
    run = run_service.get_run(session_id)
    if not run:
        raise HTTPException(status_code=404, detail="Run not found")
    return run
