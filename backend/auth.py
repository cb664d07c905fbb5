"""
UI Step Runner API Key Authentication
"""
import hmac
import os
from fastapi import HTTPException, Request

_API_KEY = os.getenv("AUTOMATION_API_KEY", "")


async def verify_api_key(request: Request):
    """Router dependency: verify the x-api-key header if AUTOMATION_API_KEY is set."""
    if not _API_KEY:
        return  # auth disabled
    api_key = request.headers.get("x-api-key")
    if api_key and hmac.compare_digest(api_key, _API_KEY):
        return
    raise HTTPException(status_code=401, detail="Invalid or missing API key")
