"""Form page served at the application root."""
import json
from functools import lru_cache
from pathlib import Path
from string import Template

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from backend.config import API_BASE_URL
from backend.models.step import StepAction

router = APIRouter()

_TEMPLATE_PATH = Path(__file__).resolve().parent.parent / "templates" / "form.html"


@lru_cache(maxsize=1)
def _load_template() -> Template:
    return Template(_TEMPLATE_PATH.read_text(encoding="utf-8"))


def render_form(api_base_url: str | None = None) -> str:
    """Form HTML with the backend base URL and action list filled in."""
    if api_base_url is None:
        api_base_url = API_BASE_URL
    return _load_template().safe_substitute(
        api_base_url=json.dumps(api_base_url),
        actions=json.dumps([a.value for a in StepAction]),
    )


@router.get("/", response_class=HTMLResponse)
async def form_page():
    return HTMLResponse(content=render_form())
