"""
UI Step Runner FastAPI Application Entry Point
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from backend.logger import logger
from backend.config import DEBUG, SCREENSHOTS_DIR, SCREENSHOTS_URL_PREFIX
from backend.middleware import register_exception_handlers
from backend import auth
from backend.api import automation, runs, ui

VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown."""
    logger.info("UI Step Runner starting up...")
    if not auth._API_KEY:
        logger.warning("AUTOMATION_API_KEY not set, API routes are unauthenticated")
    SCREENSHOTS_DIR.mkdir(parents=True, exist_ok=True)
    logger.info("Serving screenshots from %s at %s", SCREENSHOTS_DIR, SCREENSHOTS_URL_PREFIX)
    yield
    logger.info("UI Step Runner shutting down...")


app = FastAPI(
    title="UI Step Runner",
    description="Replay UI interaction steps in a browser and report screenshots",
    version=VERSION,
    lifespan=lifespan,
    docs_url="/docs" if DEBUG else None,
    redoc_url="/redoc" if DEBUG else None,
)

# Unified error handling
register_exception_handlers(app)

# CORS for a form hosted elsewhere (AUTOMATION_API_BASE_URL)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers (auth on API routers only; the form page and screenshots are public)
_auth_deps = [Depends(auth.verify_api_key)]
app.include_router(automation.router, prefix="/api", tags=["Automation"], dependencies=_auth_deps)
app.include_router(runs.router, prefix="/api/runs", tags=["Runs"], dependencies=_auth_deps)
app.include_router(ui.router, tags=["UI"])

app.mount(SCREENSHOTS_URL_PREFIX, StaticFiles(directory=SCREENSHOTS_DIR, check_dir=False), name="screenshots")


@app.get("/api")
async def root():
    return {"message": "UI Step Runner API", "version": VERSION, "docs": "/docs"}


@app.get("/health")
async def health_check():
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    from backend.config import HOST, PORT
    uvicorn.run("backend.main:app", host=HOST, port=PORT, reload=DEBUG)
