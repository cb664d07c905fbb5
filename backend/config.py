"""
UI Step Runner Backend Configuration
"""
import os
from pathlib import Path

# Base paths
BASE_DIR = Path(__file__).resolve().parent.parent
PUBLIC_DIR = BASE_DIR / "public"
SCREENSHOTS_DIR = Path(os.getenv("AUTOMATION_SCREENSHOTS_DIR", str(PUBLIC_DIR / "screenshots")))
SCREENSHOTS_URL_PREFIX = "/screenshots"

# Ensure directories exist
SCREENSHOTS_DIR.mkdir(parents=True, exist_ok=True)

# Server config
HOST = os.getenv("AUTOMATION_HOST", "0.0.0.0")
PORT = int(os.getenv("AUTOMATION_PORT", "8000"))
DEBUG = os.getenv("AUTOMATION_DEBUG", "true").lower() == "true"

# Base URL the form page posts to; empty means same origin
API_BASE_URL = os.getenv("AUTOMATION_API_BASE_URL", "").rstrip("/")

# Browser settings (milliseconds)
ACTION_TIMEOUT_MS = int(os.getenv("AUTOMATION_ACTION_TIMEOUT_MS", "5000"))
NAVIGATION_TIMEOUT_MS = int(os.getenv("AUTOMATION_NAVIGATION_TIMEOUT_MS", "30000"))
DEFAULT_WAIT_TIMEOUT_MS = 5000

# Step file uploads
MAX_UPLOAD_BYTES = int(os.getenv("AUTOMATION_MAX_UPLOAD_BYTES", str(1024 * 1024)))
