"""UI Step Runner API Routes"""
from backend.api import automation, runs, ui

__all__ = ["automation", "runs", "ui"]
