"""
UI Step Runner Logging Module

One stdout handler lives on the ``step_runner`` logger; components log
through children of it (``step_runner.steps``, ``step_runner.browser``...)
so a run's lines can be told apart and filtered by component.
"""
import logging
import os
import sys

ROOT_LOGGER_NAME = "step_runner"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _configure(root: logging.Logger) -> None:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    root.addHandler(handler)
    level_name = os.getenv("AUTOMATION_LOG_LEVEL", "INFO").upper()
    root.setLevel(getattr(logging, level_name, logging.INFO))


def get_logger(component: str | None = None) -> logging.Logger:
    """Logger for ``component``; the shared handler is installed on first use."""
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not root.handlers:
        _configure(root)
    if not component:
        return root
    return root.getChild(component)


logger = get_logger()
