# config.py

import os


def _env_flag(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_timeout(name):
    value = os.environ.get(name, "").strip()
    if not value:
        return None # requests waits forever when timeout is None
    return float(value)


# REST API Configuration
# Point this at the todo server (it listens on 127.0.0.1:3030 by default).
API_BASE_URL = os.environ.get("TODO_API_URL", "http://127.0.0.1:3030").rstrip("/")
TODOS_PATH = "/todos"
REQUEST_TIMEOUT = _env_timeout("TODO_API_TIMEOUT") # Seconds, or None

# Form Configuration
PRIORITIES = ("Low", "Medium", "High")
DEFAULT_PRIORITY = "Low"
ENABLE_DUE_DATE = _env_flag("TODO_DUE_DATE") # Show the optional due date field on the add form

# Logging
LOG_LEVEL = os.environ.get("TODO_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
