"""JSON-based settings persistence for the mini event calendar.

Only view preferences live here; events are kept in memory and are gone
when the application exits.
"""

import calendar
import json
import logging
import os

logger = logging.getLogger(__name__)

_DEFAULT_PATH = os.path.join(os.path.expanduser("~"), ".mini-event-calendar-settings.json")
_ENV_VAR = "MINI_EVENT_CALENDAR_SETTINGS"

_WEEKDAYS = {"sunday": calendar.SUNDAY, "monday": calendar.MONDAY}
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

_DEFAULTS = {
    "first_weekday": "sunday",
    "window_width": None,
    "window_height": None,
    "log_level": "INFO",
    "log_file": False,
}


def settings_path() -> str:
    return os.environ.get(_ENV_VAR) or _DEFAULT_PATH


def load_settings() -> dict:
    """Load settings from disk, returning defaults for missing keys."""
    settings = dict(_DEFAULTS)
    path = settings_path()
    try:
        with open(path, "r", encoding="utf-8") as f:
            stored = json.load(f)
    except FileNotFoundError:
        return settings
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Ignoring unreadable settings file %s: %s", path, exc)
        return settings
    if not isinstance(stored, dict):
        logger.warning("Ignoring settings file %s: not a JSON object", path)
        return settings

    if stored.get("first_weekday") in _WEEKDAYS:
        settings["first_weekday"] = stored["first_weekday"]
    for key in ("window_width", "window_height"):
        # bool is an int subclass; a stray true/false is not a size
        if isinstance(stored.get(key), int) and not isinstance(stored[key], bool):
            settings[key] = stored[key]
    if stored.get("log_level") in _LOG_LEVELS:
        settings["log_level"] = stored["log_level"]
    if isinstance(stored.get("log_file"), bool):
        settings["log_file"] = stored["log_file"]
    return settings


def save_settings(settings: dict) -> None:
    """Persist settings to disk."""
    with open(settings_path(), "w", encoding="utf-8") as f:
        json.dump(settings, f, indent=2)


def firstweekday_from_settings(settings: dict) -> int:
    """Map the ``first_weekday`` setting to a ``calendar`` weekday constant."""
    return _WEEKDAYS.get(settings.get("first_weekday"), calendar.SUNDAY)
