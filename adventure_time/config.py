"""Runtime settings read from environment variables.

    ROLL_TO_NEXT_DAY_IF_PAST  move a confirmed time that already passed to tomorrow
    TIME_FORMAT               strftime pattern for displayed times (default "%I:%M %p")
    LOG_LEVEL                 root log level used by the launcher (default "INFO")

Values from a .env file are picked up once the caller has run load_dotenv().
"""

import os
from typing import Any

from adventure_time.schedule import DEFAULT_TIME_FORMAT

_CONFIG_DEFAULTS: dict[str, Any] = {
    "roll_to_next_day_if_past": False,
    "time_format": DEFAULT_TIME_FORMAT,
    "log_level": "INFO",
}

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in _TRUTHY


def get_config() -> dict[str, Any]:
    """Read config, returning defaults merged with environment values."""
    config = dict(_CONFIG_DEFAULTS)
    config["roll_to_next_day_if_past"] = _env_flag(
        "ROLL_TO_NEXT_DAY_IF_PAST", _CONFIG_DEFAULTS["roll_to_next_day_if_past"]
    )
    if os.getenv("TIME_FORMAT"):
        config["time_format"] = os.environ["TIME_FORMAT"]
    if os.getenv("LOG_LEVEL"):
        config["log_level"] = os.environ["LOG_LEVEL"].upper()
    return config


def merge_config(fields: dict[str, Any]) -> dict[str, Any]:
    """Overlay known keys from `fields` on the defaults. Unknown keys are ignored."""
    config = dict(_CONFIG_DEFAULTS)
    for key, value in fields.items():
        if key in config:
            config[key] = value
    return config
