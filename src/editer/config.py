"""
--------------------------------------------------------------------------------
<editer project>
editer/config.py

Process-wide settings for walks. Nothing here runs on its own: the walk only
consults `active_settings()`, and the environment is read solely when an
application calls `configure()`:

  EDITER_TRACE      : "1/true/on/yes" logs one line per visited position
  EDITER_LOG_LEVEL  : level of the editer.* loggers (DEBUG adds walk summaries)

Module Author(s): Eric J. South
Dunlop Lab
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import logging
import os
from typing import Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from ._logging import setup_console_logging
from .errors import ConfigError

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]

_TRUTHY = {"1", "true", "on", "yes"}
_FALSY = {"0", "false", "off", "no", ""}


class EditerSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    trace: bool = False
    log_level: LogLevel = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper(cls, v):
        return v.upper() if isinstance(v, str) else v


_ACTIVE = EditerSettings()


def _parse_flag(name: str, raw: str) -> bool:
    val = raw.strip().lower()
    if val in _TRUTHY:
        return True
    if val in _FALSY:
        return False
    raise ConfigError(f"{name} must be one of 1/0, true/false, on/off, yes/no (got {raw!r})")


def load_settings(env: Optional[Mapping[str, str]] = None) -> EditerSettings:
    env = os.environ if env is None else env
    values = {}
    if "EDITER_TRACE" in env:
        values["trace"] = _parse_flag("EDITER_TRACE", env["EDITER_TRACE"])
    if env.get("EDITER_LOG_LEVEL"):
        values["log_level"] = env["EDITER_LOG_LEVEL"].strip()
    try:
        return EditerSettings(**values)
    except ValidationError as e:
        raise ConfigError(f"Invalid editer settings: {e}") from e


def active_settings() -> EditerSettings:
    return _ACTIVE


def _apply_level(level: str) -> None:
    # child loggers from get_logger() carry their own level, so set each one
    names = [
        n
        for n in logging.root.manager.loggerDict
        if n == "editer" or n.startswith("editer.")
    ]
    for name in ["editer", *names]:
        logging.getLogger(name).setLevel(level)


def configure(
    settings: Union[EditerSettings, Mapping[str, str], None] = None,
    *,
    console: bool = False,
    json_logs: bool = False,
) -> EditerSettings:
    """
    Install process-wide settings; application entry points call this once.

    settings : EditerSettings to use as-is, a mapping read like the
               environment, or None to read os.environ
    console  : also route the root logger to the console (rich, or JSON lines
               when `json_logs`) at the configured level

    Invalid values raise ConfigError and leave the active settings unchanged.
    """
    global _ACTIVE
    if not isinstance(settings, EditerSettings):
        settings = load_settings(settings)
    _ACTIVE = settings
    _apply_level(settings.log_level)
    if console:
        setup_console_logging(settings.log_level, json_logs=json_logs)
    return settings


def reset() -> None:
    """Back to defaults (trace off); logger levels are left as they are."""
    global _ACTIVE
    _ACTIVE = EditerSettings()
