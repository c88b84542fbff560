from __future__ import annotations

import os
import logging
from zoneinfo import ZoneInfo

import dotenv
import tenacity
from pydantic import BaseModel, ConfigDict
from textual.logging import TextualHandler

from .formatter import LongStyleFormatter
from .persistent import Persistent

log = logging.getLogger(__name__)

ENV_PREFIX = 'LAP_COUNTER_'

class Settings(BaseModel):
    store: str = 'laps.json'
    timezone: str | None = None
    poll_seconds: float = 1.0
    read_attempts: int = 3
    log_level: str = 'INFO'

    model_config = ConfigDict(
        frozen=True,
    )

    @classmethod
    def fromEnv(cls) -> Settings:
        dotenv.load_dotenv(dotenv.find_dotenv(usecwd=True))
        raw = {}
        for name in cls.model_fields:
            value = os.getenv(ENV_PREFIX + name.upper())
            if value is not None and value != '':
                raw[name] = value
        return cls.model_validate(raw)

def initLogging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        handlers=[TextualHandler()],
    )

def initStore(settings: Settings, path: str | None = None) -> Persistent:
    decorator = tenacity.retry(
        retry=(
            tenacity.retry_if_exception_type(OSError)
        ),
        wait=(
            tenacity.wait_exponential(multiplier=0.05, max=1) +
            tenacity.wait_random(0, 0.1)
        ),
        stop=tenacity.stop_after_attempt(settings.read_attempts),
        before_sleep=tenacity.before_sleep_log(log, logging.WARNING),
        reraise=True,
    )

    store = Persistent(path or settings.store)
    store.loadFile = decorator(store.loadFile)  # type: ignore

    return store

def initFormatter(settings: Settings) -> LongStyleFormatter:
    if settings.timezone is None:
        return LongStyleFormatter()
    return LongStyleFormatter(ZoneInfo(settings.timezone))
