# src/bert_qa/session/settings.py

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from bert_qa.engine.base import DEFAULT_MODEL, Delegate

from .config import MAX_THREADS, MIN_THREADS, SessionConfig

logger = logging.getLogger(__name__)


class QaSettings(BaseModel):
    """File-backed defaults for a question-answering session.

    Explicit. Nothing is read from the environment.
    """

    model: str = DEFAULT_MODEL
    num_threads: int = Field(default=2, ge=MIN_THREADS, le=MAX_THREADS)
    delegate: Delegate = Delegate.CPU
    top_k: int = Field(default=3, ge=1)
    max_answer_len: int = Field(default=32, ge=1)
    dataset_path: str | None = None

    class Config:
        extra = "forbid"

    @field_validator("delegate", mode="before")
    @classmethod
    def _parse_delegate(cls, value: Any) -> Any:
        # Accept "gpu" / "GPU" as well as picker positions
        if not isinstance(value, str):
            return value
        if value.isdigit():
            return int(value)
        try:
            return Delegate[value.upper()]
        except KeyError:
            raise ValueError(f"Unknown delegate: {value}")

    def session_config(self) -> SessionConfig:
        return SessionConfig(num_threads=self.num_threads, delegate=self.delegate)


def load_settings(path: str | Path) -> QaSettings:
    """Load settings from a YAML file. An empty file yields the defaults."""
    file_path = Path(path)
    logger.info("Loading settings from %s", file_path)
    with open(file_path) as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Settings file {file_path} must contain a mapping")
    return QaSettings(**data)
