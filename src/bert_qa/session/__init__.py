# src/bert_qa/session/__init__.py

"""Question-answering session lifecycle.

A session owns one configuration and lazily builds the engine from it.
Changing the configuration drops the engine; the next answer rebuilds it.

Example:
    >>> from bert_qa.session import QaSession
    >>> from bert_qa.engine import Delegate
    >>>
    >>> session = QaSession()
    >>> session.configure(num_threads=4, delegate=Delegate.GPU)
    >>> result = session.answer(passage, "What is the capital of France?")
    >>> print(result.best.text, result.elapsed_ms)
"""

from .config import MAX_THREADS, MIN_THREADS, SessionConfig
from .manager import EngineFactory, EngineState, QaSession
from .results import (
    AnswererListener,
    AnswerResult,
    EngineReady,
    InitError,
    InitOutcome,
    UnsupportedDelegateWarning,
)
from .settings import QaSettings, load_settings

__all__ = [
    # Session
    "QaSession",
    "EngineFactory",
    "EngineState",
    # Config
    "MAX_THREADS",
    "MIN_THREADS",
    "SessionConfig",
    "QaSettings",
    "load_settings",
    # Results
    "AnswererListener",
    "AnswerResult",
    "EngineReady",
    "InitError",
    "InitOutcome",
    "UnsupportedDelegateWarning",
]
