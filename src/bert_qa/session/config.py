# src/bert_qa/session/config.py

from dataclasses import dataclass

from bert_qa.engine.base import Delegate

MIN_THREADS = 1
MAX_THREADS = 4


@dataclass(frozen=True)
class SessionConfig:
    """Thread count and delegate for one question-answering session.

    Immutable. A session swaps the whole value on every change.
    delegate may hold an unrecognized integer (e.g. a stale picker
    position); the session treats it as CPU when building the engine.
    """

    num_threads: int = 2
    delegate: Delegate | int = Delegate.CPU

    def __post_init__(self) -> None:
        if not MIN_THREADS <= self.num_threads <= MAX_THREADS:
            raise ValueError(
                f"num_threads must be between {MIN_THREADS} and {MAX_THREADS}, "
                f"got {self.num_threads}"
            )
