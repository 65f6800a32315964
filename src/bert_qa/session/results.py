# src/bert_qa/session/results.py

from dataclasses import dataclass, field
from typing import Protocol

from bert_qa.engine.base import Delegate, QaAnswer


@dataclass(frozen=True)
class UnsupportedDelegateWarning:
    """Requested acceleration is unavailable; the engine runs on CPU."""

    message: str
    requested: Delegate


@dataclass(frozen=True)
class EngineReady:
    delegate: Delegate
    warnings: tuple[UnsupportedDelegateWarning, ...] = ()


@dataclass(frozen=True)
class InitError:
    """Engine construction failed. Retried lazily on the next answer."""

    message: str


InitOutcome = EngineReady | InitError


@dataclass(frozen=True)
class AnswerResult:
    """Outcome of one answer call.

    Candidates are ranked highest score first. An empty list with an
    error means no answer could be produced.
    """

    candidates: list[QaAnswer] = field(default_factory=list)
    elapsed_ms: int = 0
    error: str | None = None

    @property
    def best(self) -> QaAnswer | None:
        return self.candidates[0] if self.candidates else None

    @property
    def ok(self) -> bool:
        return self.error is None


class AnswererListener(Protocol):
    """Receives the same outcomes the session returns."""

    def on_error(self, message: str) -> None: ...

    def on_results(self, candidates: list[QaAnswer], elapsed_ms: int) -> None: ...
