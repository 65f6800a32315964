# src/bert_qa/engine/base.py

from dataclasses import dataclass
from enum import Enum
from typing import Literal, Protocol

Backend = Literal["transformers"]

DEFAULT_MODEL = "csarron/mobilebert-uncased-squad-v2"


class Delegate(int, Enum):
    """Hardware backend used to run the engine.

    Values match a delegate picker's positions.
    """

    CPU = 0
    GPU = 1
    NNAPI = 2


@dataclass(frozen=True)
class QaAnswer:
    """One ranked answer candidate.

    start/end are character offsets into the passage the question was asked
    against.
    """

    text: str
    score: float
    start: int
    end: int


@dataclass(frozen=True)
class EngineOptions:
    """Everything needed to build one engine instance.

    Immutable. Built by the session from its current configuration.
    """

    model: str = DEFAULT_MODEL
    num_threads: int = 2
    use_gpu: bool = False
    use_nnapi: bool = False
    top_k: int = 3
    max_answer_len: int = 32
    backend: Backend = "transformers"


class QaEngineError(Exception):
    """Base class for errors raised by engine adapters."""


class EngineInitError(QaEngineError):
    """The engine could not be constructed (missing or corrupt model)."""


class InferenceError(QaEngineError):
    """The engine failed while answering a question."""


class QuestionAnswerer(Protocol):
    """Protocol for loaded question-answering engines.

    Adapters wrap an external inference library. Library objects never
    escape the adapter; library errors surface as QaEngineError subclasses.
    """

    options: EngineOptions

    def answer(self, context: str, question: str) -> list[QaAnswer]:
        """Answer a question about a passage.

        Returns:
            Candidates ordered by score, highest first. May be empty.

        Raises:
            InferenceError: If the underlying library fails.
        """
        ...
