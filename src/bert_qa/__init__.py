# Dataset
from .dataset import DataSet, DataSetDocument, LoadDataSetClient, LoadError, Passage

# Engine
from .engine import (
    Delegate,
    EngineInitError,
    EngineOptions,
    InferenceError,
    QaAnswer,
    QaEngineError,
    QuestionAnswerer,
    create_question_answerer,
)

# Highlighting
from .highlight import HighlightSpan, highlight, highlight_answer, mark

# Observability
from .observability import MetricsHook, NoOpMetricsHook

# Screens
from .screen import DatasetScreen, QaScreen

# Session
from .session import (
    AnswererListener,
    AnswerResult,
    EngineReady,
    EngineState,
    InitError,
    QaSession,
    QaSettings,
    SessionConfig,
    UnsupportedDelegateWarning,
    load_settings,
)

__all__ = [
    # Dataset
    "DataSet",
    "DataSetDocument",
    "LoadDataSetClient",
    "LoadError",
    "Passage",
    # Engine
    "Delegate",
    "EngineInitError",
    "EngineOptions",
    "InferenceError",
    "QaAnswer",
    "QaEngineError",
    "QuestionAnswerer",
    "create_question_answerer",
    # Highlighting
    "HighlightSpan",
    "highlight",
    "highlight_answer",
    "mark",
    # Observability
    "MetricsHook",
    "NoOpMetricsHook",
    # Screens
    "DatasetScreen",
    "QaScreen",
    # Session
    "AnswererListener",
    "AnswerResult",
    "EngineReady",
    "EngineState",
    "InitError",
    "QaSession",
    "QaSettings",
    "SessionConfig",
    "UnsupportedDelegateWarning",
    "load_settings",
]
