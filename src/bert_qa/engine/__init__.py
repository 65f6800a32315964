# src/bert_qa/engine/__init__.py

"""Inference engine boundary for bert-qa.

The model, tokenizer and answer-span decoding live in an external
library. This package only configures it and normalizes its output.

Example:
    >>> from bert_qa.engine import EngineOptions, create_question_answerer
    >>>
    >>> engine = create_question_answerer(EngineOptions(num_threads=4))
    >>> answers = engine.answer(context, question)
    >>> print(answers[0].text)
"""

from .base import (
    DEFAULT_MODEL,
    Delegate,
    EngineInitError,
    EngineOptions,
    InferenceError,
    QaAnswer,
    QaEngineError,
    QuestionAnswerer,
)
from .factory import create_question_answerer
from .platform import Platform, TorchPlatform

__all__ = [
    # Factory
    "create_question_answerer",
    # Protocols
    "QuestionAnswerer",
    "Platform",
    "TorchPlatform",
    # Config
    "DEFAULT_MODEL",
    "Delegate",
    "EngineOptions",
    # Types
    "QaAnswer",
    # Errors
    "QaEngineError",
    "EngineInitError",
    "InferenceError",
]
