# src/bert_qa/engine/transformers.py

from __future__ import annotations

import logging
from time import monotonic
from typing import Any

import torch
from transformers import pipeline

from .base import EngineInitError, EngineOptions, InferenceError, QaAnswer

logger = logging.getLogger(__name__)


class TransformersQuestionAnswerer:
    """
    Question answering through the Hugging Face question-answering pipeline.

    This is a thin wrapper:
    - tokenization and span decoding stay inside transformers
    - returns plain QaAnswer objects
    - no caching, no retries
    """

    def __init__(self, options: EngineOptions) -> None:
        self.options = options
        device = _device_for(options)

        # torch applies intra-op threads process-wide
        torch.set_num_threads(options.num_threads)

        start = monotonic()
        try:
            self._pipeline = pipeline(
                "question-answering",
                model=options.model,
                tokenizer=options.model,
                device=device,
            )
        except (OSError, ImportError, ValueError, RuntimeError) as e:
            logger.error("Failed to load model %s: %s", options.model, e)
            raise EngineInitError(
                f"Failed to load question answering model '{options.model}'"
            ) from e

        logger.info(
            "Initialized TransformersQuestionAnswerer with model=%s, device=%s, "
            "num_threads=%s in %.0f ms",
            options.model,
            device,
            options.num_threads,
            1000 * (monotonic() - start),
        )

    def answer(self, context: str, question: str) -> list[QaAnswer]:
        logger.debug(
            "Answering question (%d chars) against passage (%d chars)",
            len(question),
            len(context),
        )
        try:
            raw = self._pipeline(
                question=question,
                context=context,
                top_k=self.options.top_k,
                max_answer_len=self.options.max_answer_len,
            )
        except (ValueError, RuntimeError, KeyError) as e:
            logger.error("Inference failed: %s", e)
            raise InferenceError(f"Question answering failed: {e}") from e

        answers = [_to_answer(item) for item in _as_list(raw)]
        answers.sort(key=lambda a: a.score, reverse=True)
        return answers


def _device_for(options: EngineOptions) -> str:
    if options.use_gpu:
        return "cuda:0"
    if options.use_nnapi:
        return "mps"
    return "cpu"


def _as_list(raw: Any) -> list[dict[str, Any]]:
    # The pipeline returns a bare dict when only one answer is requested
    if isinstance(raw, dict):
        return [raw]
    return list(raw)


def _to_answer(item: dict[str, Any]) -> QaAnswer:
    return QaAnswer(
        text=item["answer"],
        score=float(item["score"]),
        start=int(item["start"]),
        end=int(item["end"]),
    )
