# src/bert_qa/screen.py

"""Headless controllers for the passage list and question screens.

They hold the state a UI would render and forward user actions to the
dataset loader and the session. No widgets live here.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from bert_qa.dataset.loader import LoadDataSetClient
from bert_qa.dataset.models import DataSet, Passage
from bert_qa.engine.base import Delegate, QaAnswer
from bert_qa.highlight import HighlightSpan, highlight, mark
from bert_qa.session.manager import QaSession
from bert_qa.session.results import AnswerResult

logger = logging.getLogger(__name__)

SessionFactory = Callable[[], QaSession]


class DatasetScreen:
    """Passage list. Loads the dataset once per activation."""

    def __init__(self, client: LoadDataSetClient) -> None:
        self._client = client
        self._dataset = DataSet.empty()

    def activate(self) -> DataSet:
        self._dataset = self._client.load_or_empty()
        return self._dataset

    @property
    def dataset(self) -> DataSet:
        return self._dataset

    @property
    def titles(self) -> list[str]:
        return self._dataset.get_titles()

    def open(self, position: int, session_factory: SessionFactory) -> QaScreen:
        return QaScreen(self._dataset, position, session_factory())


class QaScreen:
    """Passage detail with question input and answer highlighting.

    Acts as the session's listener: errors are queued as transient
    messages, results update the highlight and the inference time.
    """

    def __init__(self, dataset: DataSet, position: int, session: QaSession) -> None:
        passage: Passage = dataset[position]
        self.content = passage.body
        self.title = passage.title
        self.questions = list(passage.suggested_questions)
        self.question = ""
        self.highlighted: HighlightSpan | None = None
        self.inference_time_ms: int | None = None
        self.messages: list[str] = []

        self._session = session
        self._session.listener = self

    @property
    def session(self) -> QaSession:
        return self._session

    @property
    def can_ask(self) -> bool:
        return bool(self.question)

    @property
    def num_threads(self) -> int:
        return self._session.config.num_threads

    @property
    def inference_time_text(self) -> str:
        if self.inference_time_ms is None:
            return ""
        return f"{self.inference_time_ms} ms"

    @property
    def rendered_content(self) -> str:
        return mark(self.content, self.highlighted)

    def set_question(self, position: int) -> None:
        self.question = self.questions[position]

    def ask(self, question: str | None = None) -> AnswerResult | None:
        if question is not None:
            self.question = question
        if not self.can_ask:
            logger.debug("Ignoring ask with an empty question")
            return None
        self.highlighted = None
        self.inference_time_ms = None
        return self._session.answer(self.content, self.question)

    def threads_plus(self) -> int:
        self._session.increment_threads()
        return self.num_threads

    def threads_minus(self) -> int:
        self._session.decrement_threads()
        return self.num_threads

    def select_delegate(self, delegate: Delegate | int) -> None:
        self._session.select_delegate(delegate)

    def close(self) -> None:
        self._session.release()
        self._session.listener = None

    def on_error(self, message: str) -> None:
        self.messages.append(message)

    def on_results(self, candidates: list[QaAnswer], elapsed_ms: int) -> None:
        self.highlighted = (
            highlight(self.content, candidates[0].text) if candidates else None
        )
        self.inference_time_ms = elapsed_ms
