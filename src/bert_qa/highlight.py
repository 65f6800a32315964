# src/bert_qa/highlight.py

"""Locate an answer inside its passage for visual emphasis."""

from dataclasses import dataclass

from bert_qa.engine.base import QaAnswer


@dataclass(frozen=True)
class HighlightSpan:
    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start


def highlight(body: str, answer_text: str) -> HighlightSpan | None:
    """First case-sensitive occurrence of answer_text in body.

    Returns None when the text does not occur verbatim or is empty.
    """
    if not answer_text:
        return None
    start = body.find(answer_text)
    if start < 0:
        return None
    return HighlightSpan(start=start, end=start + len(answer_text))


def highlight_answer(body: str, candidate: QaAnswer) -> HighlightSpan | None:
    """Highlight a candidate, preferring the offsets the engine reported.

    Engine offsets are used only when they select exactly the candidate's
    text; otherwise this falls back to a first-occurrence search.
    """
    start, end = candidate.start, candidate.end
    if 0 <= start < end <= len(body) and body[start:end] == candidate.text:
        return HighlightSpan(start=start, end=end)
    return highlight(body, candidate.text)


def mark(
    body: str,
    span: HighlightSpan | None,
    prefix: str = "[[",
    suffix: str = "]]",
) -> str:
    if span is None:
        return body
    return (
        body[: span.start]
        + prefix
        + body[span.start : span.end]
        + suffix
        + body[span.end :]
    )
