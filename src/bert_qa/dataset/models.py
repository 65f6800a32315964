# src/bert_qa/dataset/models.py

from collections.abc import Iterator
from dataclasses import dataclass

from pydantic import BaseModel, model_validator


class DataSetDocument(BaseModel):
    """Raw shape of the bundled dataset document.

    Three parallel arrays. Each entry is a list of strings whose first
    element is the canonical value; the remaining elements are variants
    that are never materialized.
    """

    titles: list[list[str]]
    contents: list[list[str]]
    questions: list[list[str]]

    class Config:
        extra = "ignore"

    @model_validator(mode="after")
    def _check_parallel(self) -> "DataSetDocument":
        lengths = {len(self.titles), len(self.contents), len(self.questions)}
        if len(lengths) != 1:
            raise ValueError(
                "titles, contents and questions must have the same length "
                f"(got {len(self.titles)}, {len(self.contents)}, {len(self.questions)})"
            )
        for field_name in ("titles", "contents"):
            for index, variants in enumerate(getattr(self, field_name)):
                if not variants:
                    raise ValueError(f"{field_name}[{index}] is empty")
        return self


@dataclass(frozen=True)
class Passage:
    title: str
    body: str
    suggested_questions: tuple[str, ...]


@dataclass(frozen=True)
class LoadError:
    """Dataset could not be read or parsed. Non-fatal."""

    message: str
    source: str


class DataSet:
    """Immutable, position-indexed collection of passages."""

    def __init__(
        self,
        titles: list[list[str]],
        contents: list[list[str]],
        questions: list[list[str]],
    ) -> None:
        self._titles = tuple(tuple(t) for t in titles)
        self._contents = tuple(tuple(c) for c in contents)
        self._questions = tuple(tuple(q) for q in questions)
        self._passages = tuple(
            Passage(title=t[0], body=c[0], suggested_questions=q)
            for t, c, q in zip(self._titles, self._contents, self._questions)
        )

    @classmethod
    def from_document(cls, document: DataSetDocument) -> "DataSet":
        return cls(document.titles, document.contents, document.questions)

    @classmethod
    def empty(cls) -> "DataSet":
        return cls([], [], [])

    def get_titles(self) -> list[str]:
        return [passage.title for passage in self._passages]

    def get_contents(self) -> list[str]:
        return [passage.body for passage in self._passages]

    @property
    def questions(self) -> list[list[str]]:
        return [list(q) for q in self._questions]

    @property
    def passages(self) -> tuple[Passage, ...]:
        return self._passages

    def __len__(self) -> int:
        return len(self._passages)

    def __getitem__(self, index: int) -> Passage:
        if not 0 <= index < len(self._passages):
            raise IndexError(
                f"Passage index {index} out of range for {len(self._passages)} passages"
            )
        return self._passages[index]

    def __iter__(self) -> Iterator[Passage]:
        return iter(self._passages)

    def __repr__(self) -> str:
        return f"DataSet(passages={len(self._passages)})"
