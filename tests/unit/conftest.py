# tests/unit/conftest.py

from collections.abc import Callable

import pytest

from bert_qa.engine.base import EngineInitError, EngineOptions, QaAnswer

PASSAGE = "Paris is the capital of France."


class FakeEngine:
    def __init__(self, options: EngineOptions, answers: list[QaAnswer]) -> None:
        self.options = options
        self.answers = answers
        self.calls: list[tuple[str, str]] = []

    def answer(self, context: str, question: str) -> list[QaAnswer]:
        self.calls.append((context, question))
        return list(self.answers)


class FakeEngineFactory:
    """Records every engine build. Fails while `fail` is set."""

    def __init__(self, answers: list[QaAnswer] | None = None) -> None:
        if answers is None:
            answers = [
                QaAnswer(text="Paris", score=0.9, start=0, end=5),
                QaAnswer(text="France", score=0.1, start=24, end=30),
            ]
        self.answers = answers
        self.built: list[FakeEngine] = []
        self.options: list[EngineOptions] = []
        self.fail = False

    def __call__(self, options: EngineOptions) -> FakeEngine:
        self.options.append(options)
        if self.fail:
            raise EngineInitError(f"model '{options.model}' not found")
        engine = FakeEngine(options, self.answers)
        self.built.append(engine)
        return engine


class FakePlatform:
    def __init__(self, gpu: bool = True, nnapi: bool = True) -> None:
        self.gpu = gpu
        self.nnapi = nnapi

    def is_gpu_supported(self) -> bool:
        return self.gpu

    def is_nnapi_supported(self) -> bool:
        return self.nnapi


class RecordingMetricsHook:
    """Keeps every metric in memory. Counters are summed per name."""

    def __init__(self) -> None:
        self.latencies: list[tuple[str, float, dict[str, str]]] = []
        self.counters: dict[str, int] = {}
        self.gauges: dict[str, float] = {}

    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        self.latencies.append((name, value_ms, dict(labels or {})))

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        self.counters[name] = self.counters.get(name, 0) + value

    def record_gauge(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        self.gauges[name] = value


class RecordingListener:
    def __init__(self) -> None:
        self.errors: list[str] = []
        self.results: list[tuple[list[QaAnswer], int]] = []

    def on_error(self, message: str) -> None:
        self.errors.append(message)

    def on_results(self, candidates: list[QaAnswer], elapsed_ms: int) -> None:
        self.results.append((candidates, elapsed_ms))


@pytest.fixture
def passage() -> str:
    return PASSAGE


@pytest.fixture
def engine_factory() -> FakeEngineFactory:
    return FakeEngineFactory()


@pytest.fixture
def make_platform() -> Callable[..., FakePlatform]:
    return FakePlatform


@pytest.fixture
def listener() -> RecordingListener:
    return RecordingListener()


@pytest.fixture
def metrics_hook() -> RecordingMetricsHook:
    return RecordingMetricsHook()
