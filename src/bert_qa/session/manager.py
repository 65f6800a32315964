# src/bert_qa/session/manager.py

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum
from time import monotonic

from bert_qa.engine.base import (
    DEFAULT_MODEL,
    Delegate,
    EngineInitError,
    EngineOptions,
    InferenceError,
    QuestionAnswerer,
)
from bert_qa.engine.factory import create_question_answerer
from bert_qa.engine.platform import Platform, TorchPlatform
from bert_qa.observability import names
from bert_qa.observability.base import MetricsHook, NoOpMetricsHook

from .config import MAX_THREADS, MIN_THREADS, SessionConfig
from .results import (
    AnswererListener,
    AnswerResult,
    EngineReady,
    InitError,
    InitOutcome,
    UnsupportedDelegateWarning,
)
from .settings import QaSettings

logger = logging.getLogger(__name__)

EngineFactory = Callable[[EngineOptions], QuestionAnswerer]

INIT_ERROR_MESSAGE = (
    "Bert Question Answerer failed to initialize. See error logs for details"
)
GPU_UNSUPPORTED_MESSAGE = "GPU is not supported on this device"
NNAPI_UNSUPPORTED_MESSAGE = "NNAPI is not supported on this device"


class EngineState(str, Enum):
    UNCONFIGURED = "unconfigured"
    READY = "ready"
    STALE = "stale"


class QaSession:
    """Owns the session configuration and the engine built from it.

    Lifecycle:
    - UNCONFIGURED: no engine has been built yet (or it was released)
    - READY: an engine matching the current configuration is loaded
    - STALE: the configuration changed since the engine was built; the
      engine has been dropped and is rebuilt on the next answer

    Every outcome is returned as a value and, when a listener is attached,
    also notified to it. Engine failures never raise out of the session.

    Single caller. configure() must not run while answer() is in flight.
    """

    def __init__(
        self,
        engine_factory: EngineFactory = create_question_answerer,
        config: SessionConfig | None = None,
        platform: Platform | None = None,
        listener: AnswererListener | None = None,
        model: str = DEFAULT_MODEL,
        top_k: int = 3,
        max_answer_len: int = 32,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self._engine_factory = engine_factory
        self._config = config or SessionConfig()
        self._platform = platform or TorchPlatform()
        self._listener = listener
        self._model = model
        self._top_k = top_k
        self._max_answer_len = max_answer_len
        self.metrics_hook = metrics_hook

        self._engine: QuestionAnswerer | None = None
        self._ready: EngineReady | None = None
        self._state = EngineState.UNCONFIGURED

    @classmethod
    def from_settings(
        cls,
        settings: QaSettings,
        engine_factory: EngineFactory = create_question_answerer,
        platform: Platform | None = None,
        listener: AnswererListener | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> QaSession:
        return cls(
            engine_factory=engine_factory,
            config=settings.session_config(),
            platform=platform,
            listener=listener,
            model=settings.model,
            top_k=settings.top_k,
            max_answer_len=settings.max_answer_len,
            metrics_hook=metrics_hook,
        )

    @property
    def config(self) -> SessionConfig:
        return self._config

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def is_ready(self) -> bool:
        return self._engine is not None

    @property
    def listener(self) -> AnswererListener | None:
        return self._listener

    @listener.setter
    def listener(self, listener: AnswererListener | None) -> None:
        self._listener = listener

    def configure(self, num_threads: int, delegate: Delegate | int) -> None:
        """Store a new configuration and invalidate the current engine.

        The engine is not rebuilt here; the next answer() does that.

        Raises:
            ValueError: If num_threads is outside [1, 4].
        """
        self._config = SessionConfig(num_threads=num_threads, delegate=delegate)
        logger.debug(
            "Configured session: num_threads=%s, delegate=%s", num_threads, delegate
        )
        self._invalidate()

    def increment_threads(self) -> bool:
        if self._config.num_threads >= MAX_THREADS:
            return False
        self.configure(self._config.num_threads + 1, self._config.delegate)
        return True

    def decrement_threads(self) -> bool:
        if self._config.num_threads <= MIN_THREADS:
            return False
        self.configure(self._config.num_threads - 1, self._config.delegate)
        return True

    def select_delegate(self, delegate: Delegate | int) -> bool:
        if delegate == self._config.delegate:
            return False
        self.configure(self._config.num_threads, delegate)
        return True

    def ensure_engine_ready(self) -> InitOutcome:
        """Build the engine if none is loaded.

        Calling this repeatedly without an intervening configure() builds
        the engine only once.
        """
        if self._engine is not None and self._ready is not None:
            return self._ready

        delegate, warnings = self._resolve_delegate()
        options = EngineOptions(
            model=self._model,
            num_threads=self._config.num_threads,
            use_gpu=delegate is Delegate.GPU,
            use_nnapi=delegate is Delegate.NNAPI,
            top_k=self._top_k,
            max_answer_len=self._max_answer_len,
        )

        for warning in warnings:
            self.metrics_hook.increment(
                names.QA_DELEGATE_FALLBACKS_TOTAL,
                labels={"requested": warning.requested.name},
            )
            self._notify_error(warning.message)

        start = monotonic()
        try:
            engine = self._engine_factory(options)
        except EngineInitError as e:
            logger.error("Engine failed to load model with error: %s", e)
            self.metrics_hook.increment(names.QA_ENGINE_INIT_ERRORS_TOTAL)
            self._notify_error(INIT_ERROR_MESSAGE)
            return InitError(message=INIT_ERROR_MESSAGE)

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.QA_ENGINE_INIT_DURATION, elapsed_ms)
        self.metrics_hook.increment(
            names.QA_ENGINE_BUILDS_TOTAL, labels={"delegate": delegate.name}
        )

        self._engine = engine
        self._ready = EngineReady(delegate=delegate, warnings=tuple(warnings))
        self._state = EngineState.READY
        logger.info(
            "Question answerer initialized: delegate=%s, num_threads=%s",
            delegate.name,
            self._config.num_threads,
        )
        return self._ready

    def answer(self, passage: str, question: str) -> AnswerResult:
        """Answer a question about a passage.

        Builds the engine first if none is loaded (one attempt). If that
        fails, returns an empty result; the error was already notified.
        """
        if self._engine is None:
            logger.warning("Answerer was not loaded, initializing")
            outcome = self.ensure_engine_ready()
            if isinstance(outcome, InitError):
                return AnswerResult(error=outcome.message)

        engine = self._engine
        if engine is None:
            return AnswerResult(error=INIT_ERROR_MESSAGE)

        start = monotonic()
        try:
            candidates = engine.answer(passage, question)
        except InferenceError as e:
            elapsed_ms = int(1000 * (monotonic() - start))
            self.metrics_hook.increment(names.QA_ERRORS_TOTAL)
            message = str(e)
            self._notify_error(message)
            return AnswerResult(elapsed_ms=elapsed_ms, error=message)

        elapsed_ms = int(1000 * (monotonic() - start))
        self.metrics_hook.record_latency(names.QA_ANSWER_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.QA_ANSWERS_TOTAL)
        logger.debug(
            "Answered with %d candidates in %d ms", len(candidates), elapsed_ms
        )

        if self._listener is not None:
            self._listener.on_results(candidates, elapsed_ms)
        return AnswerResult(candidates=candidates, elapsed_ms=elapsed_ms)

    def release(self) -> None:
        """Drop the engine. The next answer() builds a fresh one."""
        self._engine = None
        self._ready = None
        self._state = EngineState.UNCONFIGURED
        logger.debug("Released question answerer")

    def _invalidate(self) -> None:
        if self._engine is None and self._state is EngineState.UNCONFIGURED:
            return
        self._engine = None
        self._ready = None
        self._state = EngineState.STALE

    def _resolve_delegate(
        self,
    ) -> tuple[Delegate, list[UnsupportedDelegateWarning]]:
        try:
            requested = Delegate(self._config.delegate)
        except ValueError:
            logger.warning(
                "Unknown delegate type: %s, using CPU", self._config.delegate
            )
            return Delegate.CPU, []

        if requested is Delegate.GPU and not self._platform.is_gpu_supported():
            logger.warning("GPU delegate requested but not supported on this device")
            return Delegate.CPU, [
                UnsupportedDelegateWarning(
                    message=GPU_UNSUPPORTED_MESSAGE, requested=requested
                )
            ]

        if requested is Delegate.NNAPI and not self._platform.is_nnapi_supported():
            logger.warning(
                "NNAPI delegate requested but not supported on this device"
            )
            return Delegate.CPU, [
                UnsupportedDelegateWarning(
                    message=NNAPI_UNSUPPORTED_MESSAGE, requested=requested
                )
            ]

        return requested, []

    def _notify_error(self, message: str) -> None:
        if self._listener is not None:
            self._listener.on_error(message)
