# src/bert_qa/dataset/loader.py

from __future__ import annotations

import json
import logging
from importlib import resources
from pathlib import Path
from time import monotonic
from typing import TYPE_CHECKING

from pydantic import ValidationError

from bert_qa.observability import names
from bert_qa.observability.base import MetricsHook, NoOpMetricsHook

from .models import DataSet, DataSetDocument, LoadError

if TYPE_CHECKING:
    from bert_qa.session.settings import QaSettings

logger = logging.getLogger(__name__)

BUNDLED_DATASET = "qa.json"


class LoadDataSetClient:
    """
    Loads the passage dataset from a JSON document.

    - path=None reads the dataset bundled with the package
    - failures are logged and returned as LoadError, never raised
    - no retries, no network
    """

    def __init__(
        self,
        path: str | Path | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self._path = Path(path) if path is not None else None
        self.metrics_hook = metrics_hook

    @classmethod
    def from_settings(
        cls,
        settings: QaSettings,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> LoadDataSetClient:
        """Client for settings.dataset_path, or the bundled dataset when unset."""
        return cls(path=settings.dataset_path, metrics_hook=metrics_hook)

    @property
    def source(self) -> str:
        if self._path is None:
            return f"bert_qa.assets/{BUNDLED_DATASET}"
        return str(self._path)

    def load(self) -> DataSet | LoadError:
        start = monotonic()
        logger.debug("Loading dataset from %s", self.source)
        try:
            raw = self._read_text()
            document = DataSetDocument.model_validate(json.loads(raw))
        except (OSError, UnicodeDecodeError) as e:
            return self._fail(f"Failed to read dataset: {e}")
        except json.JSONDecodeError as e:
            return self._fail(f"Dataset is not valid JSON: {e}")
        except ValidationError as e:
            return self._fail(
                f"Dataset does not match the expected shape: {e.error_count()} error(s)"
            )

        dataset = DataSet.from_document(document)
        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.DATASET_LOAD_DURATION, elapsed_ms)
        self.metrics_hook.record_gauge(names.DATASET_PASSAGES, len(dataset))
        logger.info("Dataset loaded successfully: %d passages", len(dataset))
        return dataset

    def load_or_empty(self) -> DataSet:
        result = self.load()
        if isinstance(result, LoadError):
            return DataSet.empty()
        return result

    def load_json(self) -> DataSet | None:
        result = self.load()
        return None if isinstance(result, LoadError) else result

    def _read_text(self) -> str:
        if self._path is None:
            return (
                resources.files("bert_qa.assets")
                .joinpath(BUNDLED_DATASET)
                .read_text(encoding="utf-8")
            )
        return self._path.read_text(encoding="utf-8")

    def _fail(self, message: str) -> LoadError:
        logger.error("%s (source=%s)", message, self.source)
        self.metrics_hook.increment(names.DATASET_LOAD_ERRORS_TOTAL)
        return LoadError(message=message, source=self.source)
