import json
from pathlib import Path

import pytest

from bert_qa.dataset import DataSet, LoadDataSetClient, LoadError
from bert_qa.observability import names
from bert_qa.session import QaSettings


def _write(path: Path, data: object) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def dataset_file(tmp_path: Path) -> Path:
    return _write(
        tmp_path / "qa.json",
        {
            "titles": [["A"]],
            "contents": [["Paris is the capital of France."]],
            "questions": [["What is the capital of France?"]],
        },
    )


def test_load_materializes_first_element(dataset_file: Path) -> None:
    result = LoadDataSetClient(dataset_file).load()

    assert isinstance(result, DataSet)
    assert result.get_titles() == ["A"]
    assert result.get_contents() == ["Paris is the capital of France."]
    assert result.questions == [["What is the capital of France?"]]


def test_load_ignores_variants(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "qa.json",
        {
            "titles": [["First", "Alt first"], ["Second"]],
            "contents": [["Body one", "Alt body"], ["Body two"]],
            "questions": [["Q1", "Q2"], []],
        },
    )

    dataset = LoadDataSetClient(path).load()

    assert isinstance(dataset, DataSet)
    assert dataset.get_titles() == ["First", "Second"]
    assert dataset.get_contents() == ["Body one", "Body two"]
    assert dataset[0].suggested_questions == ("Q1", "Q2")
    assert dataset[1].suggested_questions == ()


def test_load_missing_file_returns_error(tmp_path: Path, metrics_hook) -> None:
    client = LoadDataSetClient(tmp_path / "missing.json", metrics_hook=metrics_hook)

    result = client.load()

    assert isinstance(result, LoadError)
    assert "Failed to read dataset" in result.message
    assert result.source.endswith("missing.json")
    assert metrics_hook.counters[names.DATASET_LOAD_ERRORS_TOTAL] == 1


def test_load_invalid_json_returns_error(tmp_path: Path) -> None:
    path = tmp_path / "qa.json"
    path.write_text("{not json", encoding="utf-8")

    result = LoadDataSetClient(path).load()

    assert isinstance(result, LoadError)
    assert "not valid JSON" in result.message


def test_load_mismatched_lengths_returns_error(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "qa.json",
        {"titles": [["A"], ["B"]], "contents": [["x"]], "questions": [["q"]]},
    )

    result = LoadDataSetClient(path).load()

    assert isinstance(result, LoadError)
    assert "expected shape" in result.message


def test_load_empty_title_entry_returns_error(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "qa.json",
        {"titles": [[]], "contents": [["x"]], "questions": [["q"]]},
    )

    assert isinstance(LoadDataSetClient(path).load(), LoadError)


def test_load_or_empty_degrades_to_empty(tmp_path: Path) -> None:
    dataset = LoadDataSetClient(tmp_path / "missing.json").load_or_empty()

    assert len(dataset) == 0
    assert dataset.get_titles() == []


def test_load_json_returns_none_on_failure(tmp_path: Path) -> None:
    assert LoadDataSetClient(tmp_path / "missing.json").load_json() is None


def test_load_records_passage_gauge(dataset_file: Path, metrics_hook) -> None:

    LoadDataSetClient(dataset_file, metrics_hook=metrics_hook).load()

    assert metrics_hook.gauges[names.DATASET_PASSAGES] == 1
    assert metrics_hook.latencies[0][0] == names.DATASET_LOAD_DURATION


def test_bundled_dataset_loads() -> None:
    dataset = LoadDataSetClient().load()

    assert isinstance(dataset, DataSet)
    assert len(dataset) > 0
    assert len(dataset.get_titles()) == len(dataset.get_contents())
    assert all(passage.suggested_questions for passage in dataset)


def test_from_settings_reads_dataset_path(dataset_file: Path) -> None:
    settings = QaSettings(dataset_path=str(dataset_file))
    client = LoadDataSetClient.from_settings(settings)

    dataset = client.load()

    assert client.source == str(dataset_file)
    assert isinstance(dataset, DataSet)
    assert dataset.get_titles() == ["A"]


def test_from_settings_without_path_uses_bundled_dataset() -> None:
    client = LoadDataSetClient.from_settings(QaSettings())

    assert client.source.endswith("qa.json")
    assert isinstance(client.load(), DataSet)
