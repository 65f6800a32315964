from unittest.mock import patch

import pytest

from bert_qa.engine import EngineOptions, create_question_answerer
from bert_qa.engine.transformers import TransformersQuestionAnswerer


class TestFactory:
    def test_create_transformers_engine(self) -> None:
        """Test creating the transformers-backed engine."""
        with patch("bert_qa.engine.transformers.pipeline"):
            with patch("bert_qa.engine.transformers.torch.set_num_threads"):
                engine = create_question_answerer(EngineOptions(model="fake"))
        assert isinstance(engine, TransformersQuestionAnswerer)

    def test_options_passed_through(self) -> None:
        """Test that options are kept on the engine."""
        options = EngineOptions(model="fake", num_threads=4, top_k=5)
        with patch("bert_qa.engine.transformers.pipeline"):
            with patch("bert_qa.engine.transformers.torch.set_num_threads"):
                engine = create_question_answerer(options)
        assert engine.options is options

    def test_unknown_backend_raises(self) -> None:
        """Test that unknown backend raises ValueError."""
        options = EngineOptions(backend="onnx")  # type: ignore
        with pytest.raises(ValueError, match="Unknown engine backend"):
            create_question_answerer(options)
