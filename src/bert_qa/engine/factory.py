# src/bert_qa/engine/factory.py

from .base import EngineOptions, QuestionAnswerer


def create_question_answerer(options: EngineOptions) -> QuestionAnswerer:
    """Create a question-answering engine from options.

    Args:
        options: Engine options specifying backend, model, threads and
            acceleration flags.

    Returns:
        Loaded QuestionAnswerer implementation.

    Raises:
        EngineInitError: If the model cannot be loaded.
        ValueError: If backend is unknown.

    Example:
        >>> options = EngineOptions(num_threads=2)
        >>> engine = create_question_answerer(options)
        >>> engine.answer("Paris is in France.", "Where is Paris?")
    """
    if options.backend == "transformers":
        from .transformers import TransformersQuestionAnswerer

        return TransformersQuestionAnswerer(options)

    raise ValueError(f"Unknown engine backend: {options.backend}")
