# src/bert_qa/observability/names.py

"""Standard metric names for bert-qa observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Question Answering Metrics
# ============================================================================

# Duration
QA_ANSWER_DURATION = "qa_answer_duration"

# Counters
QA_ANSWERS_TOTAL = "qa_answers_total"
QA_ERRORS_TOTAL = "qa_errors_total"


# ============================================================================
# Engine Lifecycle Metrics
# ============================================================================

# Duration
QA_ENGINE_INIT_DURATION = "qa_engine_init_duration"

# Counters
QA_ENGINE_BUILDS_TOTAL = "qa_engine_builds_total"
QA_ENGINE_INIT_ERRORS_TOTAL = "qa_engine_init_errors_total"
QA_DELEGATE_FALLBACKS_TOTAL = "qa_delegate_fallbacks_total"


# ============================================================================
# Dataset Metrics
# ============================================================================

# Duration
DATASET_LOAD_DURATION = "dataset_load_duration"

# Counters
DATASET_LOAD_ERRORS_TOTAL = "dataset_load_errors_total"

# Gauges
DATASET_PASSAGES = "dataset_passages"
