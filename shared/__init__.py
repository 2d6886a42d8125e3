# Dot Shared Module
# Common functions used by the Dot Feedback summarizer

from .config import (
    SUMMARY_MODEL,
    LEGACY_MODEL,
    LEGACY_TEST_PROMPT,
    CACHE_TTL_SECONDS,
    SUMMARY_MAX_TOKENS,
    MISSING_FEEDBACK_ERROR,
    SUMMARY_FAILED_ERROR
)

from .errors import (
    ValidationError,
    InferenceError,
    PersistenceError,
    StoreQueryError
)

from .helpers import (
    parse_feedback,
    build_cache_key,
    extract_summary_text
)

from .inference import (
    AnthropicInference,
    WorkersAIInference,
    build_inference_client
)

from .cache import RedisCache

from .history import HistoryStore
