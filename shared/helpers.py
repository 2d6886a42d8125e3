# Dot Shared Helpers
# Utility functions used by the summarizer

import base64
import json

from .config import CACHE_KEY_PREFIX, CACHE_KEY_LENGTH, MISSING_FEEDBACK_ERROR
from .errors import ValidationError

# Inference payloads name the generated text differently depending on the model
SUMMARY_FIELDS = ('response', 'result', 'output')


def parse_feedback(body):
    """Pull trimmed feedback text out of a parsed request body.

    Raises ValidationError when the body isn't an object, or when
    'feedback' is missing, not a string, or blank.
    """
    if not isinstance(body, dict):
        raise ValidationError(MISSING_FEEDBACK_ERROR)

    feedback = body.get('feedback')
    if not isinstance(feedback, str) or not feedback.strip():
        raise ValidationError(MISSING_FEEDBACK_ERROR)

    return feedback.strip()


def build_cache_key(feedback):
    """Build the cache key for a piece of feedback.

    Base64 of the text, cut to CACHE_KEY_LENGTH characters. Long texts
    with the same opening share a key.
    """
    encoded = base64.b64encode(feedback.encode('utf-8')).decode('ascii')
    return f"{CACHE_KEY_PREFIX}{encoded[:CACHE_KEY_LENGTH]}"


def extract_summary_text(payload):
    """Get the generated text from an inference payload.

    Checks 'response', 'result' then 'output'. Falls back to the
    whole payload as JSON when none of them is set.
    """
    if isinstance(payload, dict):
        for field in SUMMARY_FIELDS:
            value = payload.get(field)
            if value is None:
                continue
            if isinstance(value, str):
                return value
            return json.dumps(value)
    return json.dumps(payload)
