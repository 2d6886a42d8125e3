# Dot Shared Errors
# Failures raised by the summarizer and its collaborators


class ValidationError(Exception):
    """Request body is missing usable feedback"""


class InferenceError(Exception):
    """The inference endpoint failed or returned an unusable reply"""


class PersistenceError(Exception):
    """Writing a history record failed"""


class StoreQueryError(Exception):
    """Reading history records failed"""
