# Dot Shared Config
# Central configuration for the Dot Feedback summarizer

import os

# Inference provider: 'anthropic' or 'workers-ai'
INFERENCE_PROVIDER = os.environ.get('INFERENCE_PROVIDER', 'anthropic')

# Anthropic
ANTHROPIC_API_KEY = os.environ.get('ANTHROPIC_API_KEY')
ANTHROPIC_MODEL = 'claude-sonnet-4-20250514'

# Cloudflare Workers AI
CLOUDFLARE_ACCOUNT_ID = os.environ.get('CLOUDFLARE_ACCOUNT_ID')
CLOUDFLARE_API_TOKEN = os.environ.get('CLOUDFLARE_API_TOKEN')
WORKERS_AI_MODEL = '@cf/meta/llama-3.1-8b-instruct'

# Model used for summaries and the legacy test route
SUMMARY_MODEL = WORKERS_AI_MODEL if INFERENCE_PROVIDER == 'workers-ai' else ANTHROPIC_MODEL
LEGACY_MODEL = SUMMARY_MODEL
LEGACY_TEST_PROMPT = 'What is the origin of the phrase Hello, World?'

# Redis summary cache
REDIS_URL = os.environ.get('REDIS_URL', 'redis://localhost:6379/0')
CACHE_KEY_PREFIX = 'sum:'
CACHE_KEY_LENGTH = 50
CACHE_TTL_SECONDS = 3600

# SQLite history
HISTORY_DB_PATH = os.environ.get('HISTORY_DB_PATH', 'feedback_history.db')
HISTORY_LIMIT = 10

# Summaries
SUMMARY_MAX_TOKENS = 400
MISSING_FEEDBACK_ERROR = "Missing 'feedback' in request body"
SUMMARY_FAILED_ERROR = 'Failed to generate summary'
