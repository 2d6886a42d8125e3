# Dot Feedback
# Customer feedback summaries for product teams
#
# Summarizes pasted feedback with a hosted model, caches the summary
# in Redis and keeps a history of every summary served in SQLite.

import sys
import os

# Add parent directory to path for shared imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from flask import Flask, Response, abort, request, jsonify

from shared import (
    SUMMARY_MODEL,
    LEGACY_MODEL,
    LEGACY_TEST_PROMPT,
    CACHE_TTL_SECONDS,
    SUMMARY_MAX_TOKENS,
    SUMMARY_FAILED_ERROR,
    ValidationError,
    parse_feedback,
    build_cache_key,
    extract_summary_text,
    build_inference_client,
    RedisCache,
    HistoryStore
)

# Load prompt
PROMPT_PATH = os.path.join(os.path.dirname(__file__), 'prompt.txt')
with open(PROMPT_PATH, 'r') as f:
    SUMMARY_PROMPT = f.read()

# Load page
PAGE_PATH = os.path.join(os.path.dirname(__file__), 'index.html')
with open(PAGE_PATH, 'r') as f:
    INDEX_HTML = f.read()


def build_prompt(feedback):
    """Fill the summary prompt with the feedback text"""
    return SUMMARY_PROMPT.format(feedback=feedback).strip()


def create_app(inference=None, cache=None, history=None):
    """Build the Flask app around its three collaborators.

    Args:
        inference: object with run(model, inputs) returning a payload dict
        cache: object with get(key) and put(key, value, ttl)
        history: object with insert(feedback, summary) and list_recent()

    Any collaborator not passed in is built from shared config.
    """
    app = Flask(__name__)

    if inference is None:
        inference = build_inference_client()
    if cache is None:
        cache = RedisCache()
    if history is None:
        history = HistoryStore()

    # Only the exact methods in the route table are served
    @app.before_request
    def reject_implicit_methods():
        if request.method in ('HEAD', 'OPTIONS'):
            abort(404)

    @app.route('/', methods=['GET'])
    def index():
        """Serve the summarizer page"""
        return Response(INDEX_HTML, status=200, content_type='text/html; charset=utf-8')

    @app.route('/summarize', methods=['POST'])
    def summarize():
        """Summarize customer feedback.

        Accepts:
            - feedback: Free-text feedback from any channel

        Returns:
            - summary: Markdown summary, sentiment and action item
            - fromCache: True whenever a summary is returned
        """
        try:
            feedback = parse_feedback(request.get_json(force=True, silent=True))
        except ValidationError as e:
            return jsonify({'error': str(e)}), 400

        cache_key = build_cache_key(feedback)

        # Check cache first
        text = cache.get(cache_key)

        if text:
            print(f"Cache hit for {cache_key}")
        else:
            try:
                payload = inference.run(SUMMARY_MODEL, {
                    'prompt': build_prompt(feedback),
                    'max_tokens': SUMMARY_MAX_TOKENS
                })
                text = extract_summary_text(payload)

                cache.put(cache_key, text, CACHE_TTL_SECONDS)
                print(f"Generated summary for {cache_key}")

            except Exception as e:
                print(f"AI Error: {e}")
                return jsonify({'error': SUMMARY_FAILED_ERROR}), 500

        # Record every summary served, cache hits included
        try:
            history.insert(feedback, text)
        except Exception as e:
            print(f"DB Error: {e}")

        # TODO: fromCache is true on every success, confirm whether it should mean the key was already cached
        return jsonify({
            'summary': text,
            'fromCache': bool(text)
        })

    @app.route('/history', methods=['GET'])
    def recent_history():
        """Return the most recent summaries, newest first"""
        return jsonify(history.list_recent())

    @app.route('/feedback-analyzer', methods=['GET'])
    def feedback_analyzer():
        """Smoke test for the inference connection"""
        payload = inference.run(LEGACY_MODEL, {'prompt': LEGACY_TEST_PROMPT})
        return jsonify(payload)

    @app.route('/health', methods=['GET'])
    def health():
        """Health check endpoint"""
        return jsonify({
            'status': 'healthy',
            'service': 'Dot Feedback',
            'version': '1.0'
        })

    @app.errorhandler(404)
    @app.errorhandler(405)
    def not_found(e):
        return Response('Not found', status=404, content_type='text/plain; charset=utf-8')

    return app


if __name__ == '__main__':
    app = create_app()
    port = int(os.environ.get('PORT', 8080))
    app.run(host='0.0.0.0', port=port)
