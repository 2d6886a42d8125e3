# Dot Shared Inference
# Clients for the hosted models that write feedback summaries

import anthropic
import httpx
from anthropic import Anthropic

from .config import (
    INFERENCE_PROVIDER,
    ANTHROPIC_API_KEY,
    CLOUDFLARE_ACCOUNT_ID,
    CLOUDFLARE_API_TOKEN
)
from .errors import InferenceError

WORKERS_AI_URL = 'https://api.cloudflare.com/client/v4/accounts/{account_id}/ai/run/{model}'


class AnthropicInference:
    """Runs prompts against Claude.

    Replies are returned as a payload dict with the text under
    'response', the same shape Workers AI text models use.
    """

    def __init__(self, api_key=None, client=None):
        self.client = client or Anthropic(
            api_key=api_key or ANTHROPIC_API_KEY,
            http_client=httpx.Client(timeout=60.0, follow_redirects=True)
        )

    def run(self, model, inputs):
        try:
            response = self.client.messages.create(
                model=model,
                max_tokens=inputs.get('max_tokens', 1024),
                messages=[
                    {'role': 'user', 'content': inputs['prompt']}
                ]
            )
        except anthropic.APIError as e:
            raise InferenceError(f"Claude request failed: {e}") from e

        text = ''.join(block.text for block in response.content if block.type == 'text')
        return {
            'response': text,
            'model': response.model,
            'stop_reason': response.stop_reason
        }


class WorkersAIInference:
    """Runs prompts against Cloudflare Workers AI over its REST API."""

    def __init__(self, account_id=None, api_token=None, http_client=None):
        self.account_id = account_id or CLOUDFLARE_ACCOUNT_ID
        self.api_token = api_token or CLOUDFLARE_API_TOKEN
        self.http_client = http_client or httpx.Client(timeout=60.0, follow_redirects=True)

    def _get_headers(self):
        return {
            'Authorization': f'Bearer {self.api_token}',
            'Content-Type': 'application/json'
        }

    def run(self, model, inputs):
        url = WORKERS_AI_URL.format(account_id=self.account_id, model=model)
        try:
            response = self.http_client.post(url, headers=self._get_headers(), json=inputs)
            response.raise_for_status()
            payload = response.json()
        except (httpx.HTTPError, ValueError) as e:
            raise InferenceError(f"Workers AI request failed: {e}") from e

        # REST replies wrap the model output in an envelope
        if not payload.get('success', True):
            raise InferenceError(f"Workers AI returned errors: {payload.get('errors')}")
        return payload.get('result', payload)


def build_inference_client(provider=None):
    """Create the inference client for the configured provider"""
    provider = provider or INFERENCE_PROVIDER
    if provider == 'workers-ai':
        return WorkersAIInference()
    if provider == 'anthropic':
        return AnthropicInference()
    raise ValueError(f"Unknown inference provider: {provider}")
