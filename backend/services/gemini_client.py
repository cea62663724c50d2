"""Google Gemini API wrapper with retry and typed errors."""

import json
import logging
from typing import Any

import httpx
from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from config import RetryPolicy
from services.errors import (
    EnrichmentUnavailable,
    MalformedProviderResponse,
    TransientProviderError,
)
from services.retry import retry_async

logger = logging.getLogger(__name__)

# Rate limiting and temporary server-side unavailability
TRANSIENT_STATUS_CODES = frozenset({429, 500, 502, 503, 504})


def parse_json_response(text: str) -> dict[str, Any]:
    """Parse a model reply as a JSON object, tolerating markdown code fences."""
    text = (text or "").strip()
    # Strip markdown code fences if present
    if text.startswith("```"):
        text = text.split("\n", 1)[1] if "\n" in text else text[3:]
        if text.endswith("```"):
            text = text[:-3]
        text = text.strip()

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedProviderResponse(f"Gemini response is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise MalformedProviderResponse(
            f"Gemini response is a JSON {type(data).__name__}, expected an object"
        )
    return data


class GeminiClient:
    def __init__(
        self,
        api_key: str,
        model: str = "gemini-2.5-flash",
        temperature: float = 0.3,
        max_output_tokens: int = 4096,
        retry_policy: RetryPolicy | None = None,
        client: Any = None,
    ) -> None:
        if client is None:
            if not api_key:
                raise EnrichmentUnavailable("No Gemini API key configured")
            client = genai.Client(api_key=api_key)
        self._client = client
        self.model = model
        self.temperature = temperature
        self.max_output_tokens = max_output_tokens
        self.retry_policy = retry_policy or RetryPolicy()

    async def _generate_once(self, prompt: str) -> str:
        try:
            response = await self._client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
                config=types.GenerateContentConfig(
                    temperature=self.temperature,
                    max_output_tokens=self.max_output_tokens,
                    response_mime_type="application/json",
                ),
            )
        except genai_errors.APIError as e:
            if e.code in TRANSIENT_STATUS_CODES:
                raise TransientProviderError(f"Gemini API error: {e}", status_code=e.code) from e
            raise EnrichmentUnavailable(f"Gemini API error: {e}") from e
        except httpx.TransportError as e:
            raise TransientProviderError(f"Gemini connection error: {e}") from e

        return response.text or ""

    async def generate_json(self, prompt: str) -> dict[str, Any]:
        """Send a prompt to Gemini and parse the JSON object it returns.

        Transient failures are retried according to the retry policy. Raises
        EnrichmentUnavailable (or a subclass) when no usable answer arrives.
        """
        text = await retry_async(
            lambda: self._generate_once(prompt),
            self.retry_policy,
            label="Gemini request",
        )
        return parse_json_response(text)
