"""Client for the Gemini generateContent REST API."""

import logging
import time

import requests

from ielts_trainer.config import IeltsTrainerConfig
from ielts_trainer.models import GeneratorResult, Malformed, Ok, ServiceError

logger = logging.getLogger(__name__)


class GeminiClient:
    """Submit prompts to Gemini and return the response text.

    Implements the TextGenerator protocol. Rate limiting, server errors,
    timeouts and connection errors are retried with a linearly increasing
    delay; every other failure is returned as a ServiceError.
    """

    RETRYABLE_STATUS_CODES = {429, 500, 502, 503, 504}

    def __init__(self, config: IeltsTrainerConfig):
        """Initialize the client.

        Args:
            config: Configuration with the API key, model and retry settings
        """
        self.config = config

    @property
    def endpoint(self) -> str:
        base = self.config.gemini_api_url.rstrip("/")
        return f"{base}/models/{self.config.gemini_model}:generateContent"

    def generate(self, prompt: str) -> GeneratorResult:
        """Send a prompt and return the generated text.

        Args:
            prompt: Full prompt text

        Returns:
            Ok(text), Malformed if the response envelope has no text, or
            ServiceError once retries are exhausted
        """
        payload = {"contents": [{"parts": [{"text": prompt}]}]}
        max_retries = max(self.config.max_retries, 0)
        last_error = ServiceError(None, "No request was sent")

        for attempt in range(max_retries + 1):
            if attempt > 0:
                delay = self.config.retry_delay * attempt
                logger.debug(f"Retrying Gemini request in {delay:.1f}s (attempt {attempt + 1})")
                time.sleep(delay)

            try:
                response = requests.post(
                    self.endpoint,
                    json=payload,
                    headers={
                        "Accept": "application/json",
                        "x-goog-api-key": self.config.google_api_key,
                    },
                    timeout=self.config.request_timeout,
                )
            except requests.exceptions.Timeout:
                last_error = ServiceError(
                    None, f"Request timeout after {attempt + 1} attempt(s)"
                )
                continue
            except requests.exceptions.ConnectionError as e:
                last_error = ServiceError(None, f"Network error - {self._redact(str(e))}")
                continue
            except requests.RequestException as e:
                return ServiceError(None, f"Request failed - {self._redact(str(e))}")

            if response.status_code == 200:
                return self._parse_response(response)

            last_error = ServiceError(response.status_code, response.text)
            if response.status_code not in self.RETRYABLE_STATUS_CODES:
                break

        logger.warning(f"Gemini request failed: {last_error}")
        return last_error

    def _redact(self, message: str) -> str:
        """Remove the API key from an error message."""
        key = self.config.google_api_key
        return message.replace(key, "***") if key else message

    @staticmethod
    def _parse_response(response: requests.Response) -> GeneratorResult:
        """Extract candidates[0].content.parts[0].text from a response."""
        try:
            body = response.json()
        except ValueError:
            return Malformed(response.text, "response body is not JSON")

        try:
            text = body["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError):
            return Malformed(response.text, "no text in response")

        if not isinstance(text, str):
            return Malformed(response.text, "response text is not a string")
        return Ok(text)
