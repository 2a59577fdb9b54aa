"""
LLM Client for the Google Gemini REST API.

This module asks Gemini a question and returns a one-word answer.
It handles:
- API key presence check (no request is made without a key)
- Request construction for the generateContent endpoint
- Response parsing and first-word normalisation
- Mapping upstream failures to AIProxyError

The HTTP call is made with requests inside Starlette's threadpool so
the event loop keeps serving other requests while Gemini thinks.
There is no retry, and no timeout unless AI_TIMEOUT_SECONDS is set.
"""
from typing import Any, Optional

import requests
from starlette.concurrency import run_in_threadpool

from src.core.config import Settings
from src.core.exceptions import AIConfigurationError, AIProxyError
from src.core.logging_config import get_logger

logger = get_logger(__name__)

PROMPT_PREFIX = "Answer in ONE WORD only: "


def build_payload(question: str) -> dict:
    """Build the generateContent request body for a question."""
    return {
        "contents": [
            {
                "parts": [
                    {"text": f"{PROMPT_PREFIX}{question}"}
                ]
            }
        ]
    }


def extract_answer(data: Any) -> Optional[str]:
    """
    Pull candidates[0].content.parts[0].text out of a Gemini response.

    Any missing level yields None.
    """
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return None
    return text if isinstance(text, str) else None


def first_word(text: str) -> str:
    """Trim and keep the first whitespace-delimited token."""
    words = text.split()
    return words[0] if words else ""


def _upstream_error_message(response: Optional[requests.Response]) -> Optional[str]:
    """Return error.message from a Gemini error payload, if there is one."""
    if response is None:
        return None
    try:
        message = response.json()["error"]["message"]
    except (ValueError, KeyError, TypeError):
        return None
    return message or None


class GeminiClient:
    """
    Client that asks Gemini for single-word answers.

    Settings are injected at construction; the client never reads
    the environment itself.

    Example:
        >>> client = GeminiClient(settings)
        >>> await client.ask("What is the capital of France?")
        'Paris.'
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self.model = self.settings.gemini_model
        self.endpoint = (
            f"{self.settings.gemini_base_url}/models/{self.model}:generateContent"
        )
        self.timeout = self.settings.ai_timeout_seconds

        logger.info(f"Gemini client initialized (model={self.model})")

    async def ask(self, question: str) -> str:
        """
        Ask a question and return the first word of the answer.

        Raises:
            AIConfigurationError: No API key configured
            AIProxyError: Transport failure, HTTP error or empty answer
        """
        if not self.settings.has_gemini_key():
            raise AIConfigurationError()

        answer = await run_in_threadpool(self._generate, question)
        return first_word(answer)

    def _generate(self, question: str) -> str:
        """Execute the blocking generateContent call."""
        logger.debug(f"Asking Gemini: {question[:80]}")

        try:
            response = requests.post(
                self.endpoint,
                json=build_payload(question),
                headers={
                    "Content-Type": "application/json",
                    "x-goog-api-key": self.settings.gemini_api_key,
                },
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else "unknown"
            body = e.response.text if e.response is not None else ""
            logger.error(f"Gemini HTTP error: status={status} body={body[:500]}")
            raise AIProxyError(
                _upstream_error_message(e.response)
                or f"Request failed with status code {status}"
            )
        except requests.RequestException as e:
            logger.error(f"Gemini request failed: {e}")
            raise AIProxyError(str(e))

        try:
            data = response.json()
        except ValueError:
            data = None

        answer = extract_answer(data)
        if not answer:
            logger.error(f"Gemini returned no answer text: {response.text[:500]}")
            raise AIProxyError("Invalid AI response from Gemini")

        return answer
