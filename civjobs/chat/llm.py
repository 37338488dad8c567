"""Thin client for an OpenAI-compatible chat completions endpoint."""

from typing import Any, Dict, Optional, Sequence

import requests

from civjobs.config.models import LLMConfig
from civjobs.logging import get_logger

from .exceptions import (
    LLMConfigurationError,
    LLMHTTPError,
    LLMResponseError,
    LLMTimeoutError,
)
from .prompts import ChatMessage

logger = get_logger(__name__, component="llm")

FALLBACK_RESPONSE = "Sorry, I couldn't generate a response."


class LLMClient:
    """Sends chat messages to the completions endpoint and returns the reply text.

    Attributes:
        config: Model, temperature, endpoint, and timeout settings
    """

    def __init__(
        self,
        config: LLMConfig,
        api_key: Optional[str],
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: LLM settings
            api_key: Bearer token; calls fail with LLMConfigurationError when unset
            session: Optional requests session (a new one by default)
        """
        self.config = config
        self.api_key = api_key.strip() if api_key else None
        self._session = session or requests.Session()

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def complete(self, messages: Sequence[ChatMessage]) -> str:
        """Request a completion for ``messages``.

        Returns:
            The trimmed reply, or FALLBACK_RESPONSE when the reply is empty

        Raises:
            LLMConfigurationError: No API key configured
            LLMTimeoutError: Request timed out
            LLMHTTPError: Connection failure or 4xx/5xx status
            LLMResponseError: Body is not JSON or not a chat completion
        """
        if not self.api_key:
            raise LLMConfigurationError("OPENAI_API_KEY environment variable is not set")

        url = self.config.api_url
        payload = {
            "model": self.config.model,
            "messages": [message.model_dump() for message in messages],
            "temperature": self.config.temperature,
        }

        logger.debug(
            f"POST {url}",
            extra={
                "event": "llm.request.started",
                "model": self.config.model,
                "message_count": len(payload["messages"]),
            },
        )

        try:
            response = self._session.post(
                url,
                headers={
                    "Authorization": f"Bearer {self.api_key}",
                    "Content-Type": "application/json",
                },
                json=payload,
                timeout=self.config.timeout_seconds,
            )
        except requests.exceptions.Timeout as e:
            logger.warning(
                f"LLM request timed out after {self.config.timeout_seconds} seconds",
                extra={"event": "llm.request.timeout", "url": url},
            )
            raise LLMTimeoutError(
                f"LLM request timed out after {self.config.timeout_seconds} seconds", url=url
            ) from e
        except requests.exceptions.RequestException as e:
            logger.error(
                f"LLM request failed: {e}",
                extra={"event": "llm.request.failed", "error_type": type(e).__name__, "url": url},
            )
            raise LLMHTTPError(f"LLM request failed: {e}", status_code=0, url=url) from e

        if response.status_code >= 400:
            logger.error(
                f"LLM API error: HTTP {response.status_code}",
                extra={"event": "llm.request.failed", "status_code": response.status_code, "url": url},
            )
            raise LLMHTTPError(
                f"LLM API error: HTTP {response.status_code} {response.reason}",
                status_code=response.status_code,
                url=url,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise LLMResponseError(f"LLM response is not valid JSON: {e}") from e

        content = _extract_content(data)
        logger.info(
            "LLM request succeeded",
            extra={
                "event": "llm.request.succeeded",
                "model": self.config.model,
                "empty_reply": content is None,
            },
        )
        return content if content is not None else FALLBACK_RESPONSE

    def complete_prompt(self, prompt: str) -> str:
        """Send a single user prompt."""
        return self.complete([ChatMessage(role="user", content=prompt)])


def _extract_content(data: Any) -> Optional[str]:
    """Trimmed ``choices[0].message.content``, or None if absent or blank.

    Raises:
        LLMResponseError: If ``data`` is not a JSON object
    """
    if not isinstance(data, dict):
        raise LLMResponseError(f"Expected a JSON object, got {type(data).__name__}")

    choices = data.get("choices") or []
    first: Dict[str, Any] = choices[0] if isinstance(choices, list) and choices else {}
    message = first.get("message") if isinstance(first, dict) else None
    content = message.get("content") if isinstance(message, dict) else None

    if not isinstance(content, str) or not content.strip():
        return None
    return content.strip()
