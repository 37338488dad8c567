"""Custom exceptions for prompt rendering and the LLM client."""

from typing import Optional


class LLMError(Exception):
    """Base exception for all LLM call failures.

    Catching this exception catches any failure of the answer step; callers
    turn it into an apology message instead of surfacing it to the user.
    """

    pass


class LLMConfigurationError(LLMError):
    """The client cannot make a call, e.g. no API key is configured."""

    pass


class LLMHTTPError(LLMError):
    """The completions endpoint answered with a 4xx or 5xx status, or the
    connection failed (status_code 0)."""

    def __init__(self, message: str, status_code: int, url: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class LLMTimeoutError(LLMError):
    """The completions request did not finish within the configured timeout."""

    def __init__(self, message: str, url: str) -> None:
        super().__init__(message)
        self.url = url


class LLMResponseError(LLMError):
    """The response body was not JSON or not shaped like a chat completion."""

    pass


class PromptTemplateError(Exception):
    """A prompt template failed to load or render."""

    def __init__(self, message: str, template_name: Optional[str] = None) -> None:
        super().__init__(message)
        self.template_name = template_name
