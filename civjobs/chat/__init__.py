"""Answer step: prompts, LLM client, response cache, and chat service."""

from .cache import LRUCache
from .exceptions import (
    LLMConfigurationError,
    LLMError,
    LLMHTTPError,
    LLMResponseError,
    LLMTimeoutError,
    PromptTemplateError,
)
from .llm import FALLBACK_RESPONSE, LLMClient
from .prompts import (
    ChatMessage,
    PromptRenderer,
    build_job_detail_prompt,
    build_job_search_messages,
    salary_range,
)
from .service import ERROR_MESSAGE, NO_RESULTS_MESSAGE, ChatService

__all__ = [
    "ChatMessage",
    "ChatService",
    "ERROR_MESSAGE",
    "FALLBACK_RESPONSE",
    "LLMClient",
    "LLMConfigurationError",
    "LLMError",
    "LLMHTTPError",
    "LLMResponseError",
    "LLMTimeoutError",
    "LRUCache",
    "NO_RESULTS_MESSAGE",
    "PromptRenderer",
    "PromptTemplateError",
    "build_job_detail_prompt",
    "build_job_search_messages",
    "salary_range",
]
