"""Conversational front door: free-text question in, free-text answer out."""

import logging
import uuid
from typing import Optional

from civjobs.config.environment import EnvironmentConfig
from civjobs.config.models import AppConfig
from civjobs.logging import get_logger
from civjobs.logging.context import log_context
from civjobs.matching import JobDataset, JobMatcher
from civjobs.query import parse_job_query
from civjobs.utils.hashing import cache_key

from .cache import LRUCache
from .exceptions import LLMError, PromptTemplateError
from .llm import FALLBACK_RESPONSE, LLMClient
from .prompts import build_job_detail_prompt, build_job_search_messages

logger = get_logger(__name__, component="chat")

NO_RESULTS_MESSAGE = (
    "I couldn't find any jobs matching your criteria. Could you try rephrasing your search?"
)
ERROR_MESSAGE = (
    "I'm sorry, I encountered an error while processing your request. Please try again."
)
UNKNOWN_JOB_MESSAGE = "I couldn't find a job with the id {job_id}."


class ChatService:
    """
    Answers job questions by chaining parse -> search -> prompt -> LLM.

    Failures of the answer step never propagate: any LLMError or prompt
    template error is logged and turned into ERROR_MESSAGE. Successful
    answers are cached when a cache is supplied.
    """

    def __init__(
        self,
        matcher: JobMatcher,
        llm_client: LLMClient,
        cache: Optional[LRUCache] = None,
        max_jobs_in_prompt: Optional[int] = None,
        logger_instance: Optional[logging.Logger] = None,
    ):
        """
        Initialize the chat service.

        Args:
            matcher: Job matcher over the canonical dataset
            llm_client: Client for the completions endpoint
            cache: Optional answer cache
            max_jobs_in_prompt: Upper bound on jobs listed in a search prompt
            logger_instance: Optional logger instance (defaults to module logger)
        """
        self.matcher = matcher
        self.llm_client = llm_client
        self.cache = cache
        self.max_jobs_in_prompt = max_jobs_in_prompt
        self.logger = logger_instance or logger

    @classmethod
    def from_config(cls, app_config: AppConfig, env_config: EnvironmentConfig) -> "ChatService":
        dataset = JobDataset.from_gold_dir(app_config.data.gold_path)
        cache = LRUCache(app_config.cache.capacity) if app_config.cache.enabled else None
        return cls(
            matcher=JobMatcher(dataset),
            llm_client=LLMClient(app_config.llm, env_config.openai_api_key),
            cache=cache,
            max_jobs_in_prompt=app_config.llm.max_jobs_in_prompt,
        )

    def handle_message(self, query: str) -> str:
        """Answer a free-text job search question."""
        with log_context(request_id=uuid.uuid4().hex[:12]):
            try:
                key = cache_key("search", query)
                cached = self._cached(key)
                if cached is not None:
                    return cached

                jobs = self.matcher.search(parse_job_query(query))
                if not jobs:
                    return NO_RESULTS_MESSAGE

                messages = build_job_search_messages(query, jobs, max_jobs=self.max_jobs_in_prompt)
                answer = self.llm_client.complete(messages)
                self._store(key, answer)
                return answer
            except (LLMError, PromptTemplateError) as e:
                self.logger.error(
                    f"Error handling chat message: {e}",
                    extra={"event": "chat.message.failed", "error_type": type(e).__name__},
                )
                return ERROR_MESSAGE

    def answer_about_job(self, job_id: str, question: str) -> str:
        """Answer ``question`` using only the record of the job ``job_id``."""
        with log_context(request_id=uuid.uuid4().hex[:12], job_id=job_id):
            job = self.matcher.dataset.get(job_id)
            if job is None:
                self.logger.info(
                    f"Unknown job id: {job_id}",
                    extra={"event": "chat.job.not_found"},
                )
                return UNKNOWN_JOB_MESSAGE.format(job_id=job_id)

            try:
                key = cache_key("job", job_id, question)
                cached = self._cached(key)
                if cached is not None:
                    return cached

                answer = self.llm_client.complete_prompt(build_job_detail_prompt(job, question))
                self._store(key, answer)
                return answer
            except (LLMError, PromptTemplateError) as e:
                self.logger.error(
                    f"Error answering question about {job_id}: {e}",
                    extra={"event": "chat.job.failed", "error_type": type(e).__name__},
                )
                return ERROR_MESSAGE

    def _cached(self, key: str) -> Optional[str]:
        if self.cache is None:
            return None
        answer = self.cache.get(key)
        if answer is not None:
            self.logger.debug("Answer served from cache", extra={"event": "chat.cache.hit"})
        return answer

    def _store(self, key: str, answer: str) -> None:
        # Empty replies are not worth reusing.
        if self.cache is not None and answer != FALLBACK_RESPONSE:
            self.cache.set(key, answer)
