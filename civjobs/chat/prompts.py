"""Prompt construction for the answer step using Jinja2.

Templates live in the ``civjobs.chat.prompt_templates`` package directory and
are rendered with strict undefined checking, so a missing variable fails
loudly instead of producing a half-empty prompt.
"""

from typing import List, Literal, Optional, Sequence

from jinja2 import Environment, PackageLoader, StrictUndefined, TemplateError
from pydantic import BaseModel, ConfigDict

from civjobs.domain.models import JobWithSalary
from civjobs.domain.salary import format_amount
from civjobs.logging import get_logger

from .exceptions import PromptTemplateError

logger = get_logger(__name__, component="chat")

DESCRIPTION_PROMPT_LIMIT = 1500
NO_SALARY_TEXT = "Not specified"

SEARCH_SYSTEM_TEMPLATE = "job_search_system.j2"
SEARCH_USER_TEMPLATE = "job_search_user.j2"
JOB_DETAIL_TEMPLATE = "job_detail.j2"


class ChatMessage(BaseModel):
    """One message of a chat-completion request."""

    model_config = ConfigDict(frozen=True)

    role: Literal["system", "user", "assistant"]
    content: str


def salary_range(job: JobWithSalary) -> str:
    """Summarize a job's grades as ``$min - $max cadence``.

    The cadence shown is that of the first grade.

    Example:
        "$5,000 - $6,250 monthly"
    """
    if not job.salary_grades:
        return NO_SALARY_TEXT
    amounts = [grade.amount for grade in job.salary_grades]
    cadence = job.salary_grades[0].cadence.value
    return f"${format_amount(min(amounts))} - ${format_amount(max(amounts))} {cadence}"


def format_job_line(position: int, job: JobWithSalary) -> str:
    return f"{position}. {job.title} ({job.jurisdiction}) - {salary_range(job)}"


class PromptRenderer:
    """Renders chat prompts from package templates.

    Templates are cached by the Jinja2 environment after first load.
    """

    def __init__(self, template_dir: str = "prompt_templates"):
        """Initialize the Jinja2 environment.

        Args:
            template_dir: Directory name within the civjobs.chat package
        """
        self.env = Environment(
            loader=PackageLoader("civjobs.chat", template_dir),
            autoescape=False,  # plain-text prompts
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["amount"] = format_amount

    def render(self, template_name: str, **context) -> str:
        """Render one template.

        Raises:
            PromptTemplateError: If the template is missing or fails to render
        """
        try:
            return self.env.get_template(template_name).render(**context).strip()
        except TemplateError as e:
            logger.error(
                f"Prompt template rendering failed: {e}",
                extra={"event": "chat.prompt.render_failed", "template": template_name},
            )
            raise PromptTemplateError(f"Prompt template rendering failed: {e}", template_name) from e


_default_renderer: Optional[PromptRenderer] = None


def get_prompt_renderer() -> PromptRenderer:
    global _default_renderer
    if _default_renderer is None:
        _default_renderer = PromptRenderer()
    return _default_renderer


def build_job_search_messages(
    query: str,
    jobs: Sequence[JobWithSalary],
    max_jobs: Optional[int] = None,
    renderer: Optional[PromptRenderer] = None,
) -> List[ChatMessage]:
    """System and user messages asking the model to summarize matched jobs.

    Args:
        query: The user's original question
        jobs: Matched jobs, listed in the given order
        max_jobs: List at most this many jobs; the rest are only counted
        renderer: Prompt renderer (defaults to the shared one)
    """
    renderer = renderer or get_prompt_renderer()
    listed = list(jobs if max_jobs is None else jobs[:max_jobs])

    system_prompt = renderer.render(SEARCH_SYSTEM_TEMPLATE)
    user_prompt = renderer.render(
        SEARCH_USER_TEMPLATE,
        query=query,
        job_lines=[format_job_line(position, job) for position, job in enumerate(listed, 1)],
        omitted_count=len(jobs) - len(listed),
    )
    return [
        ChatMessage(role="system", content=system_prompt),
        ChatMessage(role="user", content=user_prompt),
    ]


def build_job_detail_prompt(
    job: JobWithSalary,
    question: str,
    renderer: Optional[PromptRenderer] = None,
) -> str:
    """Single prompt answering ``question`` from one job's own record.

    The description is cut to its first 1500 characters.
    """
    renderer = renderer or get_prompt_renderer()
    return renderer.render(
        JOB_DETAIL_TEMPLATE,
        job=job,
        description=job.description[:DESCRIPTION_PROMPT_LIMIT],
        question=question,
    )
