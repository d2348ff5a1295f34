"""
Generation Client - Calls the text-generation service and validates its plan.
Uses the OpenAI chat completions API (or any compatible endpoint) in JSON mode.
"""
from openai import APIError, APIStatusError, AsyncOpenAI
from pydantic import ValidationError as PydanticValidationError
from typing import Optional, Protocol
import json
import logging
import threading

from ..config import get_llm_config, settings
from ..errors import GenerationError
from ..models.plan import GeneratedPlan
from .prompts import SYSTEM_PROMPT

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("title", "summary", "itinerary", "tips")


class GenerationService(Protocol):
    """Given a prompt, return a structured plan or raise GenerationError."""

    async def generate(self, prompt: str) -> GeneratedPlan:
        ...


def parse_generated_plan(content: Optional[str]) -> GeneratedPlan:
    """
    Parse the raw model output into a GeneratedPlan.

    The service runs in JSON mode, so anything other than a JSON object is
    treated as a failure rather than repaired.

    Raises:
        GenerationError: if the content is empty, not a JSON object, or
            missing any required part of the plan
    """
    if not content or not content.strip():
        raise GenerationError("Generation service returned no content")

    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise GenerationError(f"Generation service returned invalid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise GenerationError(
            f"Generation service returned {type(data).__name__}, expected an object"
        )

    missing = [field for field in REQUIRED_FIELDS if field not in data]
    if missing:
        raise GenerationError(f"Generated plan is missing fields: {', '.join(missing)}")

    try:
        return GeneratedPlan.model_validate(data)
    except PydanticValidationError as exc:
        raise GenerationError(
            f"Generated plan has {exc.error_count()} malformed fields: {exc}"
        ) from exc


class OpenAIGenerationClient:
    """Async generation client with an OpenAI-compatible API. One attempt per call."""

    def __init__(
        self,
        client: Optional[AsyncOpenAI] = None,
        model: Optional[str] = None,
        max_tokens: Optional[int] = None
    ):
        self.client = client or AsyncOpenAI(**get_llm_config())
        self.model = model or settings.llm_model
        self.max_tokens = max_tokens or settings.llm_max_tokens

    async def generate(self, prompt: str) -> GeneratedPlan:
        """
        Request a plan for the given prompt.

        Args:
            prompt: The user prompt built from a TripPreference

        Returns:
            The validated GeneratedPlan
        """
        messages = [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": prompt},
        ]

        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=messages,
                response_format={"type": "json_object"},
                max_completion_tokens=self.max_tokens,
            )
        except APIStatusError as exc:
            raise GenerationError(
                f"Generation service returned status {exc.status_code}"
            ) from exc
        except APIError as exc:
            raise GenerationError(f"Generation service request failed: {exc}") from exc

        if not response.choices:
            raise GenerationError("Generation service returned no choices")

        choice = response.choices[0]
        if choice.finish_reason == "length":
            logger.warning("Generation hit the %d token limit", self.max_tokens)

        return parse_generated_plan(choice.message.content)


# Global generation client instance
generation_client: Optional[GenerationService] = None
_client_lock = threading.Lock()


def get_generation_client() -> GenerationService:
    """Get or create the global generation client for the configured provider."""
    global generation_client
    if generation_client is None:
        with _client_lock:
            if generation_client is None:
                if settings.llm_provider == "mock":
                    from .mock_llm import MockGenerationClient
                    generation_client = MockGenerationClient()
                else:
                    generation_client = OpenAIGenerationClient()
                logger.info("Using %s generation client", settings.llm_provider)
    return generation_client
