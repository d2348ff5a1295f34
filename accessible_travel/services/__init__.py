"""Services for the accessible travel API."""
from .llm_client import GenerationService, OpenAIGenerationClient, get_generation_client
from .mock_llm import MockGenerationClient
from .persister import PlanPersister
from .planner import TripPlanner, get_planner
from .prompts import build_prompt, describe_needs

__all__ = [
    "GenerationService",
    "OpenAIGenerationClient",
    "MockGenerationClient",
    "get_generation_client",
    "PlanPersister",
    "TripPlanner",
    "get_planner",
    "build_prompt",
    "describe_needs",
]
