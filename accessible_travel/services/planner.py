"""
Trip Planner - Runs one trip-plan generation request end to end.
validate -> build prompt -> generate -> persist
"""
import logging
from typing import Any, Optional

from .llm_client import GenerationService, get_generation_client
from .persister import PlanPersister
from .prompts import build_prompt
from ..errors import PersistenceError
from ..models.plan import GeneratedPlan
from ..models.preferences import validate_preference
from ..storage import Storage, get_storage

logger = logging.getLogger(__name__)


class TripPlanner:
    """Generates accessible trip plans from raw requests."""

    def __init__(self, generator: GenerationService, persister: PlanPersister):
        self.generator = generator
        self.persister = persister

    async def generate(self, payload: Any) -> GeneratedPlan:
        """
        Generate and store a plan for a raw trip request.

        Validation and generation failures propagate to the caller. A failed
        write is logged and the plan is still returned.

        Args:
            payload: The decoded request body

        Returns:
            The generated plan

        Raises:
            ValidationError: if the request is malformed (nothing is generated)
            GenerationError: if the generation service fails
        """
        preference = validate_preference(payload)
        prompt = build_prompt(preference)

        logger.info(
            "Generating trip plan for %s (%s)",
            preference.destination,
            preference.disability_type.value,
        )
        plan = await self.generator.generate(prompt)

        try:
            plan_id = self.persister.persist(preference, plan)
        except PersistenceError:
            logger.exception("Could not store trip plan for %s", preference.destination)
        else:
            logger.info("Stored trip plan %s for %s", plan_id, preference.destination)

        return plan


def get_planner(
    generator: Optional[GenerationService] = None,
    storage: Optional[Storage] = None
) -> TripPlanner:
    """Build a planner, defaulting to the global client and store."""
    return TripPlanner(
        generator=generator or get_generation_client(),
        persister=PlanPersister(storage or get_storage()),
    )
