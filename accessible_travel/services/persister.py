"""
Plan Persister - Stores a generated plan with the request that produced it.
"""
import logging

from ..errors import PersistenceError
from ..models.plan import GeneratedPlan
from ..models.preferences import TripPreference
from ..models.records import TripPlanCreate
from ..storage import Storage

logger = logging.getLogger(__name__)


class PlanPersister:
    """Writes StoredTripPlan records. Additional notes are not kept."""

    def __init__(self, storage: Storage):
        self.storage = storage

    def persist(self, preference: TripPreference, plan: GeneratedPlan) -> str:
        """
        Insert a new trip plan record.

        Returns:
            The store-assigned id

        Raises:
            PersistenceError: if the store rejects the write
        """
        dates = preference.travel_dates
        record = TripPlanCreate(
            user_id=None,
            title=plan.title,
            destination=preference.destination,
            disability_type=preference.disability_type.value,
            accessibility_needs=preference.accessibility_needs.model_dump(by_alias=True),
            itinerary=plan.to_response(),
            start_date=(dates.start_date or None) if dates else None,
            end_date=(dates.end_date or None) if dates else None,
        )

        try:
            stored = self.storage.trip_plans.insert(record)
        except Exception as exc:
            raise PersistenceError(f"Failed to store trip plan: {exc}") from exc

        logger.debug("Stored trip plan %s", stored.id)
        return stored.id
