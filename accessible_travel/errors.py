"""
Domain errors raised by the trip planning flow.
Routes translate these into HTTP responses.
"""


class TravelPlannerError(Exception):
    """Base class for all trip planning errors."""


class ValidationError(TravelPlannerError):
    """A trip request failed validation. Carries one message per field problem."""

    def __init__(self, messages: list[str]):
        self.messages = list(messages)
        super().__init__("; ".join(self.messages))


class GenerationError(TravelPlannerError):
    """The generation service failed or returned an unusable plan."""


class PersistenceError(TravelPlannerError):
    """Writing a record to the store failed."""
