"""Shared fixtures for the accessible travel tests."""
from typing import Optional

import pytest

from accessible_travel.models.plan import GeneratedPlan
from accessible_travel.storage import Storage


PARIS_REQUEST = {
    "destination": "Paris, France",
    "disabilityType": "mobility",
    "accessibilityNeeds": {
        "wheelchairAccess": True,
        "tactilePaths": False,
        "audioGuides": False,
        "signLanguageSupport": False,
        "quietSpaces": False,
        "assistanceRequired": False,
    },
}


def make_plan_data(title: str = "Accessible Trip to Paris") -> dict:
    """A well-formed plan as the generation service would return it."""
    return {
        "title": title,
        "summary": "Three step-free days in Paris.",
        "itinerary": [
            {
                "day": day,
                "title": f"Day {day}",
                "activities": [
                    {
                        "time": "9:00 AM",
                        "activity": "Louvre visit",
                        "location": "Louvre Museum",
                        "accessibilityNotes": "Lifts to every floor",
                        "icon": "building",
                    }
                ],
            }
            for day in (1, 2, 3)
        ],
        "tips": ["Book the museum in advance"],
    }


class FakeGenerator:
    """Generation service test double that records every prompt it receives."""

    def __init__(self, plan: Optional[GeneratedPlan] = None, error: Optional[Exception] = None):
        self.plan = plan or GeneratedPlan.model_validate(make_plan_data())
        self.error = error
        self.prompts: list[str] = []

    @property
    def calls(self) -> int:
        return len(self.prompts)

    async def generate(self, prompt: str) -> GeneratedPlan:
        self.prompts.append(prompt)
        if self.error:
            raise self.error
        return self.plan


class FailingTable:
    """A table whose writes always fail."""

    def insert(self, data):
        raise RuntimeError("disk full")

    def get(self, record_id):
        return None

    def list(self):
        return []

    def delete(self, record_id):
        return False


@pytest.fixture
def paris_request() -> dict:
    return {**PARIS_REQUEST, "accessibilityNeeds": dict(PARIS_REQUEST["accessibilityNeeds"])}


@pytest.fixture
def plan_data() -> dict:
    return make_plan_data()


@pytest.fixture
def generator() -> FakeGenerator:
    return FakeGenerator()


@pytest.fixture
def storage() -> Storage:
    return Storage()


@pytest.fixture
def failing_storage() -> Storage:
    store = Storage()
    store.trip_plans = FailingTable()
    return store
