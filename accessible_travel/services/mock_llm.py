"""
Mock Generation Client - Offline stand-in for the generation service.
Builds a deterministic 3-day plan from the prompt so the API works without an API key.
"""
import logging
import re

from ..models.plan import GeneratedPlan

logger = logging.getLogger(__name__)

DESTINATION_PATTERN = re.compile(r"traveling to (.+)\.$", re.MULTILINE)
NEEDS_PATTERN = re.compile(r"^Their accessibility needs include: (.+)\.$", re.MULTILINE)

DAY_TEMPLATES = [
    ("Arrival and City Center", [
        ("10:00 AM", "Check in at an accessible hotel", "City center hotel", "building"),
        ("12:30 PM", "Lunch at a step-free restaurant", "Old town", "utensils"),
        ("2:30 PM", "Guided orientation walk", "Main square", "route"),
        ("6:00 PM", "Sunset viewpoint", "Riverside promenade", "camera"),
    ]),
    ("Museums and Culture", [
        ("9:30 AM", "Accessible museum visit", "National museum", "building"),
        ("12:00 PM", "Cafe lunch with quiet seating", "Museum quarter", "utensils"),
        ("2:00 PM", "Historic district tour", "Historic district", "mapPin"),
        ("5:00 PM", "Photo stop at a landmark", "Landmark plaza", "camera"),
    ]),
    ("Parks and Local Life", [
        ("10:00 AM", "Stroll through a botanical garden", "Botanical garden", "route"),
        ("12:30 PM", "Market lunch", "Covered market", "utensils"),
        ("3:00 PM", "Local neighborhood visit", "Arts district", "mapPin"),
        ("7:00 PM", "Farewell dinner", "Waterfront", "utensils"),
    ]),
]


class MockGenerationClient:
    """Deterministic plan generator used when LLM_PROVIDER is 'mock'."""

    def __init__(self):
        self.model = "mock-accessible-planner"

    async def generate(self, prompt: str) -> GeneratedPlan:
        """Return a canned plan for the destination named in the prompt."""
        match = DESTINATION_PATTERN.search(prompt)
        destination = match.group(1) if match else "your destination"
        needs_match = NEEDS_PATTERN.search(prompt)
        needs = needs_match.group(1) if needs_match else "general accessibility accommodations"

        logger.info("Mock generation for %s", destination)

        itinerary = []
        for number, (title, activities) in enumerate(DAY_TEMPLATES, start=1):
            itinerary.append({
                "day": number,
                "title": title,
                "activities": [
                    {
                        "time": time,
                        "activity": activity,
                        "location": f"{location}, {destination}",
                        "accessibilityNotes": f"Confirm {needs} with the venue before visiting.",
                        "icon": icon,
                    }
                    for time, activity, location, icon in activities
                ],
            })

        return GeneratedPlan.model_validate({
            "title": f"Accessible Trip to {destination}",
            "summary": (
                f"A relaxed three days in {destination} planned around {needs}. "
                "Each stop was chosen for step-free access and rest breaks."
            ),
            "itinerary": itinerary,
            "tips": [
                "Call venues a day ahead to confirm accessibility services.",
                "Book accessible taxis in advance during peak hours.",
                "Carry a printed copy of your medical information.",
                "Ask for priority boarding and assistance at transport hubs.",
                "Save local emergency numbers before you arrive.",
            ],
        })
