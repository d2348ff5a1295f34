"""
Generated plan models - Structured output of the generation service.
"""
from pydantic import BaseModel, ConfigDict, Field


# Icon tags the front end knows how to draw; anything else gets its default icon.
ACTIVITY_ICONS = ("building", "utensils", "camera", "mapPin", "route")


class Activity(BaseModel):
    """A single activity in a day."""
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    time: str = Field(
        ...,
        description="Display label, e.g. '9:00 AM'. Never parsed."
    )
    activity: str = Field(
        ...,
        description="Name of the activity"
    )
    location: str = Field(
        ...,
        description="Specific place"
    )
    accessibility_notes: str = Field(
        ...,
        alias="accessibilityNotes",
        description="Accessibility features available there"
    )
    icon: str = Field(
        ...,
        description="Icon tag, normally one of ACTIVITY_ICONS"
    )


class DayPlan(BaseModel):
    """Plan for a single day."""
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    day: int = Field(..., description="1-based day number")
    title: str
    activities: list[Activity]


class GeneratedPlan(BaseModel):
    """Complete multi-day itinerary returned to the traveler."""
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    title: str
    summary: str
    itinerary: list[DayPlan]
    tips: list[str]

    def to_response(self) -> dict:
        """Serialize with the camelCase keys the front end expects."""
        return self.model_dump(by_alias=True)
