"""
Trip Preference Schema - what a traveler submits to request a plan.
"""
from pydantic import BaseModel, ConfigDict, Field, StrictBool
from pydantic import ValidationError as PydanticValidationError
from typing import Any, Optional
from enum import Enum

from ..errors import ValidationError


class DisabilityType(str, Enum):
    """Disability types the planner tailors itineraries to."""
    VISUAL = "visual"
    HEARING = "hearing"
    MOBILITY = "mobility"
    COGNITIVE = "cognitive"
    MULTIPLE = "multiple"


class AccessibilityNeeds(BaseModel):
    """Independent accommodation flags. Absent flags are false."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    wheelchair_access: StrictBool = Field(False, alias="wheelchairAccess")
    tactile_paths: StrictBool = Field(False, alias="tactilePaths")
    audio_guides: StrictBool = Field(False, alias="audioGuides")
    sign_language_support: StrictBool = Field(False, alias="signLanguageSupport")
    quiet_spaces: StrictBool = Field(False, alias="quietSpaces")
    assistance_required: StrictBool = Field(False, alias="assistanceRequired")

    def enabled(self) -> list[str]:
        """Field names of the flags that are set, in declaration order."""
        return [name for name in type(self).model_fields if getattr(self, name)]


class TravelDates(BaseModel):
    """Optional date range. Kept as the client sent it; order is not checked."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    start_date: Optional[str] = Field(None, alias="startDate")
    end_date: Optional[str] = Field(None, alias="endDate")


class TripPreference(BaseModel):
    """A validated request for an accessible trip plan."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    destination: str = Field(
        ...,
        min_length=1,
        description="Where the traveler is going, e.g. 'Paris, France'"
    )
    disability_type: DisabilityType = Field(
        ...,
        alias="disabilityType",
        description="Disability the itinerary should accommodate"
    )
    accessibility_needs: AccessibilityNeeds = Field(
        default_factory=AccessibilityNeeds,
        alias="accessibilityNeeds",
        description="Accommodations the traveler needs"
    )
    travel_dates: Optional[TravelDates] = Field(
        None,
        alias="travelDates"
    )
    additional_notes: Optional[str] = Field(
        None,
        alias="additionalNotes",
        description="Free-text notes passed through to the prompt"
    )


def error_messages(exc: PydanticValidationError) -> list[str]:
    """Flatten pydantic errors into 'field.path: message' strings."""
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"])
        messages.append(f"{location}: {error['msg']}" if location else error["msg"])
    return messages


def validate_preference(data: Any) -> TripPreference:
    """
    Validate a raw request body into a normalized TripPreference.

    Unknown keys are dropped and all six accessibility flags come back
    explicitly set.

    Raises:
        ValidationError: with one message per offending field
    """
    try:
        return TripPreference.model_validate(data)
    except PydanticValidationError as exc:
        raise ValidationError(error_messages(exc)) from exc
