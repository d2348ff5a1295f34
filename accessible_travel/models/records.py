"""
Stored records - Entities kept in the backing store.
Each `*Create` model is what callers insert; the subclass adds the store-assigned id.
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Optional


class Record(BaseModel):
    """Base for stored entities. Serialized with camelCase keys."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_response(self) -> dict:
        return self.model_dump(by_alias=True)


class DestinationCreate(Record):
    """A place rated for accessibility."""
    name: str
    description: Optional[str] = None
    location: str
    latitude: Optional[str] = None
    longitude: Optional[str] = None
    image_url: Optional[str] = Field(None, alias="imageUrl")
    accessibility_score: int = Field(
        ...,
        ge=1, le=5,
        alias="accessibilityScore",
        description="Overall accessibility rating, 1-5"
    )
    wheelchair_access: bool = Field(False, alias="wheelchairAccess")
    tactile_paths: bool = Field(False, alias="tactilePaths")
    audio_guides: bool = Field(False, alias="audioGuides")
    sign_language_support: bool = Field(False, alias="signLanguageSupport")
    category: Optional[str] = Field(
        None,
        description="museum, park, restaurant, hotel or attraction"
    )


class Destination(DestinationCreate):
    id: str


class EmergencyContactCreate(Record):
    """A number to call in an emergency."""
    user_id: Optional[str] = Field(None, alias="userId")
    name: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1)
    relationship: Optional[str] = Field(
        None,
        description="hospital, ngo, guardian or caretaker"
    )
    is_default: bool = Field(False, alias="isDefault")


class EmergencyContact(EmergencyContactCreate):
    id: str


class VolunteerCreate(Record):
    """A local guide or caretaker offering help to travelers."""
    name: str
    photo: Optional[str] = None
    languages: list[str] = Field(default_factory=list)
    specializations: list[str] = Field(
        default_factory=list,
        description="Disability types the volunteer is experienced with"
    )
    location: Optional[str] = None
    availability: Optional[str] = Field(
        None,
        description="available, busy or offline"
    )
    rating: int = 5
    bio: Optional[str] = None


class Volunteer(VolunteerCreate):
    id: str


class BlogPostCreate(Record):
    title: str
    excerpt: Optional[str] = None
    content: str
    image_url: Optional[str] = Field(None, alias="imageUrl")
    author: Optional[str] = None
    category: Optional[str] = None
    disability_tags: list[str] = Field(default_factory=list, alias="disabilityTags")


class BlogPost(BlogPostCreate):
    id: str


class TripPlanCreate(Record):
    """A generated plan together with the request that produced it."""
    user_id: Optional[str] = Field(None, alias="userId")
    title: str
    destination: str
    disability_type: Optional[str] = Field(None, alias="disabilityType")
    accessibility_needs: Optional[dict[str, bool]] = Field(None, alias="accessibilityNeeds")
    itinerary: Optional[dict[str, Any]] = Field(
        None,
        description="The full generated plan, stored as-is"
    )
    start_date: Optional[str] = Field(None, alias="startDate")
    end_date: Optional[str] = Field(None, alias="endDate")


class StoredTripPlan(TripPlanCreate):
    id: str
