"""Data models for the accessible travel API."""
from .preferences import (
    AccessibilityNeeds,
    DisabilityType,
    TravelDates,
    TripPreference,
    validate_preference,
)
from .plan import ACTIVITY_ICONS, Activity, DayPlan, GeneratedPlan
from .records import (
    BlogPost,
    Destination,
    EmergencyContact,
    EmergencyContactCreate,
    StoredTripPlan,
    TripPlanCreate,
    Volunteer,
)

__all__ = [
    "AccessibilityNeeds",
    "DisabilityType",
    "TravelDates",
    "TripPreference",
    "validate_preference",
    "ACTIVITY_ICONS",
    "Activity",
    "DayPlan",
    "GeneratedPlan",
    "BlogPost",
    "Destination",
    "EmergencyContact",
    "EmergencyContactCreate",
    "StoredTripPlan",
    "TripPlanCreate",
    "Volunteer",
]
