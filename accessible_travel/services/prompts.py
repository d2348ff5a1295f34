"""
Prompt Builder - Turns a validated TripPreference into the generation prompt.
Pure functions: the same preference always yields the same prompt.
"""
from ..models.plan import ACTIVITY_ICONS
from ..models.preferences import AccessibilityNeeds, TripPreference


SYSTEM_PROMPT = (
    "You are an expert accessible travel planner. "
    "Always respond with valid JSON only, no markdown or extra text."
)

NO_SPECIFIC_NEEDS = "general accessibility accommodations"

PLAN_SHAPE = """Create a JSON response with this exact structure:
{
  "title": "Accessible Trip to [Destination]",
  "summary": "A brief 2-3 sentence summary of the trip highlighting accessibility features",
  "itinerary": [
    {
      "day": 1,
      "title": "Day title (e.g., 'Arrival and City Center')",
      "activities": [
        {
          "time": "9:00 AM",
          "activity": "Activity name",
          "location": "Specific location",
          "accessibilityNotes": "Specific accessibility features available",
          "icon": "building"
        }
      ]
    }
  ],
  "tips": [
    "Practical accessibility tip 1",
    "Practical accessibility tip 2",
    "Practical accessibility tip 3",
    "Practical accessibility tip 4",
    "Practical accessibility tip 5"
  ]
}

Include 4-5 activities per day. Number the days 1, 2, 3.
The "icon" of every activity must be one of: """ + ", ".join(ACTIVITY_ICONS) + """.
Focus on accessible venues, transportation, and accommodations. Be specific about the accessibility features at each stop, such as ramps, elevators, step-free routes and accessible restrooms."""


def describe_needs(needs: AccessibilityNeeds) -> str:
    """Render the set flags as words, e.g. 'wheelchair access, audio guides'."""
    phrases = [name.replace("_", " ") for name in needs.enabled()]
    return ", ".join(phrases) or NO_SPECIFIC_NEEDS


def build_prompt(preference: TripPreference) -> str:
    """Build the user prompt for a 3-day accessible itinerary."""
    lines = [
        "You are an expert accessible travel planner. "
        f"Create a detailed 3-day travel itinerary for a person with "
        f"{preference.disability_type.value} disability traveling to {preference.destination}.",
        "",
        f"Their accessibility needs include: {describe_needs(preference.accessibility_needs)}.",
    ]
    if preference.additional_notes:
        lines.append(f"Additional notes: {preference.additional_notes}")
    lines.extend(["", PLAN_SHAPE])
    return "\n".join(lines)
