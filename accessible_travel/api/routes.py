"""
API Routes for the accessible travel app.
"""
from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from typing import Any
import logging

from ..errors import GenerationError, ValidationError
from ..models.preferences import error_messages
from ..models.records import EmergencyContactCreate
from ..services.llm_client import GenerationService, get_generation_client
from ..services.planner import TripPlanner, get_planner
from ..storage import Storage, get_storage

logger = logging.getLogger(__name__)

GENERATION_FAILED = "Failed to generate trip plan"

router = APIRouter(prefix="/api", tags=["accessible-travel"])


def get_trip_planner(
    generator: GenerationService = Depends(get_generation_client),
    storage: Storage = Depends(get_storage),
) -> TripPlanner:
    return get_planner(generator=generator, storage=storage)


def error_response(status_code: int, error: Any) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": error})


async def read_json(request: Request) -> Any:
    """Decode the request body, raising ValidationError when it is not JSON."""
    try:
        return await request.json()
    except ValueError as exc:
        raise ValidationError(["body: Invalid JSON"]) from exc


# Destinations

@router.get("/destinations")
async def list_destinations(storage: Storage = Depends(get_storage)):
    """List destinations with their accessibility ratings."""
    return [d.to_response() for d in storage.destinations.list()]


@router.get("/destinations/{destination_id}")
async def get_destination(destination_id: str, storage: Storage = Depends(get_storage)):
    destination = storage.destinations.get(destination_id)
    if not destination:
        return error_response(404, "Destination not found")
    return destination.to_response()


# Emergency Contacts

@router.get("/emergency-contacts")
async def list_emergency_contacts(storage: Storage = Depends(get_storage)):
    return [c.to_response() for c in storage.emergency_contacts.list()]


@router.post("/emergency-contacts", status_code=201)
async def create_emergency_contact(request: Request, storage: Storage = Depends(get_storage)):
    """Add an emergency contact."""
    try:
        data = EmergencyContactCreate.model_validate(await read_json(request))
    except ValidationError as exc:
        return error_response(400, exc.messages)
    except PydanticValidationError as exc:
        return error_response(400, error_messages(exc))

    contact = storage.emergency_contacts.insert(data)
    logger.info("Created emergency contact %s", contact.id)
    return contact.to_response()


@router.delete("/emergency-contacts/{contact_id}", status_code=204)
async def delete_emergency_contact(contact_id: str, storage: Storage = Depends(get_storage)):
    if not storage.emergency_contacts.delete(contact_id):
        return error_response(404, "Contact not found")
    return Response(status_code=204)


# Volunteers

@router.get("/volunteers")
async def list_volunteers(storage: Storage = Depends(get_storage)):
    return [v.to_response() for v in storage.volunteers.list()]


@router.get("/volunteers/{volunteer_id}")
async def get_volunteer(volunteer_id: str, storage: Storage = Depends(get_storage)):
    volunteer = storage.volunteers.get(volunteer_id)
    if not volunteer:
        return error_response(404, "Volunteer not found")
    return volunteer.to_response()


# Blog Posts

@router.get("/blog-posts")
async def list_blog_posts(storage: Storage = Depends(get_storage)):
    return [p.to_response() for p in storage.blog_posts.list()]


@router.get("/blog-posts/{post_id}")
async def get_blog_post(post_id: str, storage: Storage = Depends(get_storage)):
    post = storage.blog_posts.get(post_id)
    if not post:
        return error_response(404, "Blog post not found")
    return post.to_response()


# Trip Plans

@router.get("/trip-plans")
async def list_trip_plans(storage: Storage = Depends(get_storage)):
    """List stored trip plans, each with the request that produced it."""
    return [p.to_response() for p in storage.trip_plans.list()]


@router.get("/trip-plans/{plan_id}")
async def get_trip_plan(plan_id: str, storage: Storage = Depends(get_storage)):
    plan = storage.trip_plans.get(plan_id)
    if not plan:
        return error_response(404, "Trip plan not found")
    return plan.to_response()


@router.post("/trip-plans/generate")
async def generate_trip_plan(
    request: Request,
    planner: TripPlanner = Depends(get_trip_planner),
):
    """
    Generate an accessible 3-day itinerary.

    Returns the generated plan itself; the stored copy is listed under /trip-plans.
    Validation errors come back as a JSON array of messages with status 400.
    """
    try:
        plan = await planner.generate(await read_json(request))
    except ValidationError as exc:
        return JSONResponse(status_code=400, content=exc.messages)
    except GenerationError as exc:
        logger.error("Error generating trip plan: %s", exc)
        return error_response(500, GENERATION_FAILED)
    except Exception:
        logger.exception("Unexpected error generating trip plan")
        return error_response(500, GENERATION_FAILED)

    return plan.to_response()
