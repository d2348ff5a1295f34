"""
In-memory storage - Process-local tables for every entity.
Would be replaced with a database in production; callers only see the Table interface.
"""
import json
import logging
import threading
import uuid
from pathlib import Path
from typing import Generic, Optional, Protocol, TypeVar

from pydantic import BaseModel

from ..models.records import (
    BlogPost,
    BlogPostCreate,
    Destination,
    DestinationCreate,
    EmergencyContact,
    EmergencyContactCreate,
    StoredTripPlan,
    Volunteer,
    VolunteerCreate,
)

logger = logging.getLogger(__name__)

SEED_PATH = Path(__file__).parent.parent / "resources" / "seed.json"

RecordT = TypeVar("RecordT", bound=BaseModel)


class Table(Protocol[RecordT]):
    """Insert/get/list/delete capability for one entity type."""

    def insert(self, data: BaseModel) -> RecordT:
        ...

    def get(self, record_id: str) -> Optional[RecordT]:
        ...

    def list(self) -> list[RecordT]:
        ...

    def delete(self, record_id: str) -> bool:
        ...


class InMemoryTable(Generic[RecordT]):
    """Dict-backed table. Every insert gets a fresh uuid4; records are never updated."""

    def __init__(self, record_type: type[RecordT]):
        self.record_type = record_type
        self._records: dict[str, RecordT] = {}
        self._lock = threading.Lock()

    def insert(self, data: BaseModel) -> RecordT:
        record = self.record_type(id=str(uuid.uuid4()), **data.model_dump())
        with self._lock:
            self._records[record.id] = record
        return record

    def get(self, record_id: str) -> Optional[RecordT]:
        with self._lock:
            return self._records.get(record_id)

    def list(self) -> list[RecordT]:
        with self._lock:
            return list(self._records.values())

    def delete(self, record_id: str) -> bool:
        with self._lock:
            return self._records.pop(record_id, None) is not None


class Storage:
    """One table per entity the API serves."""

    def __init__(self):
        self.destinations: Table[Destination] = InMemoryTable(Destination)
        self.emergency_contacts: Table[EmergencyContact] = InMemoryTable(EmergencyContact)
        self.volunteers: Table[Volunteer] = InMemoryTable(Volunteer)
        self.blog_posts: Table[BlogPost] = InMemoryTable(BlogPost)
        self.trip_plans: Table[StoredTripPlan] = InMemoryTable(StoredTripPlan)

    @classmethod
    def seeded(cls, path: Path = SEED_PATH) -> "Storage":
        """Create a store pre-filled with the demo directory data."""
        storage = cls()
        storage.load_seed(path)
        return storage

    def load_seed(self, path: Path) -> None:
        """Insert the records from a seed JSON file."""
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)

        for item in data.get("destinations", []):
            self.destinations.insert(DestinationCreate.model_validate(item))
        for item in data.get("volunteers", []):
            self.volunteers.insert(VolunteerCreate.model_validate(item))
        for item in data.get("blogPosts", []):
            self.blog_posts.insert(BlogPostCreate.model_validate(item))
        for item in data.get("emergencyContacts", []):
            self.emergency_contacts.insert(EmergencyContactCreate.model_validate(item))

        logger.info(
            "Seeded store from %s: %d destinations, %d volunteers, %d blog posts, %d contacts",
            path.name,
            len(self.destinations.list()),
            len(self.volunteers.list()),
            len(self.blog_posts.list()),
            len(self.emergency_contacts.list()),
        )


# Global store
storage: Optional[Storage] = None
_storage_lock = threading.Lock()


def get_storage() -> Storage:
    """Get or create the global seeded store."""
    global storage
    if storage is None:
        with _storage_lock:
            if storage is None:
                storage = Storage.seeded()
    return storage
