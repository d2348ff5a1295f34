"""Tests for the in-memory store."""
from concurrent.futures import ThreadPoolExecutor

from accessible_travel.models.records import (
    EmergencyContact,
    EmergencyContactCreate,
    TripPlanCreate,
)
from accessible_travel.storage import InMemoryTable, Storage, memory


class TestInMemoryTable:
    """Test insert/get/list/delete."""

    def test_insert_assigns_id(self):
        table = InMemoryTable(EmergencyContact)

        contact = table.insert(EmergencyContactCreate(name="Hotel desk", phone="+33 1 23"))

        assert isinstance(contact, EmergencyContact)
        assert contact.id
        assert table.get(contact.id) == contact
        assert table.list() == [contact]

    def test_get_missing(self):
        assert InMemoryTable(EmergencyContact).get("nonexistent-id") is None

    def test_delete(self):
        table = InMemoryTable(EmergencyContact)
        contact = table.insert(EmergencyContactCreate(name="Guardian", phone="555"))

        assert table.delete(contact.id) is True
        assert table.delete(contact.id) is False
        assert table.list() == []

    def test_concurrent_inserts_get_unique_ids(self):
        """Parallel inserts never collide or lose records."""
        storage = Storage()
        record = TripPlanCreate(title="Trip", destination="Rome")

        with ThreadPoolExecutor(max_workers=8) as pool:
            ids = list(pool.map(lambda _: storage.trip_plans.insert(record).id, range(200)))

        assert len(set(ids)) == 200
        assert len(storage.trip_plans.list()) == 200

        with ThreadPoolExecutor(max_workers=8) as pool:
            found = list(pool.map(storage.trip_plans.get, ids))
        assert [r.id for r in found] == ids


class TestSeededStorage:
    """Test the demo seed data."""

    def test_seed_counts(self):
        storage = Storage.seeded()

        assert len(storage.destinations.list()) == 8
        assert len(storage.volunteers.list()) == 6
        assert len(storage.blog_posts.list()) == 6
        assert len(storage.emergency_contacts.list()) == 2
        assert storage.trip_plans.list() == []

    def test_seed_values(self):
        storage = Storage.seeded()

        louvre = next(d for d in storage.destinations.list() if d.name == "Louvre Museum")
        assert louvre.accessibility_score == 5
        assert louvre.sign_language_support is True
        assert louvre.to_response()["imageUrl"].startswith("https://")

        default_contacts = [c for c in storage.emergency_contacts.list() if c.is_default]
        assert [c.phone for c in default_contacts] == ["112"]

    def test_concurrent_first_calls_share_one_store(self, monkeypatch):
        """Requests racing on an unset global all get the same seeded store."""
        monkeypatch.setattr(memory, "storage", None)

        with ThreadPoolExecutor(max_workers=8) as pool:
            stores = list(pool.map(lambda _: memory.get_storage(), range(32)))

        assert all(s is stores[0] for s in stores)
        assert len(stores[0].destinations.list()) == 8
