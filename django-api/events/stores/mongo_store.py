"""MongoDB implementation of the event and booking stores.

Documents keep the domain field names; ``_id`` holds the ObjectId and
timestamps are written by the store, never by callers.
"""

import logging
from collections.abc import Mapping, Sequence
from datetime import datetime, timezone
from typing import Any

from bson import ObjectId
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from pymongo import ASCENDING, DESCENDING, AsyncMongoClient, ReturnDocument
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import DuplicateKeyError

from events.domain import Booking, BookingId, Event, EventId
from events.domain.errors import DuplicateSlugError
from events.stores.connection import ConnectionManager
from events.stores.interfaces import BookingStore, EventStore

logger = logging.getLogger(__name__)

EVENTS_COLLECTION = "events"
BOOKINGS_COLLECTION = "bookings"


async def ensure_indexes(db: AsyncDatabase) -> None:
    await db[EVENTS_COLLECTION].create_index(
        [("slug", ASCENDING)], name="unique_slug", unique=True
    )
    await db[EVENTS_COLLECTION].create_index([("tags", ASCENDING)], name="tags_asc")
    await db[BOOKINGS_COLLECTION].create_index([("event_id", ASCENDING)], name="event_id_asc")


async def connect_mongo() -> AsyncDatabase:
    """Open a client, check it answers, and make sure indexes exist."""
    if not settings.MONGODB_URI:
        raise ImproperlyConfigured("Please define the MONGODB_URI environment variable.")

    client: AsyncMongoClient = AsyncMongoClient(
        settings.MONGODB_URI,
        tz_aware=True,
        serverSelectionTimeoutMS=settings.MONGODB_TIMEOUT_MS,
    )
    try:
        db = client.get_database(settings.MONGODB_DB_NAME)
        await db.command("ping")
        await ensure_indexes(db)
    except Exception:
        await client.close()
        raise
    logger.info("Connected to MongoDB database %s and ensured indexes", settings.MONGODB_DB_NAME)
    return db


async def close_mongo(db: AsyncDatabase) -> None:
    await db.client.close()


def _now() -> datetime:
    return datetime.now(timezone.utc)


def event_from_document(doc: Mapping[str, Any]) -> Event:
    return Event(
        id=EventId(value=str(doc["_id"])),
        slug=doc["slug"],
        title=doc["title"],
        description=doc["description"],
        overview=doc["overview"],
        image=doc["image"],
        venue=doc["venue"],
        location=doc["location"],
        date=doc["date"],
        time=doc["time"],
        mode=doc["mode"],
        audience=doc["audience"],
        organizer=doc["organizer"],
        agenda=tuple(doc.get("agenda") or ()),
        tags=tuple(doc.get("tags") or ()),
        created_at=doc["created_at"],
        updated_at=doc["updated_at"],
    )


def booking_from_document(doc: Mapping[str, Any]) -> Booking:
    return Booking(
        id=BookingId(value=str(doc["_id"])),
        event_id=EventId(value=str(doc["event_id"])),
        email=doc["email"],
        created_at=doc["created_at"],
        updated_at=doc["updated_at"],
    )


class MongoEventStore(EventStore):
    """MongoDB-backed event store."""

    def __init__(self, connections: ConnectionManager[AsyncDatabase]) -> None:
        self._connections = connections

    async def _collection(self):
        db = await self._connections.acquire()
        return db[EVENTS_COLLECTION]

    async def list_events(self) -> list[Event]:
        collection = await self._collection()
        cursor = collection.find({}).sort("created_at", DESCENDING)
        return [event_from_document(doc) async for doc in cursor]

    async def get_event_by_slug(self, slug: str) -> Event | None:
        collection = await self._collection()
        doc = await collection.find_one({"slug": slug})
        return event_from_document(doc) if doc else None

    async def event_exists(self, event_id: EventId) -> bool:
        if not ObjectId.is_valid(event_id.value):
            return False
        collection = await self._collection()
        count = await collection.count_documents({"_id": ObjectId(event_id.value)}, limit=1)
        return count > 0

    async def find_events_with_any_tag(
        self, tags: Sequence[str], exclude_id: EventId
    ) -> list[Event]:
        if not tags:
            return []
        collection = await self._collection()
        cursor = collection.find(
            {"_id": {"$ne": ObjectId(exclude_id.value)}, "tags": {"$in": list(tags)}}
        ).sort("created_at", DESCENDING)
        return [event_from_document(doc) async for doc in cursor]

    async def insert_event(self, fields: Mapping[str, Any]) -> Event:
        collection = await self._collection()
        now = _now()
        doc = {**fields, "created_at": now, "updated_at": now}
        try:
            result = await collection.insert_one(doc)
        except DuplicateKeyError as exc:
            raise DuplicateSlugError(fields["slug"]) from exc
        doc["_id"] = result.inserted_id
        return event_from_document(doc)

    async def update_event(self, event_id: EventId, fields: Mapping[str, Any]) -> Event | None:
        collection = await self._collection()
        try:
            doc = await collection.find_one_and_update(
                {"_id": ObjectId(event_id.value)},
                {"$set": {**fields, "updated_at": _now()}},
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError as exc:
            raise DuplicateSlugError(fields["slug"]) from exc
        return event_from_document(doc) if doc else None


class MongoBookingStore(BookingStore):
    """MongoDB-backed booking store."""

    def __init__(self, connections: ConnectionManager[AsyncDatabase]) -> None:
        self._connections = connections

    async def insert_booking(self, event_id: EventId, email: str) -> Booking:
        db = await self._connections.acquire()
        now = _now()
        doc = {
            "event_id": ObjectId(event_id.value),
            "email": email,
            "created_at": now,
            "updated_at": now,
        }
        result = await db[BOOKINGS_COLLECTION].insert_one(doc)
        doc["_id"] = result.inserted_id
        return booking_from_document(doc)
