# repositories.py
"""
Data access for the booking module.

Each repository is described by a Protocol so the service can be wired to
the SQL implementations below in production and to in-memory fakes in tests.
The SQL implementations run SQLAlchemy Core queries through `databases`;
every call is a single statement and none of them open a transaction.
"""
from datetime import datetime, timezone
from typing import List, Optional, Protocol

import sqlalchemy
from databases import Database

from event_booking.data_models import (
    Booking,
    Enrollment,
    Room,
    Session,
    Ticket,
    TicketStatus,
    TicketType,
)
from event_booking.models import bookings, enrollments, rooms, sessions, ticket_types, tickets


class BookingRepositoryProtocol(Protocol):
    async def find_booking(self, user_id: int) -> Optional[Booking]: ...
    async def find_booking_by_id(self, booking_id: int) -> Optional[Booking]: ...
    async def find_bookings_by_room_id(self, room_id: int) -> List[Booking]: ...
    async def save_booking(self, user_id: int, room_id: int) -> int: ...
    async def update_booking(self, booking_id: int, room_id: int) -> None: ...


class RoomRepositoryProtocol(Protocol):
    async def find_room(self, room_id: int) -> Optional[Room]: ...


class EnrollmentRepositoryProtocol(Protocol):
    async def find_by_user_id(self, user_id: int) -> Optional[Enrollment]: ...


class TicketRepositoryProtocol(Protocol):
    async def find_by_enrollment_id(self, enrollment_id: int) -> Optional[Ticket]: ...


class SessionRepositoryProtocol(Protocol):
    async def find_by_token(self, token: str) -> Optional[Session]: ...


def _room_from_record(record, prefix: str = "") -> Room:
    return Room(
        id=record[f"{prefix}id"],
        name=record[f"{prefix}name"],
        capacity=record[f"{prefix}capacity"],
        hotel_id=record[f"{prefix}hotel_id"],
        created_at=record[f"{prefix}created_at"],
        updated_at=record[f"{prefix}updated_at"],
    )


def _booking_from_record(record) -> Booking:
    return Booking(
        id=record["id"],
        user_id=record["user_id"],
        room_id=record["room_id"],
        created_at=record["created_at"],
        updated_at=record["updated_at"],
    )


class BookingRepository:
    def __init__(self, database: Database):
        self.database = database

    async def find_booking(self, user_id: int) -> Optional[Booking]:
        """Returns the user's booking with its room attached, or None."""
        # room_id is shared by both tables through the join
        query = (
            sqlalchemy.select(
                bookings,
                rooms.c.name.label("room_name"),
                rooms.c.capacity.label("room_capacity"),
                rooms.c.hotel_id.label("room_hotel_id"),
                rooms.c.created_at.label("room_created_at"),
                rooms.c.updated_at.label("room_updated_at"),
            )
            .select_from(bookings.join(rooms, bookings.c.room_id == rooms.c.id))
            .where(bookings.c.user_id == user_id)
            .order_by(bookings.c.id)
        )
        record = await self.database.fetch_one(query)
        if record is None:
            return None
        booking = _booking_from_record(record)
        booking.room = _room_from_record(record, prefix="room_")
        return booking

    async def find_booking_by_id(self, booking_id: int) -> Optional[Booking]:
        query = bookings.select().where(bookings.c.id == booking_id)
        record = await self.database.fetch_one(query)
        return _booking_from_record(record) if record else None

    async def find_bookings_by_room_id(self, room_id: int) -> List[Booking]:
        query = bookings.select().where(bookings.c.room_id == room_id)
        return [_booking_from_record(record) for record in await self.database.fetch_all(query)]

    async def save_booking(self, user_id: int, room_id: int) -> int:
        now = datetime.now(timezone.utc)
        query = bookings.insert().values(user_id=user_id, room_id=room_id, created_at=now, updated_at=now)
        return await self.database.execute(query)

    async def update_booking(self, booking_id: int, room_id: int) -> None:
        query = (
            bookings.update()
            .where(bookings.c.id == booking_id)
            .values(room_id=room_id, updated_at=datetime.now(timezone.utc))
        )
        await self.database.execute(query)


class RoomRepository:
    def __init__(self, database: Database):
        self.database = database

    async def find_room(self, room_id: int) -> Optional[Room]:
        record = await self.database.fetch_one(rooms.select().where(rooms.c.id == room_id))
        return _room_from_record(record) if record else None


class EnrollmentRepository:
    def __init__(self, database: Database):
        self.database = database

    async def find_by_user_id(self, user_id: int) -> Optional[Enrollment]:
        query = enrollments.select().where(enrollments.c.user_id == user_id)
        record = await self.database.fetch_one(query)
        if record is None:
            return None
        return Enrollment(id=record["id"], user_id=record["user_id"], name=record["name"])


class TicketRepository:
    def __init__(self, database: Database):
        self.database = database

    async def find_by_enrollment_id(self, enrollment_id: int) -> Optional[Ticket]:
        """Returns the enrollment's ticket with its ticket type, or None."""
        query = (
            sqlalchemy.select(
                tickets.c.id,
                tickets.c.enrollment_id,
                tickets.c.status,
                ticket_types.c.id.label("type_id"),
                ticket_types.c.name.label("type_name"),
                ticket_types.c.price.label("type_price"),
                ticket_types.c.is_remote,
                ticket_types.c.includes_hotel,
            )
            .select_from(tickets.join(ticket_types, tickets.c.ticket_type_id == ticket_types.c.id))
            .where(tickets.c.enrollment_id == enrollment_id)
        )
        record = await self.database.fetch_one(query)
        if record is None:
            return None
        return Ticket(
            id=record["id"],
            enrollment_id=record["enrollment_id"],
            status=TicketStatus(record["status"]),
            ticket_type=TicketType(
                id=record["type_id"],
                name=record["type_name"],
                price=record["type_price"],
                is_remote=bool(record["is_remote"]),
                includes_hotel=bool(record["includes_hotel"]),
            ),
        )


class SessionRepository:
    def __init__(self, database: Database):
        self.database = database

    async def find_by_token(self, token: str) -> Optional[Session]:
        record = await self.database.fetch_one(sessions.select().where(sessions.c.token == token))
        if record is None:
            return None
        return Session(id=record["id"], user_id=record["user_id"], token=record["token"])
