"""
Shared fixtures: an in-memory store with fake repositories, and factories
to populate it with enrollments, tickets, rooms and bookings.
"""
import itertools
import os
from datetime import datetime, timezone
from typing import Dict, List, Optional

import pytest

# Must be set before event_booking.config is imported
os.environ.setdefault("JWT_SECRET", "test-secret")

from event_booking.data_models import (
    Booking,
    Enrollment,
    Room,
    Session,
    Ticket,
    TicketStatus,
    TicketType,
)
from event_booking.eligibility import EligibilityChecker
from event_booking.service import BookingService


class InMemoryStore:
    def __init__(self):
        self._ids = itertools.count(1)
        self.enrollments: Dict[int, Enrollment] = {}
        self.tickets: Dict[int, Ticket] = {}
        self.rooms: Dict[int, Room] = {}
        self.bookings: Dict[int, Booking] = {}
        self.sessions: Dict[str, Session] = {}

    def next_id(self) -> int:
        return next(self._ids)

    # Factories

    def create_enrollment(self, user_id: int) -> Enrollment:
        enrollment = Enrollment(id=self.next_id(), user_id=user_id, name=f"attendee {user_id}")
        self.enrollments[user_id] = enrollment
        return enrollment

    def create_ticket(
        self,
        enrollment: Enrollment,
        is_remote: bool = False,
        includes_hotel: bool = True,
        status: TicketStatus = TicketStatus.PAID,
    ) -> Ticket:
        ticket_type = TicketType(
            id=self.next_id(), name="ticket type", is_remote=is_remote, includes_hotel=includes_hotel
        )
        ticket = Ticket(id=self.next_id(), enrollment_id=enrollment.id, status=status, ticket_type=ticket_type)
        self.tickets[enrollment.id] = ticket
        return ticket

    def create_eligible_user(self, user_id: int) -> Enrollment:
        enrollment = self.create_enrollment(user_id)
        self.create_ticket(enrollment)
        return enrollment

    def create_room(self, capacity: int = 2) -> Room:
        room = Room(id=self.next_id(), name="101", capacity=capacity, hotel_id=1)
        self.rooms[room.id] = room
        return room

    def create_booking(self, user_id: int, room: Room) -> Booking:
        now = datetime.now(timezone.utc)
        booking = Booking(id=self.next_id(), user_id=user_id, room_id=room.id, created_at=now, updated_at=now)
        self.bookings[booking.id] = booking
        return booking


class FakeBookingRepository:
    def __init__(self, store: InMemoryStore):
        self.store = store

    async def find_booking(self, user_id: int) -> Optional[Booking]:
        for booking in self.store.bookings.values():
            if booking.user_id == user_id:
                booking.room = self.store.rooms.get(booking.room_id)
                return booking
        return None

    async def find_booking_by_id(self, booking_id: int) -> Optional[Booking]:
        return self.store.bookings.get(booking_id)

    async def find_bookings_by_room_id(self, room_id: int) -> List[Booking]:
        return [b for b in self.store.bookings.values() if b.room_id == room_id]

    async def save_booking(self, user_id: int, room_id: int) -> int:
        return self.store.create_booking(user_id, self.store.rooms[room_id]).id

    async def update_booking(self, booking_id: int, room_id: int) -> None:
        booking = self.store.bookings[booking_id]
        booking.room_id = room_id
        booking.updated_at = datetime.now(timezone.utc)


class FakeRoomRepository:
    def __init__(self, store: InMemoryStore):
        self.store = store

    async def find_room(self, room_id: int) -> Optional[Room]:
        return self.store.rooms.get(room_id)


class FakeEnrollmentRepository:
    def __init__(self, store: InMemoryStore):
        self.store = store

    async def find_by_user_id(self, user_id: int) -> Optional[Enrollment]:
        return self.store.enrollments.get(user_id)


class FakeTicketRepository:
    def __init__(self, store: InMemoryStore):
        self.store = store

    async def find_by_enrollment_id(self, enrollment_id: int) -> Optional[Ticket]:
        return self.store.tickets.get(enrollment_id)


class FakeSessionRepository:
    def __init__(self, store: InMemoryStore):
        self.store = store

    async def find_by_token(self, token: str) -> Optional[Session]:
        return self.store.sessions.get(token)


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def eligibility(store):
    return EligibilityChecker(FakeEnrollmentRepository(store), FakeTicketRepository(store))


@pytest.fixture
def service(store, eligibility):
    return BookingService(FakeBookingRepository(store), FakeRoomRepository(store), eligibility)
