# data_models.py
import enum
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


class TicketStatus(str, enum.Enum):
    RESERVED = "RESERVED"
    PAID = "PAID"


@dataclass
class Room:
    """A hotel room; capacity is the maximum number of simultaneous bookings."""
    id: int
    name: str
    capacity: int
    hotel_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass
class Booking:
    """A user's reservation of a room. `room` is only filled when loaded with it."""
    id: int
    user_id: int
    room_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    room: Optional[Room] = None


@dataclass
class Enrollment:
    id: int
    user_id: int
    name: str = ""


@dataclass
class TicketType:
    id: int
    name: str
    is_remote: bool
    includes_hotel: bool
    price: int = 0


@dataclass
class Ticket:
    id: int
    enrollment_id: int
    status: TicketStatus
    ticket_type: TicketType


@dataclass
class Session:
    id: int
    user_id: int
    token: str
