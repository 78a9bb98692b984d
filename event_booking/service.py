# service.py
import logging

from event_booking.data_models import Booking
from event_booking.eligibility import EligibilityChecker
from event_booking.errors import ForbiddenError, NotFoundError
from event_booking.repositories import BookingRepositoryProtocol, RoomRepositoryProtocol

logger = logging.getLogger(__name__)


class BookingService:
    """
    Reads, creates and moves a user's hotel booking.

    Every operation first runs the eligibility check. Checks and writes are
    separate round-trips with no transaction around them, so two concurrent
    requests may both pass the capacity check for the last free place.
    """

    def __init__(
        self,
        booking_repository: BookingRepositoryProtocol,
        room_repository: RoomRepositoryProtocol,
        eligibility: EligibilityChecker,
    ):
        self.booking_repository = booking_repository
        self.room_repository = room_repository
        self.eligibility = eligibility

    async def get_booking(self, user_id: int) -> Booking:
        await self.eligibility.ensure_can_book(user_id)

        booking = await self.booking_repository.find_booking(user_id)
        if not booking:
            raise NotFoundError()
        return booking

    async def save_booking(self, user_id: int, room_id: int) -> int:
        await self.eligibility.ensure_can_book(user_id)

        if await self.booking_repository.find_booking(user_id):
            logger.info("User %s already holds a booking", user_id)
            raise ForbiddenError("A reservation already exists")

        await self._ensure_room_has_space(room_id)

        booking_id = await self.booking_repository.save_booking(user_id, room_id)
        logger.info("Created booking %s for user %s in room %s", booking_id, user_id, room_id)
        return booking_id

    async def update_booking(self, user_id: int, room_id: int, booking_id: int) -> int:
        await self.eligibility.ensure_can_book(user_id)

        if not await self.booking_repository.find_booking(user_id):
            logger.info("User %s has no booking to update", user_id)
            raise ForbiddenError("User does not have a reservation yet")

        await self._ensure_room_has_space(room_id)

        # booking_id is not matched against user_id
        if not await self.booking_repository.find_booking_by_id(booking_id):
            raise NotFoundError()

        await self.booking_repository.update_booking(booking_id, room_id)
        logger.info("Moved booking %s to room %s for user %s", booking_id, room_id, user_id)
        return booking_id

    async def _ensure_room_has_space(self, room_id: int) -> None:
        room = await self.room_repository.find_room(room_id)
        if not room:
            raise NotFoundError()

        occupants = await self.booking_repository.find_bookings_by_room_id(room_id)
        # A capacity of 0 never counts as full
        if len(occupants) != 0 and len(occupants) == room.capacity:
            logger.info("Room %s is full (%s/%s)", room_id, len(occupants), room.capacity)
            raise ForbiddenError("Room is full")
