# eligibility.py
import logging

from event_booking.data_models import TicketStatus
from event_booking.errors import CannotHaveBookingError, NotFoundError
from event_booking.repositories import EnrollmentRepositoryProtocol, TicketRepositoryProtocol

logger = logging.getLogger(__name__)


class EligibilityChecker:
    """Decides whether a user's ticket entitles them to hold a hotel booking."""

    def __init__(
        self,
        enrollment_repository: EnrollmentRepositoryProtocol,
        ticket_repository: TicketRepositoryProtocol,
    ):
        self.enrollment_repository = enrollment_repository
        self.ticket_repository = ticket_repository

    async def ensure_can_book(self, user_id: int) -> None:
        """
        Raises NotFoundError when the user is not enrolled, and
        CannotHaveBookingError when the ticket is missing, still reserved
        (unpaid), remote, or does not include the hotel.
        """
        enrollment = await self.enrollment_repository.find_by_user_id(user_id)
        if not enrollment:
            raise NotFoundError()

        ticket = await self.ticket_repository.find_by_enrollment_id(enrollment.id)
        if (
            not ticket
            or ticket.status == TicketStatus.RESERVED
            or ticket.ticket_type.is_remote
            or not ticket.ticket_type.includes_hotel
        ):
            logger.info("User %s is not eligible for a hotel booking", user_id)
            raise CannotHaveBookingError()
