# errors.py
"""
Errors raised by the booking service.

They propagate unchanged to the HTTP layer, where main.py maps them to
status codes (NotFoundError -> 404, ForbiddenError -> 403).
"""


class ApplicationError(Exception):
    message = "Application error"

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class NotFoundError(ApplicationError):
    """The enrollment, booking or room being looked up does not exist."""

    message = "No result for this search!"


class ForbiddenError(ApplicationError):
    """A business rule blocks the action. `message` says which one."""

    message = "Forbidden"


class CannotHaveBookingError(ForbiddenError):
    """The user's ticket does not entitle them to hotel accommodation."""

    message = "Cannot have booking!"
