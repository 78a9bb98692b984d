# main.py
import logging
from dataclasses import asdict
from datetime import datetime
from typing import Optional

import fastapi
from fastapi import Depends, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from event_booking.auth import get_current_user_id
from event_booking.config import LOG_LEVEL
from event_booking.database import database, engine, metadata
from event_booking.eligibility import EligibilityChecker
from event_booking.errors import ForbiddenError, NotFoundError
from event_booking.repositories import (
    BookingRepository,
    EnrollmentRepository,
    RoomRepository,
    TicketRepository,
)
from event_booking.service import BookingService

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

# FastAPI Setup
app = fastapi.FastAPI(title="event_booking")


# Request / response models
class BookingBody(BaseModel):
    roomId: int


# Response keys follow the camelCase wire format used by the bookings API
class RoomOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    capacity: int
    hotel_id: int = Field(alias="hotelId")
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")


class BookingOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    user_id: int = Field(alias="userId")
    room_id: int = Field(alias="roomId")
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")
    room: RoomOut = Field(alias="Room")


def get_booking_service() -> BookingService:
    eligibility = EligibilityChecker(EnrollmentRepository(database), TicketRepository(database))
    return BookingService(BookingRepository(database), RoomRepository(database), eligibility)


# Service errors -> HTTP status
@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": exc.message})


@app.exception_handler(ForbiddenError)
async def forbidden_handler(request: Request, exc: ForbiddenError):
    # Also catches CannotHaveBookingError
    return JSONResponse(status_code=status.HTTP_403_FORBIDDEN, content={"detail": exc.message})


@app.get("/bookings", response_model=BookingOut)
async def get_booking(
    user_id: int = Depends(get_current_user_id),
    service: BookingService = Depends(get_booking_service),
):
    """Returns the current user's booking with its room."""
    booking = await service.get_booking(user_id)
    return BookingOut.model_validate(asdict(booking))


@app.post("/bookings", status_code=status.HTTP_200_OK)
async def save_booking(
    body: BookingBody,
    user_id: int = Depends(get_current_user_id),
    service: BookingService = Depends(get_booking_service),
):
    booking_id = await service.save_booking(user_id, body.roomId)
    return {"bookingId": booking_id}


@app.put("/bookings/{booking_id}", status_code=status.HTTP_200_OK)
async def update_booking(
    booking_id: int,
    body: BookingBody,
    user_id: int = Depends(get_current_user_id),
    service: BookingService = Depends(get_booking_service),
):
    await service.update_booking(user_id, body.roomId, booking_id)
    return {"bookingId": booking_id}


@app.on_event("startup")
async def startup():
    await database.connect()
    # Create tables if they don't exist
    metadata.create_all(bind=engine)


@app.on_event("shutdown")
async def shutdown():
    await database.disconnect()
