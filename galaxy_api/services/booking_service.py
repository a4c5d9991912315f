import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..core.constants import DEFAULT_BOOKING_STATUS
from ..db import models, schemas

logger = logging.getLogger(__name__)


def create_booking(db: Session, payload: schemas.BookingCreate) -> models.Booking:
    booking = models.Booking(**payload.model_dump(), status=DEFAULT_BOOKING_STATUS)
    db.add(booking)
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    db.refresh(booking)
    logger.info("Booking created", extra={"booking_id": booking.id, "service": booking.service})
    return booking


def list_bookings(db: Session) -> list[models.Booking]:
    return list(db.scalars(select(models.Booking)))


def update_booking_status(db: Session, booking_id: int, status: str) -> models.Booking | None:
    booking = db.get(models.Booking, booking_id)
    if booking is None:
        return None
    booking.status = status
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    db.refresh(booking)
    logger.info("Booking status updated", extra={"booking_id": booking_id, "status": status})
    return booking
