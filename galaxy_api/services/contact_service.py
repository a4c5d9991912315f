import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..db import models, schemas

logger = logging.getLogger(__name__)


def create_contact(db: Session, payload: schemas.ContactCreate) -> models.Contact:
    contact = models.Contact(**payload.model_dump())
    db.add(contact)
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    db.refresh(contact)
    logger.info("Contact message stored", extra={"contact_id": contact.id})
    return contact


def list_contacts(db: Session) -> list[models.Contact]:
    return list(db.scalars(select(models.Contact)))
