from datetime import datetime
from pydantic import BaseModel, Field


class BookingBase(BaseModel):
    name: str
    email: str
    phone: str
    service: str
    date: str
    time: str


class BookingCreate(BookingBase):
    pass


class BookingStatusUpdate(BaseModel):
    status: str


class Booking(BookingBase):
    id: int
    status: str | None = None
    created_at: datetime | None = Field(default=None, alias="createdAt")

    class Config:
        from_attributes = True
        populate_by_name = True
