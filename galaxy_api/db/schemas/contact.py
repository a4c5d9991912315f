from datetime import datetime
from pydantic import BaseModel, Field


class ContactBase(BaseModel):
    name: str
    email: str
    message: str


class ContactCreate(ContactBase):
    pass


class Contact(ContactBase):
    id: int
    created_at: datetime | None = Field(default=None, alias="createdAt")

    class Config:
        from_attributes = True
        populate_by_name = True
