from .booking import Booking
from .contact import Contact
