from .booking import Booking, BookingCreate, BookingStatusUpdate
from .contact import Contact, ContactCreate
from .admin import AdminLogin, AdminLoginResult, AdminVerify
