from . import booking_service, contact_service

__all__ = ["booking_service", "contact_service"]
