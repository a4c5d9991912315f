"""Common application-wide constants."""

from datetime import timedelta

# Lifetime of an admin session issued by the login route
ADMIN_SESSION_TTL = timedelta(hours=8)

DEFAULT_BOOKING_STATUS = "pending"

# Attached to every response, preflight included
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, PATCH, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
    "Content-Type": "application/json",
}

BOOKINGS_ROUTE = "api/bookings"
CONTACTS_ROUTE = "api/contacts"
ADMIN_LOGIN_ROUTE = "api/admin/login"
ADMIN_VERIFY_ROUTE = "api/admin/verify"
STATUS_SUFFIX = "/status"


__all__ = [
    "ADMIN_SESSION_TTL",
    "DEFAULT_BOOKING_STATUS",
    "CORS_HEADERS",
    "BOOKINGS_ROUTE",
    "CONTACTS_ROUTE",
    "ADMIN_LOGIN_ROUTE",
    "ADMIN_VERIFY_ROUTE",
    "STATUS_SUFFIX",
]
