from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.orm import Session, sessionmaker

from ..core.constants import (
    ADMIN_LOGIN_ROUTE,
    ADMIN_VERIFY_ROUTE,
    BOOKINGS_ROUTE,
    CONTACTS_ROUTE,
    STATUS_SUFFIX,
)
from ..core.security import AdminCredentialVerifier
from ..core.sessions import AdminSessionManager
from ..db import schemas
from ..services import booking_service, contact_service
from .http import ApiRequest, ApiResponse, json_response
from .matching import RouteMatcher, SubstringMatcher, extract_booking_id

logger = logging.getLogger(__name__)


def _dump(model: Any) -> dict[str, Any]:
    return model.model_dump(mode="json", by_alias=True)


def _fields(payload: Any) -> dict[str, Any]:
    # Credential lookups on a non-object body find nothing.
    return payload if isinstance(payload, dict) else {}


class RequestRouter:
    """Dispatches a request descriptor to the booking, contact or admin branch.

    Branches are tried in order: bookings, contacts, admin login, admin
    verify. A path that matches a branch token but none of its methods falls
    through to the next branch and finally to the 404 response.
    """

    def __init__(
        self,
        session_factory: sessionmaker,
        sessions: AdminSessionManager,
        credentials: AdminCredentialVerifier,
        matcher: RouteMatcher | None = None,
    ) -> None:
        self.session_factory = session_factory
        self.sessions = sessions
        self.credentials = credentials
        self.matcher = matcher or SubstringMatcher()

    def handle(self, request: ApiRequest) -> ApiResponse:
        method = request.method.upper()
        if method == "OPTIONS":
            return ApiResponse(status_code=200)
        try:
            return self._dispatch(method, request)
        except Exception as exc:
            logger.exception(
                "Request handling failed", extra={"method": method, "path": request.path}
            )
            return json_response(500, {"message": "Internal server error", "error": str(exc)})

    def _dispatch(self, method: str, request: ApiRequest) -> ApiResponse:
        payload = request.json()
        path = request.path

        if self.matcher.matches(path, BOOKINGS_ROUTE):
            if method == "POST":
                return self._create_booking(payload)
            if method == "GET":
                return self._list_bookings()
            if method == "PATCH" and self.matcher.matches(path, STATUS_SUFFIX):
                return self._update_booking_status(path, payload)

        if self.matcher.matches(path, CONTACTS_ROUTE):
            if method == "POST":
                return self._create_contact(payload)
            if method == "GET":
                return self._list_contacts()

        if self.matcher.matches(path, ADMIN_LOGIN_ROUTE):
            return self._admin_login(payload)

        if self.matcher.matches(path, ADMIN_VERIFY_ROUTE):
            return self._admin_verify(payload)

        return json_response(404, {"message": "Not found"})

    def _create_booking(self, payload: dict[str, Any]) -> ApiResponse:
        data = schemas.BookingCreate.model_validate(payload)
        with self.session_factory() as db:
            booking = booking_service.create_booking(db, data)
            return json_response(200, _dump(schemas.Booking.model_validate(booking)))

    def _list_bookings(self) -> ApiResponse:
        with self.session_factory() as db:
            rows = booking_service.list_bookings(db)
            return json_response(200, [_dump(schemas.Booking.model_validate(row)) for row in rows])

    def _update_booking_status(self, path: str, payload: dict[str, Any]) -> ApiResponse:
        data = schemas.BookingStatusUpdate.model_validate(payload)
        booking_id = extract_booking_id(path)
        booking = None
        with self.session_factory() as db:
            if booking_id is not None:
                booking = booking_service.update_booking_status(db, booking_id, data.status)
            if booking is None:
                return json_response(404, {"message": "Booking not found"})
            return json_response(200, _dump(schemas.Booking.model_validate(booking)))

    def _create_contact(self, payload: dict[str, Any]) -> ApiResponse:
        data = schemas.ContactCreate.model_validate(payload)
        with self.session_factory() as db:
            contact = contact_service.create_contact(db, data)
            return json_response(200, _dump(schemas.Contact.model_validate(contact)))

    def _list_contacts(self) -> ApiResponse:
        with self.session_factory() as db:
            rows = contact_service.list_contacts(db)
            return json_response(200, [_dump(schemas.Contact.model_validate(row)) for row in rows])

    def _admin_login(self, payload: dict[str, Any]) -> ApiResponse:
        data = schemas.AdminLogin.model_validate(_fields(payload))
        if not self.credentials.verify(data.password):
            logger.warning("Rejected admin login attempt")
            result = schemas.AdminLoginResult(success=False, message="Invalid password")
            return json_response(401, result.model_dump(by_alias=True, exclude_none=True))
        result = schemas.AdminLoginResult(
            success=True, session_id=self.sessions.create(), message="Login successful"
        )
        return json_response(200, result.model_dump(by_alias=True, exclude_none=True))

    def _admin_verify(self, payload: dict[str, Any]) -> ApiResponse:
        data = schemas.AdminVerify.model_validate(_fields(payload))
        if self.sessions.is_valid(data.session_id):
            return json_response(200, {"valid": True})
        return json_response(401, {"valid": False})
