import unittest

from fastapi import status

from app.api.v1.exception_handlers import DomainExceptionHandler
from app.domain.exceptions import (
    DispatchFailed,
    EventNotFound,
    InvalidRange,
    PetNotFound,
    UserAlreadyExists,
    UserNotIdentified,
)


class TestDomainExceptionHandler(unittest.TestCase):
    def test_status_codes(self):
        cases = [
            (UserNotIdentified(), status.HTTP_401_UNAUTHORIZED),
            (UserAlreadyExists("email", "a@example.com"), status.HTTP_400_BAD_REQUEST),
            (PetNotFound(1), status.HTTP_404_NOT_FOUND),
            (EventNotFound(1), status.HTTP_404_NOT_FOUND),
            (InvalidRange("end_time", "before start"), status.HTTP_400_BAD_REQUEST),
            (DispatchFailed("a@example.com", "refused"), status.HTTP_503_SERVICE_UNAVAILABLE),
        ]
        for exc, expected in cases:
            self.assertEqual(DomainExceptionHandler.status_for(exc), expected, type(exc).__name__)

    def test_detail_payload(self):
        http_exc = DomainExceptionHandler.handle_domain_exception(PetNotFound(7))
        self.assertEqual(http_exc.detail["error_code"], "PET_NOT_FOUND")
        self.assertEqual(http_exc.detail["type"], "PetNotFound")

    def test_unexpected_errors_are_hidden(self):
        http_exc = DomainExceptionHandler.translate_exception(KeyError("secret"))
        self.assertEqual(http_exc.status_code, 500)
        self.assertEqual(http_exc.detail["detail"], "Internal server error")
