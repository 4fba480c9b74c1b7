"""Domain exceptions that represent business rule violations."""

from typing import Optional


class DomainException(Exception):
    """Base exception for all domain-related errors."""

    def __init__(self, message: str, error_code: Optional[str] = None):
        self.message = message
        self.error_code = error_code
        super().__init__(message)


# User Domain Exceptions
class UserException(DomainException):
    """Base exception for user-related errors."""


class UserNotFound(UserException):
    """User not found in the system."""

    def __init__(self, identifier: str):
        super().__init__(f"User not found: {identifier}", "USER_NOT_FOUND")


class UserAlreadyExists(UserException):
    """User already exists in the system."""

    def __init__(self, field: str, value: str):
        super().__init__(
            f"User with {field} '{value}' already exists",
            "USER_ALREADY_EXISTS",
        )


class UserNotIdentified(UserException):
    """Request carries no usable user identity."""

    def __init__(self):
        super().__init__("Could not identify user", "USER_NOT_IDENTIFIED")


# Pet Domain Exceptions
class PetException(DomainException):
    """Base exception for pet-related errors."""


class PetNotFound(PetException):
    """Pet does not exist or belongs to another user."""

    def __init__(self, pet_id: int):
        super().__init__(f"Pet not found: {pet_id}", "PET_NOT_FOUND")


class HealthRecordNotFound(PetException):
    def __init__(self, health_id: int):
        super().__init__(
            f"Health record not found: {health_id}", "HEALTH_RECORD_NOT_FOUND"
        )


class ActivityNotFound(PetException):
    def __init__(self, activity_id: int):
        super().__init__(
            f"Pet activity not found: {activity_id}", "ACTIVITY_NOT_FOUND"
        )


# Reminder Domain Exceptions
class EventException(DomainException):
    """Base exception for reminder-related errors."""


class EventNotFound(EventException):
    def __init__(self, event_id: int):
        super().__init__(f"Reminder not found: {event_id}", "EVENT_NOT_FOUND")


# Notification Domain Exceptions
class NotificationException(DomainException):
    """Base exception for the reminder notifier."""


class EventSourceUnavailable(NotificationException):
    """Scheduled events could not be read at notifier startup."""

    def __init__(self, reason: str):
        super().__init__(
            f"Unable to load scheduled events: {reason}",
            "EVENT_SOURCE_UNAVAILABLE",
        )


class DispatchFailed(NotificationException):
    """A reminder email could not be delivered."""

    def __init__(self, recipient: str, reason: str):
        super().__init__(
            f"Failed to notify {recipient}: {reason}", "DISPATCH_FAILED"
        )


# Validation Domain Exceptions
class ValidationException(DomainException):
    """Base exception for validation errors."""


class InvalidRange(ValidationException):
    """Value is outside allowed range."""

    def __init__(self, field: str, reason: str):
        super().__init__(f"Invalid {field}: {reason}", "INVALID_RANGE")
