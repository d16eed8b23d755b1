"""
Exceptions raised by the food court services.

Endpoints translate them into HTTP responses:
validation -> 400, not found -> 404, authentication -> 401,
day-end export -> 500.
"""


class FoodCourtError(Exception):
    """Base exception for food court errors."""
    pass


class OrderValidationError(FoodCourtError, ValueError):
    """Raised when an order request is malformed or references unknown rows."""
    pass


class NotFoundError(FoodCourtError):
    """Raised when a referenced waiter, order or item does not exist."""

    def __init__(self, entity, entity_id=None, message=None):
        self.entity = entity
        self.entity_id = entity_id
        if message is None:
            message = f"{entity} not found"
        super().__init__(message)


class WaiterAuthenticationError(FoodCourtError):
    """Raised when no waiter matches the login phone."""

    def __init__(self, phone, message="waiter not found"):
        self.phone = phone
        super().__init__(message)


class DayEndExportError(FoodCourtError):
    """Raised when the day-end spreadsheet cannot be built or written."""
    pass
