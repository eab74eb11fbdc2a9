"""API exception module."""
from fastapi import status


class SalesAPIException(Exception):
    """Base API exception class.

    Every failure is reported to clients with HTTP 400; ``error_type`` tells
    bad input apart from a failed computation.
    """

    status_code: int = status.HTTP_400_BAD_REQUEST
    error_type: str = "error"

    def __init__(self, detail: str = "An unexpected error occurred"):
        super().__init__(detail)
        self.detail = detail


class ValidationFailure(SalesAPIException):
    """Malformed input record or request parameter."""

    error_type = "validation_error"

    def __init__(self, detail: str = "Invalid input"):
        super().__init__(detail=detail)


class InvalidMonthError(ValidationFailure):
    """Month query parameter is not one of the twelve month names."""

    def __init__(
        self,
        detail: str = "Invalid month. Please provide a valid month between January to December.",
    ):
        super().__init__(detail=detail)


class IngestionFailure(SalesAPIException):
    """The store rejected a bulk write."""

    error_type = "ingestion_error"

    def __init__(self, detail: str = "Failed to initialize the database."):
        super().__init__(detail=detail)


class FetchFailure(SalesAPIException):
    """The seed feed was unreachable or returned non-record data."""

    error_type = "fetch_error"

    def __init__(self, detail: str = "Failed to fetch seed data."):
        super().__init__(detail=detail)


class AggregationFailure(SalesAPIException):
    """A storage read failed while computing an analytical view."""

    error_type = "aggregation_error"

    def __init__(self, operation: str, detail: str = None):
        self.operation = operation
        super().__init__(detail=detail or f"Error fetching {operation}.")
