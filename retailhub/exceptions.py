"""Exception hierarchy for retailhub.

Every error carries the HTTP status it maps to and renders itself as the
``ErrorItem`` list of the response envelope. Conversion to the envelope
happens once, in the exception handlers registered on the application.
"""

from typing import Literal, TypedDict

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

ErrorType = Literal["invalid", "required", "not_found", "internal_error"]


class ErrorItemDict(TypedDict):
    """Plain-dict form of a single envelope error."""

    field: str
    message: str
    type: ErrorType


class RetailhubError(Exception):
    """Base exception for all retailhub errors."""

    error_type: ErrorType = "internal_error"
    default_field = "server"

    def __init__(self, message: str, status_code: int = 500, field: str | None = None) -> None:
        """Initialize exception with message, status code and offending field."""
        self.message = message
        self.status_code = status_code
        self.field = field or self.default_field
        super().__init__(self.message)

    def to_error_items(self) -> list[ErrorItemDict]:
        """Render this error as envelope error items."""
        return [{"field": self.field, "message": self.message, "type": self.error_type}]


class ConfigurationError(RetailhubError):
    """A resource has no (or a malformed) mapping configuration.

    Indicates a deployment defect, never a bad request; never retried.
    """

    def __init__(self, message: str, resource: str | None = None) -> None:
        """Initialize with message and the resource name involved."""
        self.resource = resource
        super().__init__(message, status_code=500)


class NotFoundError(RetailhubError):
    """Resource not found error."""

    error_type: ErrorType = "not_found"
    default_field = "id"

    def __init__(
        self,
        resource: str,
        resource_id: object | None = None,
        *,
        message: str | None = None,
        field: str | None = None,
    ) -> None:
        """Initialize with resource label and id, or a custom message."""
        self.resource = resource
        self.resource_id = resource_id
        if message is None:
            if resource_id is not None:
                message = f"{resource} with id {resource_id} not found"
            else:
                message = f"{resource} not found"
        super().__init__(message, status_code=404, field=field)


class ValidationError(RetailhubError):
    """Request input violates a constraint."""

    error_type: ErrorType = "invalid"
    default_field = "validation"

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and the offending field."""
        super().__init__(message, status_code=400, field=field)


class ParseError(ValidationError):
    """A value that must be a decimal integer id is not one."""

    def __init__(self, value: object, field: str = "id") -> None:
        """Initialize with the unparsable value and its field name."""
        self.value = value
        super().__init__(f"Invalid {field} '{value}': expected a numeric id", field=field)


class PersistenceError(RetailhubError):
    """The storage layer rejected or failed an operation."""

    default_field = "database"

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize with message and status code."""
        super().__init__(message, status_code=status_code)
        if status_code < 500:
            self.error_type = "invalid"

    @classmethod
    def from_sqlalchemy(cls, error: SQLAlchemyError) -> "PersistenceError":
        """Translate a SQLAlchemy error; constraint violations are client errors."""
        if isinstance(error, IntegrityError):
            return cls("Database constraint violated", status_code=400)
        return cls("Database operation failed")


class InsufficientStockError(ValidationError):
    """An order asks for more of a product than is in stock."""

    def __init__(self, product_id: int, available: float, requested: float) -> None:
        """Initialize with the product and both quantities."""
        self.product_id = product_id
        self.available = available
        self.requested = requested
        super().__init__(
            f"Insufficient stock for product {product_id}. "
            f"Available: {available:g}, Requested: {requested:g}",
            field="items",
        )


class DuplicateAccountNumberError(ValidationError):
    """Another account already uses this number."""

    def __init__(self, number: str) -> None:
        """Initialize with the conflicting account number."""
        self.number = number
        super().__init__(f"Account number {number} already exists", field="number")


class AccountInUseError(ValidationError):
    """An account with booked transactions cannot be deleted."""

    def __init__(self, account_id: object, transaction_count: int) -> None:
        """Initialize with the account id and its transaction count."""
        self.account_id = account_id
        self.transaction_count = transaction_count
        super().__init__(
            f"Account with id {account_id} has {transaction_count} transaction(s) "
            "and cannot be deleted",
            field="id",
        )
