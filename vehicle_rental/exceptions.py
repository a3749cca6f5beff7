"""
Custom exception classes for the vehicle rental record-keeper.

Every error carries a ``kind`` tag (validation, not_found, conflict, io) so the
shell can report it and keep the interaction loop running instead of crashing.
"""


class RentalSystemError(Exception):
    """Base class for every error raised by the rental domain."""

    kind = "error"
    default_message = "Error: operation failed"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message


# ---------- validation ----------
class ValidationError(RentalSystemError, ValueError):
    """Raised when a field is malformed or out of range. Nothing is mutated."""

    kind = "validation"
    default_message = "Error: invalid value"


class InvalidDateRangeError(ValidationError):
    """Raised when a date is malformed or the end date is not after the start date."""

    default_message = "Error: invalid date range"


# ---------- not found ----------
class NotFoundError(RentalSystemError, LookupError):
    kind = "not_found"
    default_message = "Error: not found"


class VehicleNotFoundError(NotFoundError):
    """Raised when a registration number cannot be found in the system."""

    default_message = "Vehicle not found."


class CustomerNotFoundError(NotFoundError):
    """Raised when a customer ID (ID card / NIP) cannot be found in the system."""

    default_message = "Customer not found."


class RentalNotFoundError(NotFoundError):
    """Raised when a vehicle has no active rental to return."""

    default_message = "Rental not found for this vehicle."


# ---------- conflicts ----------
class ConflictError(RentalSystemError):
    kind = "conflict"
    default_message = "Error: conflicting state"


class DuplicateVehicleError(ConflictError):
    default_message = "Vehicle with this registration number already exists."


class DuplicateCustomerError(ConflictError):
    default_message = "Customer with this ID already exists."


class VehicleUnavailableError(ConflictError):
    """Raised when a vehicle already has an active rental."""

    default_message = "Vehicle is already rented."


class VehicleInUseError(ConflictError):
    """Raised when removing a vehicle that an active rental still references."""

    default_message = "Cannot remove vehicle that is currently rented."


class CustomerHasRentalError(ConflictError):
    """Raised when removing a customer that an active rental still references."""

    default_message = "Cannot remove customer who has active rentals."


# ---------- storage ----------
class StorageError(RentalSystemError, OSError):
    """Raised when the data file cannot be written or its structure is unreadable."""

    kind = "io"
    default_message = "Could not open file for saving."
