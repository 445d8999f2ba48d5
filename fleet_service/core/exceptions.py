"""Error kinds raised by the repositories and mapped to HTTP responses in ``fleet_service.main``."""


class FleetError(Exception):
    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(FleetError):
    """Malformed, missing or out-of-range values."""

    status_code = 400


class ConflictError(FleetError):
    """Duplicate unique value on create, or a change to an immutable field."""

    status_code = 409


class StorageError(FleetError):
    """The database call itself failed."""

    status_code = 500
