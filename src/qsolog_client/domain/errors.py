"""Error taxonomy for logbook API interactions."""


class QsoLogError(Exception):
    """Base error for failures reported by the logbook API or transport."""

    def __init__(self, detail: str, status_code: int | None = None) -> None:
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code


class AuthenticationFailure(QsoLogError):
    """Login rejected because of bad credentials."""


class AuthorizationExpired(QsoLogError):
    """A credential was rejected by a protected endpoint."""


class ConflictDetected(QsoLogError):
    """The server found existing entries that collide with a write."""

    def __init__(
        self,
        detail: str,
        existing_ids: tuple[str, ...] = (),
        status_code: int | None = 409,
    ) -> None:
        super().__init__(detail, status_code=status_code)
        self.existing_ids = existing_ids


class ValidationFailure(QsoLogError, ValueError):
    """The request was malformed or failed validation."""


class NotFound(QsoLogError):
    """The requested resource does not exist or is not owned by the user."""


class TransportFailure(QsoLogError):
    """The service could not be reached."""


class ApiError(QsoLogError):
    """Any other non-success response."""


class AccessDenied(QsoLogError):
    """The current user lacks the role an operation requires."""
