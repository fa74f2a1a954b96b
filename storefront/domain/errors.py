# storefront/domain/errors.py


class StoreError(Exception):
    """Blad domenowy z kodem maszynowym i czytelnym komunikatem."""

    code = "INTERNAL_SERVER_ERROR"
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class BadRequestError(StoreError):
    code = "BAD_REQUEST"
    status_code = 400
    default_message = "Bad request"


class UnauthorizedError(StoreError):
    code = "UNAUTHORIZED"
    status_code = 401
    default_message = "Please login"


class ForbiddenError(StoreError):
    code = "FORBIDDEN"
    status_code = 403
    default_message = "You do not have permission to perform this action"


class NotFoundError(StoreError):
    code = "NOT_FOUND"
    status_code = 404
    default_message = "Not found"


class ConflictError(StoreError):
    code = "CONFLICT"
    status_code = 409
    default_message = "Already exists"


class DatabaseUnavailableError(StoreError):
    code = "SERVICE_UNAVAILABLE"
    status_code = 503
    default_message = "Database not available"
