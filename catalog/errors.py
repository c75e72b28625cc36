"""Errors raised by record store clients."""


class StoreError(Exception):
    status_code = 500

    def __init__(self, message: str, *, method: str | None = None):
        super().__init__(message)
        self.message = message
        self.method = method


class StoreUnavailableError(StoreError):
    """Connectivity or database failure; the store could not answer."""
    status_code = 503


class NotFoundError(StoreError):
    status_code = 404


class UnauthorizedError(StoreError):
    status_code = 403


class DuplicateIdError(StoreError):
    status_code = 409


_BY_STATUS = {
    401: UnauthorizedError,
    403: UnauthorizedError,
    404: NotFoundError,
    409: DuplicateIdError,
}


def error_for_status(status_code: int, message: str, *, method: str | None = None) -> StoreError:
    if status_code in _BY_STATUS:
        return _BY_STATUS[status_code](message, method=method)
    if status_code >= 500:
        return StoreUnavailableError(message, method=method)
    return StoreError(message, method=method)
