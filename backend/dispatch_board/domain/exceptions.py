"""Domain-specific exceptions, framework-independent."""


class NetworkError(Exception):
    """Raised when a request never produced an HTTP response."""

    def __init__(self, method: str, url: str, reason: str):
        self.method = method
        self.url = url
        self.reason = reason
        super().__init__(f"{method} {url} failed: {reason}")


class HttpError(Exception):
    """Raised when the backend answers with a non-2xx status."""

    def __init__(self, status_code: int, message: str, method: str = "", url: str = ""):
        self.status_code = status_code
        self.message = message
        self.method = method
        self.url = url
        super().__init__(f"{status_code}: {message}")


class EntityNotFoundError(HttpError):
    """Raised when the requested entity does not exist (HTTP 404)."""


class EntityValidationError(HttpError):
    """Raised when a create/update payload is refused with a 4xx status."""


class RpcError(HttpError):
    """Raised when a database remote procedure call fails."""

    def __init__(self, function: str, status_code: int, message: str, url: str = ""):
        self.function = function
        super().__init__(status_code, message, method="POST", url=url)

    def __str__(self) -> str:
        return f"[rpc:{self.function}] {self.status_code}: {self.message}"


class FileReadError(Exception):
    """Raised when a local file needed by a script cannot be read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not read '{path}': {reason}")


class UploadRejectedError(Exception):
    """Raised when an uploaded file fails the type or size checks."""

    def __init__(self, filename: str, message: str, *, too_large: bool = False):
        self.filename = filename
        self.message = message
        self.too_large = too_large
        super().__init__(message)
