"""
Service error taxonomy.

Routes map these onto HTTP status codes:
- ValidationError -> 400
- NotFoundError -> 404
- UpstreamError (and its subclasses) -> 500
"""
from typing import Optional


class ServiceError(Exception):
    """Base class for errors raised by the collection and query services"""
    pass


class ValidationError(ServiceError):
    """Caller input is missing or malformed"""
    pass


class NotFoundError(ServiceError):
    """Unknown collection key or missing resource"""
    pass


class UpstreamError(ServiceError):
    """A call to the OpenAI service failed

    Carries the upstream message and, when known, the HTTP status code the
    upstream returned.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class EmptyResponseError(UpstreamError):
    """Upstream returned no response object at all"""
    pass


class NoTextError(UpstreamError):
    """Upstream response contained no usable text"""
    pass
