"""
Framework independent request/response types used by the controllers.
"""
from dataclasses import dataclass, field
from typing import Any, Optional

from .errors import ServerError, UnauthorizedError


@dataclass
class HttpRequest:
    body: dict = field(default_factory=dict)
    headers: dict = field(default_factory=dict)
    guardian_id: Optional[int] = None


@dataclass
class HttpResponse:
    status_code: int
    body: Any = None


def ok(data: Any) -> HttpResponse:
    return HttpResponse(status_code=200, body=data)


def created(data: Any) -> HttpResponse:
    return HttpResponse(status_code=201, body=data)


def bad_request(error: Exception) -> HttpResponse:
    return HttpResponse(status_code=400, body=error)


def unauthorized() -> HttpResponse:
    return HttpResponse(status_code=401, body=UnauthorizedError())


def forbidden(error: Exception) -> HttpResponse:
    return HttpResponse(status_code=403, body=error)


def server_error(error: BaseException) -> HttpResponse:
    return HttpResponse(status_code=500, body=ServerError.from_exception(error))
