"""
Errors returned in HTTP response bodies by the controllers.
"""
import traceback
from typing import Optional


class MissingParamError(Exception):
    def __init__(self, param_name: str):
        super().__init__(f"Missing param: {param_name}")
        self.param_name = param_name


class InvalidParamError(Exception):
    def __init__(self, param_name: str):
        super().__init__(f"Invalid param: {param_name}")
        self.param_name = param_name


class ServerError(Exception):
    def __init__(self, stack: Optional[str] = None):
        super().__init__("Internal server error")
        self.stack = stack

    @classmethod
    def from_exception(cls, exc: BaseException) -> "ServerError":
        return cls("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)))


class UnauthorizedError(Exception):
    def __init__(self):
        super().__init__("Unauthorized")


class AccessDeniedError(Exception):
    def __init__(self):
        super().__init__("Access denied")


class AlreadyRegisteredError(Exception):
    def __init__(self):
        super().__init__("The received email or phone is already registered")
