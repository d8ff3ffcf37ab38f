"""Capability interfaces shared by controllers, use cases and adapters.

Controllers depend on validators and use cases, use cases depend on
repositories and cryptography adapters. Concrete implementations are wired
in ``factories.py``.
"""
from typing import Optional, Protocol

from .http import HttpRequest, HttpResponse
from .schemas import (
    AddGuardianParams,
    AuthenticationParams,
    AuthenticationResult,
    GuardianAccount,
    GuardianResult,
    ResetPasswordParams,
)


# ---------------- Presentation ----------------

class Controller(Protocol):
    def handle(self, request: HttpRequest) -> HttpResponse: ...


class EmailValidator(Protocol):
    def is_valid(self, email: str) -> bool: ...


class NameValidator(Protocol):
    def is_valid(self, first_name: str, last_name: str) -> bool: ...


class PhoneValidator(Protocol):
    def is_valid(self, phone: str) -> bool: ...


class PasswordValidator(Protocol):
    def is_valid(self, password: str) -> bool: ...


# ---------------- Use cases ----------------

class AddGuardian(Protocol):
    def add(self, params: AddGuardianParams) -> Optional[GuardianResult]: ...


class Authentication(Protocol):
    def auth(self, params: AuthenticationParams) -> Optional[AuthenticationResult]: ...


class ForgetPassword(Protocol):
    def forget(self, email: str) -> bool: ...


class ResetPassword(Protocol):
    def reset(self, params: ResetPasswordParams) -> bool: ...


class LoadGuardianByToken(Protocol):
    def load(self, access_token: str) -> Optional[GuardianAccount]: ...


class TokenGenerator(Protocol):
    def generate(self, guardian_id: int) -> Optional[str]: ...


# ---------------- Infrastructure ----------------

class Hasher(Protocol):
    def hash(self, value: str) -> str: ...

    def compare(self, value: str, hashed: str) -> bool: ...


class Encrypter(Protocol):
    def encrypt(self, subject: str) -> str: ...


class Decrypter(Protocol):
    def decrypt(self, token: str) -> Optional[str]: ...


class EmailService(Protocol):
    def send(self, to: str, subject: str, text: str, html: Optional[str] = None) -> None: ...


class AddGuardianRepository(Protocol):
    def add(self, params: AddGuardianParams) -> Optional[GuardianResult]: ...


class LoadGuardianByEmailRepository(Protocol):
    def load_by_email(self, email: str) -> Optional[GuardianAccount]: ...


class LoadGuardianByIdRepository(Protocol):
    def load_by_id(self, guardian_id: int) -> Optional[GuardianAccount]: ...


class UpdateAccessTokenRepository(Protocol):
    def update_access_token(self, guardian_id: int, token: str) -> bool: ...


class UpdateGuardianPasswordRepository(Protocol):
    def update_password(self, guardian_id: int, password: str) -> bool: ...


class UpdateVerificationTokenRepository(Protocol):
    def update_verification_token(self, guardian_id: int, token: Optional[str]) -> bool: ...


class ResetGuardianPasswordRepository(Protocol):
    def reset_password(self, guardian_id: int, password: str, verification_token: str) -> bool: ...


class LogErrorRepository(Protocol):
    def log_error(self, stack: str) -> None: ...
