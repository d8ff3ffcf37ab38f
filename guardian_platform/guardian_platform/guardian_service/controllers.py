"""
Controllers: validate the request body, call a use case and map the result
to an HttpResponse.
"""
from typing import Iterable, Optional

from .errors import (
    AccessDeniedError,
    AlreadyRegisteredError,
    InvalidParamError,
    MissingParamError,
)
from .http import (
    HttpRequest,
    HttpResponse,
    bad_request,
    created,
    forbidden,
    ok,
    server_error,
    unauthorized,
)
from .protocols import (
    AddGuardian,
    Authentication,
    EmailValidator,
    ForgetPassword,
    LoadGuardianByIdRepository,
    LoadGuardianByToken,
    NameValidator,
    PasswordValidator,
    PhoneValidator,
    ResetPassword,
)
from .schemas import (
    AddGuardianParams,
    AuthenticationParams,
    GuardianProfile,
    MessageResponse,
    ResetPasswordParams,
)

FORGET_PASSWORD_MESSAGE = "If the account exists, a reset token has been sent."


def find_missing_param(body: dict, fields: Iterable[str]) -> Optional[str]:
    """Return the first required field that is absent, None or an empty string."""
    for field in fields:
        value = body.get(field)
        if value is None or value == "":
            return field
    return None


def find_non_string_param(body: dict, fields: Iterable[str]) -> Optional[str]:
    """Return the first field whose value is not a string."""
    for field in fields:
        if not isinstance(body.get(field), str):
            return field
    return None


class SignUpController:
    required_fields = (
        "firstName",
        "lastName",
        "email",
        "phone",
        "password",
        "passwordConfirmation",
        "isPrivacyPolicyAccepted",
    )
    string_fields = required_fields[:-1]

    def __init__(
        self,
        add_guardian: AddGuardian,
        email_validator: EmailValidator,
        name_validator: NameValidator,
        password_validator: PasswordValidator,
        phone_validator: PhoneValidator,
    ):
        self.add_guardian = add_guardian
        self.email_validator = email_validator
        self.name_validator = name_validator
        self.password_validator = password_validator
        self.phone_validator = phone_validator

    def handle(self, request: HttpRequest) -> HttpResponse:
        try:
            body = request.body
            missing = find_missing_param(body, self.required_fields)
            if missing:
                return bad_request(MissingParamError(missing))
            invalid = find_non_string_param(body, self.string_fields)
            if invalid:
                return bad_request(InvalidParamError(invalid))

            if body["passwordConfirmation"] != body["password"]:
                return bad_request(InvalidParamError("passwordConfirmation"))
            if not body["isPrivacyPolicyAccepted"]:
                return bad_request(InvalidParamError("isPrivacyPolicyAccepted"))

            if not self.name_validator.is_valid(body["firstName"], body["lastName"]):
                return bad_request(InvalidParamError("name"))
            if not self.email_validator.is_valid(body["email"]):
                return bad_request(InvalidParamError("email"))
            if not self.phone_validator.is_valid(body["phone"]):
                return bad_request(InvalidParamError("phone"))
            if not self.password_validator.is_valid(body["password"]):
                return bad_request(InvalidParamError("password"))

            guardian = self.add_guardian.add(AddGuardianParams(
                first_name=body["firstName"],
                last_name=body["lastName"],
                email=body["email"],
                phone=body["phone"],
                password=body["password"],
            ))
            if guardian is None:
                return forbidden(AlreadyRegisteredError())
            return created(guardian)
        except Exception as e:
            return server_error(e)


class LoginController:
    required_fields = ("email", "password")
    string_fields = required_fields

    def __init__(self, email_validator: EmailValidator, authentication: Authentication):
        self.email_validator = email_validator
        self.authentication = authentication

    def handle(self, request: HttpRequest) -> HttpResponse:
        try:
            body = request.body
            missing = find_missing_param(body, self.required_fields)
            if missing:
                return bad_request(MissingParamError(missing))
            invalid = find_non_string_param(body, self.string_fields)
            if invalid:
                return bad_request(InvalidParamError(invalid))
            if not self.email_validator.is_valid(body["email"]):
                return bad_request(InvalidParamError("email"))

            result = self.authentication.auth(AuthenticationParams(email=body["email"], password=body["password"]))
            if result is None:
                return unauthorized()
            return ok(result)
        except Exception as e:
            return server_error(e)


class ForgetPasswordController:
    def __init__(self, email_validator: EmailValidator, forget_password: ForgetPassword):
        self.email_validator = email_validator
        self.forget_password = forget_password

    def handle(self, request: HttpRequest) -> HttpResponse:
        try:
            email = request.body.get("email")
            if email is None or email == "":
                return bad_request(MissingParamError("email"))
            if not self.email_validator.is_valid(email):
                return bad_request(InvalidParamError("email"))

            # Same answer whether or not the email is registered
            self.forget_password.forget(email)
            return ok(MessageResponse(message=FORGET_PASSWORD_MESSAGE))
        except Exception as e:
            return server_error(e)


class ResetPasswordController:
    required_fields = ("email", "token", "password", "passwordConfirmation")
    string_fields = required_fields

    def __init__(
        self,
        email_validator: EmailValidator,
        password_validator: PasswordValidator,
        reset_password: ResetPassword,
    ):
        self.email_validator = email_validator
        self.password_validator = password_validator
        self.reset_password = reset_password

    def handle(self, request: HttpRequest) -> HttpResponse:
        try:
            body = request.body
            missing = find_missing_param(body, self.required_fields)
            if missing:
                return bad_request(MissingParamError(missing))
            invalid = find_non_string_param(body, self.string_fields)
            if invalid:
                return bad_request(InvalidParamError(invalid))
            if body["passwordConfirmation"] != body["password"]:
                return bad_request(InvalidParamError("passwordConfirmation"))
            if not self.email_validator.is_valid(body["email"]):
                return bad_request(InvalidParamError("email"))
            if not self.password_validator.is_valid(body["password"]):
                return bad_request(InvalidParamError("password"))

            success = self.reset_password.reset(ResetPasswordParams(
                email=body["email"],
                token=body["token"],
                password=body["password"],
            ))
            if not success:
                return bad_request(InvalidParamError("token"))
            return ok(MessageResponse(message="Password updated successfully"))
        except Exception as e:
            return server_error(e)


class AuthMiddleware:
    """Resolves the access token of a request to a guardian id."""

    def __init__(self, load_guardian_by_token: LoadGuardianByToken):
        self.load_guardian_by_token = load_guardian_by_token

    def handle(self, request: HttpRequest) -> HttpResponse:
        try:
            access_token = self._extract_token(request.headers)
            if not access_token:
                return forbidden(AccessDeniedError())

            guardian = self.load_guardian_by_token.load(access_token)
            if guardian is None:
                return forbidden(AccessDeniedError())
            return ok({"guardian_id": guardian.id})
        except Exception as e:
            return server_error(e)

    @staticmethod
    def _extract_token(headers: dict) -> Optional[str]:
        authorization = headers.get("authorization")
        if authorization and authorization.lower().startswith("bearer "):
            return authorization.split(" ", 1)[1].strip()
        return headers.get("x-access-token")


class GuardianProfileController:
    def __init__(self, load_guardian_by_id_repository: LoadGuardianByIdRepository):
        self.load_guardian_by_id_repository = load_guardian_by_id_repository

    def handle(self, request: HttpRequest) -> HttpResponse:
        try:
            guardian = self.load_guardian_by_id_repository.load_by_id(request.guardian_id)
            if guardian is None:
                return forbidden(AccessDeniedError())
            return ok(GuardianProfile.model_validate(guardian.model_dump()))
        except Exception as e:
            return server_error(e)
