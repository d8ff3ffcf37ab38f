"""
Composition root: builds each controller with its concrete collaborators
for one request's database session.
"""
from sqlalchemy.orm import Session

from .auth import JwtAdapter, PasslibAdapter
from .config import settings
from .controllers import (
    AuthMiddleware,
    ForgetPasswordController,
    GuardianProfileController,
    LoginController,
    ResetPasswordController,
    SignUpController,
)
from .protocols import Controller, EmailService
from .repositories import GuardianAccountRepository, LogErrorRepository
from .use_cases import (
    DbAddGuardian,
    DbAuthentication,
    DbForgetPassword,
    DbLoadGuardianByToken,
    DbResetPassword,
    ForgetPasswordTokenGenerator,
)
from .utils.email_service import LogEmailService, SmtpEmailService
from .utils.error_logger import LoggerControllerDecorator
from .validators import (
    EmailValidatorAdapter,
    NameValidatorAdapter,
    PasswordValidatorAdapter,
    PhoneValidatorAdapter,
)


def make_hasher() -> PasslibAdapter:
    return PasslibAdapter(settings.HASH_ROUNDS)


def make_jwt_adapter() -> JwtAdapter:
    return JwtAdapter(settings.SECRET_KEY, settings.ALGORITHM, settings.ACCESS_TOKEN_EXPIRE_MINUTES)


def make_email_service() -> EmailService:
    if not settings.MAIL_USER:
        return LogEmailService()
    return SmtpEmailService(
        server=settings.MAIL_SERVER,
        port=settings.MAIL_PORT,
        username=settings.MAIL_USER,
        password=settings.MAIL_PASS,
        from_email=settings.MAIL_FROM or None,
    )


def decorate(controller: Controller, db: Session) -> Controller:
    return LoggerControllerDecorator(controller, LogErrorRepository(db))


def make_signup_controller(db: Session) -> Controller:
    repository = GuardianAccountRepository(db)
    add_guardian = DbAddGuardian(make_hasher(), repository)
    controller = SignUpController(
        add_guardian=add_guardian,
        email_validator=EmailValidatorAdapter(),
        name_validator=NameValidatorAdapter(),
        password_validator=PasswordValidatorAdapter(),
        phone_validator=PhoneValidatorAdapter(),
    )
    return decorate(controller, db)


def make_login_controller(db: Session) -> Controller:
    repository = GuardianAccountRepository(db)
    authentication = DbAuthentication(
        load_guardian_by_email_repository=repository,
        hasher=make_hasher(),
        encrypter=make_jwt_adapter(),
        update_access_token_repository=repository,
    )
    return decorate(LoginController(EmailValidatorAdapter(), authentication), db)


def make_forget_password_controller(db: Session, email_service: EmailService) -> Controller:
    repository = GuardianAccountRepository(db)
    token_generator = ForgetPasswordTokenGenerator(make_hasher(), repository)
    forget_password = DbForgetPassword(
        load_guardian_by_email_repository=repository,
        token_generator=token_generator,
        email_service=email_service,
        app_url=settings.APP_URL,
    )
    return decorate(ForgetPasswordController(EmailValidatorAdapter(), forget_password), db)


def make_reset_password_controller(db: Session) -> Controller:
    repository = GuardianAccountRepository(db)
    reset_password = DbResetPassword(
        load_guardian_by_email_repository=repository,
        hasher=make_hasher(),
        reset_password_repository=repository,
        token_expire_minutes=settings.VERIFICATION_TOKEN_EXPIRE_MINUTES,
    )
    controller = ResetPasswordController(EmailValidatorAdapter(), PasswordValidatorAdapter(), reset_password)
    return decorate(controller, db)


def make_auth_middleware(db: Session) -> AuthMiddleware:
    load_guardian_by_token = DbLoadGuardianByToken(make_jwt_adapter(), GuardianAccountRepository(db))
    return AuthMiddleware(load_guardian_by_token)


def make_guardian_profile_controller(db: Session) -> Controller:
    return decorate(GuardianProfileController(GuardianAccountRepository(db)), db)
