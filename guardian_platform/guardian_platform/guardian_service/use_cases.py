"""
Use cases orchestrating repositories, hashing, tokens and mail delivery.
"""
from datetime import datetime, timedelta
from typing import Optional
import logging
import secrets

from .protocols import (
    AddGuardianRepository,
    Decrypter,
    EmailService,
    Encrypter,
    Hasher,
    LoadGuardianByEmailRepository,
    LoadGuardianByIdRepository,
    ResetGuardianPasswordRepository,
    TokenGenerator,
    UpdateAccessTokenRepository,
    UpdateVerificationTokenRepository,
)
from .schemas import (
    AddGuardianParams,
    AuthenticationParams,
    AuthenticationResult,
    GuardianAccount,
    GuardianResult,
    ResetPasswordParams,
)

logger = logging.getLogger(__name__)


class DbAddGuardian:
    def __init__(self, hasher: Hasher, add_guardian_repository: AddGuardianRepository):
        self.hasher = hasher
        self.add_guardian_repository = add_guardian_repository

    def add(self, params: AddGuardianParams) -> Optional[GuardianResult]:
        hashed = self.hasher.hash(params.password)
        guardian = self.add_guardian_repository.add(params.model_copy(update={"password": hashed}))
        if guardian is None:
            logger.info("Signup rejected, email or phone already registered: email=%s", params.email)
        return guardian


class DbAuthentication:
    def __init__(
        self,
        load_guardian_by_email_repository: LoadGuardianByEmailRepository,
        hasher: Hasher,
        encrypter: Encrypter,
        update_access_token_repository: UpdateAccessTokenRepository,
    ):
        self.load_guardian_by_email_repository = load_guardian_by_email_repository
        self.hasher = hasher
        self.encrypter = encrypter
        self.update_access_token_repository = update_access_token_repository

    def auth(self, params: AuthenticationParams) -> Optional[AuthenticationResult]:
        guardian = self.load_guardian_by_email_repository.load_by_email(params.email)
        if not guardian or not self.hasher.compare(params.password, guardian.password):
            return None

        access_token = self.encrypter.encrypt(str(guardian.id))
        self.update_access_token_repository.update_access_token(guardian.id, access_token)
        logger.info("Access token issued: guardian_id=%s", guardian.id)
        return AuthenticationResult(access_token=access_token, name=guardian.first_name)


class ForgetPasswordTokenGenerator:
    """Creates a random token and stores its hash on the guardian."""

    def __init__(self, hasher: Hasher, save_token_repository: UpdateVerificationTokenRepository):
        self.hasher = hasher
        self.save_token_repository = save_token_repository

    def generate(self, guardian_id: int) -> Optional[str]:
        token = secrets.token_urlsafe(32)
        saved = self.save_token_repository.update_verification_token(guardian_id, self.hasher.hash(token))
        return token if saved else None


class DbForgetPassword:
    def __init__(
        self,
        load_guardian_by_email_repository: LoadGuardianByEmailRepository,
        token_generator: TokenGenerator,
        email_service: EmailService,
        app_url: str = "",
    ):
        self.load_guardian_by_email_repository = load_guardian_by_email_repository
        self.token_generator = token_generator
        self.email_service = email_service
        self.app_url = app_url

    def forget(self, email: str) -> bool:
        guardian = self.load_guardian_by_email_repository.load_by_email(email)
        if not guardian:
            return False

        token = self.token_generator.generate(guardian.id)
        if not token:
            return False

        link = f"{self.app_url}/reset-password?email={guardian.email}&token={token}"
        self.email_service.send(
            to=guardian.email,
            subject="Password reset",
            text=(
                f"Hello {guardian.first_name},\n\n"
                f"Use the following token to reset your password: {token}\n"
                f"or open {link}\n\n"
                "If you did not request a password reset, ignore this email."
            ),
            html=(
                f"<p>Hello {guardian.first_name},</p>"
                f"<p>Use the following token to reset your password: <b>{token}</b></p>"
                f"<p><a href=\"{link}\">Reset password</a></p>"
            ),
        )
        return True


class DbResetPassword:
    def __init__(
        self,
        load_guardian_by_email_repository: LoadGuardianByEmailRepository,
        hasher: Hasher,
        reset_password_repository: ResetGuardianPasswordRepository,
        token_expire_minutes: int = 15,
    ):
        self.load_guardian_by_email_repository = load_guardian_by_email_repository
        self.hasher = hasher
        self.reset_password_repository = reset_password_repository
        self.token_expire_minutes = token_expire_minutes

    def reset(self, params: ResetPasswordParams) -> bool:
        guardian = self.load_guardian_by_email_repository.load_by_email(params.email)
        if not guardian or not guardian.verification_token:
            return False

        created_at = guardian.verification_token_created_at
        if created_at is None or created_at + timedelta(minutes=self.token_expire_minutes) < datetime.utcnow():
            return False

        if not self.hasher.compare(params.token, guardian.verification_token):
            return False

        # Fails when a concurrent reset already consumed the token
        if not self.reset_password_repository.reset_password(
            guardian.id, self.hasher.hash(params.password), guardian.verification_token
        ):
            return False
        logger.info("Password reset: guardian_id=%s", guardian.id)
        return True


class DbLoadGuardianByToken:
    def __init__(self, decrypter: Decrypter, load_guardian_by_id_repository: LoadGuardianByIdRepository):
        self.decrypter = decrypter
        self.load_guardian_by_id_repository = load_guardian_by_id_repository

    def load(self, access_token: str) -> Optional[GuardianAccount]:
        subject = self.decrypter.decrypt(access_token)
        if not subject or not subject.isdigit():
            return None

        guardian = self.load_guardian_by_id_repository.load_by_id(int(subject))
        # Only the most recently issued token is accepted
        if not guardian or guardian.access_token != access_token:
            return None
        return guardian
