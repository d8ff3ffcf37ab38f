"""
SQLAlchemy repositories for guardian accounts and server error logs.
"""
from datetime import datetime
from typing import Optional
import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from .models import ErrorLog, Guardian
from .schemas import AddGuardianParams, GuardianAccount, GuardianResult

logger = logging.getLogger(__name__)


class GuardianAccountRepository:
    def __init__(self, db: Session):
        self.db = db

    def add(self, params: AddGuardianParams) -> Optional[GuardianResult]:
        """
        Insert a guardian unless its email or phone is already registered.

        Returns:
            The created guardian projection, or None when the email or phone
            belongs to another guardian
        """
        if self.db.query(Guardian).filter(Guardian.email == params.email).first():
            return None
        if self.db.query(Guardian).filter(Guardian.phone == params.phone).first():
            return None

        guardian = Guardian(**params.model_dump())
        self.db.add(guardian)
        try:
            self.db.commit()
        except IntegrityError:
            # Registered by a concurrent request between the lookups and the insert
            self.db.rollback()
            return None
        self.db.refresh(guardian)
        return GuardianResult.model_validate(guardian)

    def load_by_email(self, email: str) -> Optional[GuardianAccount]:
        guardian = self.db.query(Guardian).filter(Guardian.email == email).first()
        if guardian:
            return GuardianAccount.model_validate(guardian)
        return None

    def load_by_id(self, guardian_id: int) -> Optional[GuardianAccount]:
        guardian = self.db.query(Guardian).filter(Guardian.id == guardian_id).first()
        if guardian:
            return GuardianAccount.model_validate(guardian)
        return None

    def update_access_token(self, guardian_id: int, token: str) -> bool:
        return self._update(guardian_id, access_token=token)

    def update_password(self, guardian_id: int, password: str) -> bool:
        return self._update(guardian_id, password=password)

    def update_verification_token(self, guardian_id: int, token: Optional[str]) -> bool:
        created_at = datetime.utcnow() if token is not None else None
        return self._update(
            guardian_id,
            verification_token=token,
            verification_token_created_at=created_at,
        )

    save_token = update_verification_token

    def reset_password(self, guardian_id: int, password: str, verification_token: str) -> bool:
        """
        Store a new password if ``verification_token`` is still the pending one.

        The verification token and the access token are cleared in the same
        UPDATE, so a token is consumed by exactly one reset.
        """
        return self._update(
            guardian_id,
            Guardian.verification_token == verification_token,
            password=password,
            access_token=None,
            verification_token=None,
            verification_token_created_at=None,
        )

    def _update(self, guardian_id: int, *criteria, **values) -> bool:
        # Single conditional UPDATE, the row count tells whether the guardian exists
        affected = (
            self.db.query(Guardian)
            .filter(Guardian.id == guardian_id, *criteria)
            .update(values, synchronize_session=False)
        )
        self.db.commit()
        return affected > 0


class LogErrorRepository:
    def __init__(self, db: Session):
        self.db = db

    def log_error(self, stack: str) -> None:
        try:
            self.db.add(ErrorLog(stack=stack, created_at=datetime.utcnow()))
            self.db.commit()
        except SQLAlchemyError as e:
            # Log error but don't raise - logging failure should not break the response
            logger.warning("Failed to persist error log: %s", e)
            self.db.rollback()
