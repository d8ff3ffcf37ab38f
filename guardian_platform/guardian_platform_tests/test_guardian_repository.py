"""Tests for the SQLAlchemy guardian and error log repositories."""
from unittest.mock import Mock
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from guardian_platform.guardian_platform.guardian_service.models import ErrorLog, Guardian
from guardian_platform.guardian_platform.guardian_service.repositories import (
    GuardianAccountRepository,
    LogErrorRepository,
)
from guardian_platform.guardian_platform.guardian_service.schemas import AddGuardianParams, GuardianResult


def make_params(**overrides):
    data = dict(
        first_name="valid_first_name",
        last_name="valid_last_name",
        email="valid_email@mail.com",
        phone="5511991234567",
        password="hashed_password",
    )
    data.update(overrides)
    return AddGuardianParams(**data)


def test_add_returns_created_projection(db_session):
    result = GuardianAccountRepository(db_session).add(make_params())

    assert isinstance(result, GuardianResult)
    assert result.id is not None
    assert result.first_name == "valid_first_name"
    assert result.email == "valid_email@mail.com"
    assert result.verification_token is None
    assert "password" not in result.model_dump()


def test_add_rejects_registered_email(db_session):
    repository = GuardianAccountRepository(db_session)
    repository.add(make_params())

    assert repository.add(make_params(phone="5511990000000")) is None
    assert db_session.query(Guardian).count() == 1


def test_add_rejects_registered_phone(db_session):
    repository = GuardianAccountRepository(db_session)
    repository.add(make_params())

    assert repository.add(make_params(email="other_email@mail.com")) is None
    assert db_session.query(Guardian).count() == 1


def test_add_reports_concurrent_duplicate_as_none():
    session = Mock()
    session.query.return_value.filter.return_value.first.return_value = None
    session.commit.side_effect = IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed"))

    assert GuardianAccountRepository(session).add(make_params()) is None
    session.rollback.assert_called_once()


def test_load_by_email_and_id(db_session):
    repository = GuardianAccountRepository(db_session)
    created = repository.add(make_params())

    by_email = repository.load_by_email("valid_email@mail.com")
    by_id = repository.load_by_id(created.id)

    assert by_email.id == created.id
    assert by_id.email == "valid_email@mail.com"
    assert by_id.password == "hashed_password"
    assert repository.load_by_email("unknown@mail.com") is None
    assert repository.load_by_id(999) is None


def test_update_access_token(db_session):
    repository = GuardianAccountRepository(db_session)
    created = repository.add(make_params())

    assert repository.update_access_token(created.id, "valid_token") is True
    assert repository.load_by_id(created.id).access_token == "valid_token"
    assert repository.update_access_token(999, "valid_token") is False


def test_update_password(db_session):
    repository = GuardianAccountRepository(db_session)
    created = repository.add(make_params())

    assert repository.update_password(created.id, "new_hashed_password") is True
    assert repository.load_by_id(created.id).password == "new_hashed_password"
    assert repository.update_password(999, "new_hashed_password") is False


def test_update_verification_token_stamps_and_clears(db_session):
    repository = GuardianAccountRepository(db_session)
    created = repository.add(make_params())

    assert repository.save_token(created.id, "hashed_token") is True
    guardian = repository.load_by_id(created.id)
    assert guardian.verification_token == "hashed_token"
    assert guardian.verification_token_created_at is not None

    assert repository.update_verification_token(created.id, None) is True
    guardian = repository.load_by_id(created.id)
    assert guardian.verification_token is None
    assert guardian.verification_token_created_at is None

    assert repository.update_verification_token(999, "hashed_token") is False


def test_tokens_are_independent(db_session):
    repository = GuardianAccountRepository(db_session)
    created = repository.add(make_params())

    repository.update_access_token(created.id, "valid_token")
    repository.update_verification_token(created.id, "hashed_token")

    guardian = repository.load_by_id(created.id)
    assert guardian.access_token == "valid_token"
    assert guardian.verification_token == "hashed_token"


def test_log_error_persists_stack(db_session):
    LogErrorRepository(db_session).log_error("Traceback: boom")

    entries = db_session.query(ErrorLog).all()
    assert len(entries) == 1
    assert entries[0].stack == "Traceback: boom"
    assert entries[0].created_at is not None


def test_log_error_handles_database_error():
    session = Mock()
    session.commit.side_effect = SQLAlchemyError("Database error")

    # Should not raise exception
    LogErrorRepository(session).log_error("Traceback: boom")

    session.rollback.assert_called_once()


def test_reset_password_consumes_pending_token(db_session):
    repository = GuardianAccountRepository(db_session)
    created = repository.add(make_params())
    repository.update_access_token(created.id, "valid_token")
    repository.update_verification_token(created.id, "hashed_token")

    assert repository.reset_password(created.id, "new_hashed_password", "hashed_token") is True

    guardian = repository.load_by_id(created.id)
    assert guardian.password == "new_hashed_password"
    assert guardian.access_token is None
    assert guardian.verification_token is None
    assert guardian.verification_token_created_at is None

    # Second use of the same token affects no row
    assert repository.reset_password(created.id, "other_hashed_password", "hashed_token") is False
    assert repository.load_by_id(created.id).password == "new_hashed_password"


def test_reset_password_rejects_other_token(db_session):
    repository = GuardianAccountRepository(db_session)
    created = repository.add(make_params())
    repository.update_verification_token(created.id, "hashed_token")

    assert repository.reset_password(created.id, "new_hashed_password", "other_token") is False
    assert repository.load_by_id(created.id).password == "hashed_password"
