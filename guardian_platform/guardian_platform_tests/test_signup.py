"""
Unit tests for SignUpController.
"""
import pytest
from unittest.mock import Mock

from guardian_platform.guardian_platform.guardian_service.controllers import SignUpController
from guardian_platform.guardian_platform.guardian_service.errors import (
    AlreadyRegisteredError,
    InvalidParamError,
    MissingParamError,
    ServerError,
)
from guardian_platform.guardian_platform.guardian_service.http import HttpRequest
from guardian_platform.guardian_platform.guardian_service.schemas import AddGuardianParams, GuardianResult


def make_validator():
    validator = Mock()
    validator.is_valid.return_value = True
    return validator


def make_fake_body(**overrides):
    body = {
        "firstName": "any_first_name",
        "lastName": "any_last_name",
        "email": "any_email@mail.com",
        "phone": "any_phone",
        "password": "any_password",
        "passwordConfirmation": "any_password",
        "isPrivacyPolicyAccepted": True,
    }
    body.update(overrides)
    return body


@pytest.fixture
def add_guardian():
    stub = Mock()
    stub.add.return_value = GuardianResult(
        id=1,
        first_name="any_first_name",
        last_name="any_last_name",
        email="any_email@mail.com",
        phone="any_phone",
    )
    return stub


@pytest.fixture
def email_validator():
    return make_validator()


@pytest.fixture
def name_validator():
    return make_validator()


@pytest.fixture
def password_validator():
    return make_validator()


@pytest.fixture
def phone_validator():
    return make_validator()


@pytest.fixture
def sut(add_guardian, email_validator, name_validator, password_validator, phone_validator):
    return SignUpController(add_guardian, email_validator, name_validator, password_validator, phone_validator)


@pytest.mark.parametrize("field", SignUpController.required_fields)
def test_returns_400_if_a_required_field_is_missing(sut, field):
    body = make_fake_body()
    del body[field]

    response = sut.handle(HttpRequest(body=body))

    assert response.status_code == 400
    assert isinstance(response.body, MissingParamError)
    assert response.body.param_name == field


def test_empty_string_counts_as_missing(sut):
    response = sut.handle(HttpRequest(body=make_fake_body(email="")))

    assert response.status_code == 400
    assert isinstance(response.body, MissingParamError)
    assert response.body.param_name == "email"


def test_first_missing_field_wins(sut):
    body = make_fake_body()
    del body["lastName"]
    del body["password"]

    response = sut.handle(HttpRequest(body=body))

    assert response.body.param_name == "lastName"


def test_returns_400_if_password_confirmation_fails(sut):
    response = sut.handle(HttpRequest(body=make_fake_body(passwordConfirmation="invalid_password")))

    assert response.status_code == 400
    assert isinstance(response.body, InvalidParamError)
    assert response.body.param_name == "passwordConfirmation"


def test_returns_400_if_privacy_policy_is_not_accepted(sut):
    response = sut.handle(HttpRequest(body=make_fake_body(isPrivacyPolicyAccepted=False)))

    assert response.status_code == 400
    assert isinstance(response.body, InvalidParamError)
    assert response.body.param_name == "isPrivacyPolicyAccepted"


@pytest.mark.parametrize("validator_name, param_name", [
    ("name_validator", "name"),
    ("email_validator", "email"),
    ("phone_validator", "phone"),
    ("password_validator", "password"),
])
def test_returns_400_if_a_validator_rejects_its_field(request, sut, validator_name, param_name):
    request.getfixturevalue(validator_name).is_valid.return_value = False

    response = sut.handle(HttpRequest(body=make_fake_body()))

    assert response.status_code == 400
    assert isinstance(response.body, InvalidParamError)
    assert response.body.param_name == param_name


def test_name_is_checked_before_email(sut, name_validator, email_validator):
    name_validator.is_valid.return_value = False
    email_validator.is_valid.return_value = False

    response = sut.handle(HttpRequest(body=make_fake_body()))

    assert response.body.param_name == "name"
    email_validator.is_valid.assert_not_called()


def test_calls_validators_with_correct_values(sut, name_validator, email_validator, phone_validator, password_validator):
    sut.handle(HttpRequest(body=make_fake_body()))

    name_validator.is_valid.assert_called_once_with("any_first_name", "any_last_name")
    email_validator.is_valid.assert_called_once_with("any_email@mail.com")
    phone_validator.is_valid.assert_called_once_with("any_phone")
    password_validator.is_valid.assert_called_once_with("any_password")


@pytest.mark.parametrize("validator_name", [
    "name_validator",
    "email_validator",
    "phone_validator",
    "password_validator",
])
def test_returns_500_if_a_validator_raises(request, sut, validator_name):
    request.getfixturevalue(validator_name).is_valid.side_effect = Exception("boom")

    response = sut.handle(HttpRequest(body=make_fake_body()))

    assert response.status_code == 500
    assert isinstance(response.body, ServerError)
    assert "boom" in response.body.stack


def test_returns_500_if_add_guardian_raises(sut, add_guardian):
    add_guardian.add.side_effect = Exception()

    response = sut.handle(HttpRequest(body=make_fake_body()))

    assert response.status_code == 500
    assert isinstance(response.body, ServerError)


def test_calls_add_guardian_with_correct_values(sut, add_guardian):
    sut.handle(HttpRequest(body=make_fake_body()))

    add_guardian.add.assert_called_once_with(AddGuardianParams(
        first_name="any_first_name",
        last_name="any_last_name",
        email="any_email@mail.com",
        phone="any_phone",
        password="any_password",
    ))


def test_returns_403_if_guardian_is_already_registered(sut, add_guardian):
    add_guardian.add.return_value = None

    response = sut.handle(HttpRequest(body=make_fake_body()))

    assert response.status_code == 403
    assert isinstance(response.body, AlreadyRegisteredError)


def test_returns_201_if_valid_data_is_provided(sut, add_guardian):
    response = sut.handle(HttpRequest(body=make_fake_body(
        firstName="valid_first_name",
        lastName="valid_last_name",
        email="valid_email@mail.com",
        phone="valid_phone",
        password="valid_password",
        passwordConfirmation="valid_password",
    )))

    assert response.status_code == 201
    assert response.body == add_guardian.add.return_value


def test_returns_400_for_non_string_field(sut, add_guardian):
    response = sut.handle(HttpRequest(body=make_fake_body(phone=5511991234567)))

    assert response.status_code == 400
    assert isinstance(response.body, InvalidParamError)
    assert response.body.param_name == "phone"
    add_guardian.add.assert_not_called()
