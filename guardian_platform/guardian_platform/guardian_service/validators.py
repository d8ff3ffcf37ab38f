"""
Field validators used by the controllers.
"""
import re

from email_validator import validate_email, EmailNotValidError

NAME_PATTERN = re.compile(r"^[^\W\d_]+(?:[ '\-][^\W\d_]+)*$")
PHONE_SEPARATORS = re.compile(r"[\s().\-]")
PHONE_PATTERN = re.compile(r"^\+?\d{10,15}$")
PASSWORD_MIN_LENGTH = 8


class EmailValidatorAdapter:
    def is_valid(self, email: str) -> bool:
        if not isinstance(email, str):
            return False
        try:
            validate_email(email, check_deliverability=False)
        except EmailNotValidError:
            return False
        return True


class NameValidatorAdapter:
    """Accepts letters (accents included), single spaces, apostrophes and hyphens."""

    def is_valid(self, first_name: str, last_name: str) -> bool:
        return all(
            isinstance(name, str) and NAME_PATTERN.match(name.strip()) is not None
            for name in (first_name, last_name)
        )


class PhoneValidatorAdapter:
    def is_valid(self, phone: str) -> bool:
        if not isinstance(phone, str):
            return False
        return PHONE_PATTERN.match(PHONE_SEPARATORS.sub("", phone)) is not None


class PasswordValidatorAdapter:
    """Strong password: 8+ chars with lower, upper, digit and symbol."""

    def is_valid(self, password: str) -> bool:
        if not isinstance(password, str) or len(password) < PASSWORD_MIN_LENGTH:
            return False
        return (
            any(c.islower() for c in password)
            and any(c.isupper() for c in password)
            and any(c.isdigit() for c in password)
            and any(not c.isalnum() for c in password)
        )
