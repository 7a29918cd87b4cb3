"""Server-side validation rules for the sign-up and login forms."""

import re

MAX_FIELD_LENGTH = 255

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s.]+(\.[^@\s.]+)+$")
# 11 digits: 07 mobile, 01/02 landline
UK_PHONE_PATTERN = re.compile(r"^(07|01|02)\d{9}$")

EMPLOYEE_COUNTS = ("1-10", "11-20", "21-50", "51-100", "101+")
HEAR_ABOUT_OPTIONS = ("Search Engine", "Social Media", "Recommendation", "Other")

PASSWORD_TOO_SHORT = "Your password should be at least 8 characters"
PASSWORD_TOO_WEAK = (
    "Your password should include 1 uppercase letter, 1 lowercase letter, and 1 number"
)


def is_valid_email(value: str) -> bool:
    return bool(EMAIL_PATTERN.match(value or ""))


def password_error(password: str) -> str | None:
    """Return the message for an unacceptable password, else None."""
    if not password:
        return "Please enter a valid password"
    if len(password) < 8:
        return PASSWORD_TOO_SHORT
    if (
        password != password.strip()
        or not re.search(r"[A-Z]", password)
        or not re.search(r"[a-z]", password)
        or not re.search(r"[0-9]", password)
    ):
        return PASSWORD_TOO_WEAK
    return None


def _name_error(value: str, label: str, empty_message: str) -> str | None:
    if not value.strip():
        return empty_message
    if len(value) > MAX_FIELD_LENGTH:
        return f"{label} must not exceed {MAX_FIELD_LENGTH} characters"
    return None


def validate_signup(form: dict) -> dict[str, str]:
    """Validate a sign-up submission. Returns field name -> message."""
    errors: dict[str, str] = {}
    checks = {
        "first_name": _name_error(form.get("first_name", ""), "First name",
                                  "Please enter your first name"),
        "last_name": _name_error(form.get("last_name", ""), "Last name",
                                 "Please enter your last name"),
        "company_name": _name_error(form.get("company_name", ""), "Company name",
                                    "Please enter the name of your company"),
        "password": password_error(form.get("password", "")),
    }
    errors.update({field: message for field, message in checks.items() if message})

    if not is_valid_email(form.get("email", "")):
        errors["email"] = "Please enter a valid email address"
    if not UK_PHONE_PATTERN.match(form.get("phone", "")):
        errors["phone"] = "Please enter a valid phone number"
    if form.get("employee_count") not in EMPLOYEE_COUNTS:
        errors["employee_count"] = "Please select the number of employees"
    if not form.get("terms"):
        errors["terms"] = "Please accept the terms and conditions"
    return errors


def validate_login(form: dict) -> dict[str, str]:
    """Validate a login submission before checking credentials."""
    errors: dict[str, str] = {}
    if not is_valid_email(form.get("email", "")):
        errors["email"] = "Please enter a valid email address"
    if not form.get("password"):
        errors["password"] = "Please enter your password"
    return errors
