"""
Input validation and sanitization utilities
"""
import re
import html
from typing import Optional
from app.core.exceptions import ValidationError

EMAIL_PATTERN = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')
PHONE_PATTERN = re.compile(r'^\+?\d{10,15}$')


class InputValidator:
    """Centralized input validation and sanitization"""

    @staticmethod
    def sanitize_string(text: Optional[str], max_length: Optional[int] = None) -> str:
        """Sanitize string input to prevent XSS and injection attacks"""
        if not text:
            return ""

        sanitized = html.escape(text.strip(), quote=False)
        sanitized = re.sub(r'[<>]', '', sanitized)

        if max_length and len(sanitized) > max_length:
            sanitized = sanitized[:max_length]

        return sanitized

    @staticmethod
    def is_valid_email(email: Optional[str]) -> bool:
        return bool(email) and bool(EMAIL_PATTERN.match(email.strip()))

    @staticmethod
    def validate_email(email: Optional[str], field: str = "email") -> str:
        """Validate and normalize an email address"""
        if not email or not email.strip():
            raise ValidationError("Email is required", fields=[field])
        email = email.strip()
        if not EMAIL_PATTERN.match(email):
            raise ValidationError("Invalid email format", fields=[field])
        return email.lower()

    @staticmethod
    def validate_phone(phone: Optional[str]) -> str:
        if not phone or not PHONE_PATTERN.match(phone.strip()):
            raise ValidationError(
                "Invalid phone number format (10-15 digits, optional +)", fields=["phone"])
        return phone.strip()

    @staticmethod
    def validate_name(name: Optional[str], field: str = "name") -> str:
        name = InputValidator.sanitize_string(name, max_length=100)
        if len(name) < 2:
            raise ValidationError(
                f"{field.capitalize()} must be at least 2 characters long", fields=[field])
        return name

    @staticmethod
    def validate_password(password: Optional[str], field: str = "password") -> str:
        if not password or len(password.strip()) < 8:
            raise ValidationError("Password must be at least 8 characters long", fields=[field])
        if len(password) > 255:
            raise ValidationError("Password too long", fields=[field])
        return password

    @staticmethod
    def missing_fields(data, names) -> list:
        """Names of attributes on ``data`` that are None or blank strings."""
        missing = []
        for name in names:
            value = getattr(data, name, None)
            if value is None or (isinstance(value, str) and not value.strip()):
                missing.append(name)
        return missing
