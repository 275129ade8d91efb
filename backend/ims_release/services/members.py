"""
Member Rules
"""

from ims_release.errors import FieldTooLongError, ValidationError

TEXT_MAX_LENGTH = 65535


def validate_member_fields(name: str, biography: str) -> None:
    if not name:
        raise ValidationError("Member name must not be empty.")
    if len(name) > TEXT_MAX_LENGTH:
        raise FieldTooLongError(f"Member name must be at most {TEXT_MAX_LENGTH} characters long.")
    if len(biography) > TEXT_MAX_LENGTH:
        raise FieldTooLongError(f"Member biography must be at most {TEXT_MAX_LENGTH} characters long.")
