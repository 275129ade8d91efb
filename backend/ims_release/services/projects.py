"""
Project Rules
Field validation for project create/update
"""

from ims_release.errors import InvalidStatusError, ShorthandTooLongError, ValidationError
from ims_release.models.project import SHORTHAND_MAX_LENGTH, ProjectStatus


def parse_project_status(value) -> ProjectStatus:
    try:
        return ProjectStatus(value)
    except ValueError:
        raise InvalidStatusError(f"Invalid project status: {value!r}.")


def validate_project_fields(name: str, shorthand: str, status) -> ProjectStatus:
    """Validate the writable fields and return the parsed status"""
    if not shorthand:
        raise ValidationError("Project shorthand must not be empty.")
    if len(shorthand) > SHORTHAND_MAX_LENGTH:
        raise ShorthandTooLongError()
    if not name:
        raise ValidationError("Project name must not be empty.")
    return parse_project_status(status)
