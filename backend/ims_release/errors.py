"""
Error Types
Typed failures raised by the services and the persistence/blob layers.
The HTTP layer turns each one into a JSON response using its status code
and message.
"""


class ImsReleaseError(Exception):
    """Base class for every error the API reports to clients"""

    status_code = 500
    message = "Unexpected error."

    def __init__(self, message: str = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


# ============================================================================
# VALIDATION (400, image rejections 417)
# ============================================================================

class ValidationError(ImsReleaseError):
    status_code = 400
    message = "Bad request."


class InvalidStatusError(ValidationError):
    message = "Invalid status."


class FieldTooLongError(ValidationError):
    message = "A field exceeds its maximum length."


class IdentifierTooLongError(FieldTooLongError):
    message = "Release identifier must be at most 10 characters long."


class ShorthandTooLongError(FieldTooLongError):
    message = "Project shorthand must be at most 30 characters long."


class PageNameEmptyError(ValidationError):
    message = "Page name is empty."


class PageNameTooLongError(FieldTooLongError):
    message = "Page name must be at most 255 characters long."


class PageNameInvalidError(ValidationError):
    message = "Page name must not contain path separators."


class UnsupportedMimeTypeError(ValidationError):
    status_code = 417
    message = "Page name must end in .png or .jpg."


class BadImageDataError(ValidationError):
    status_code = 417
    message = "The supplied image data is not base64 encoded."


class WrongImageTypeError(ValidationError):
    status_code = 417
    message = "The uploaded image is neither a valid JPG/JPEG or PNG image."


# ============================================================================
# LOOKUPS (404)
# ============================================================================

class NotFoundError(ImsReleaseError):
    status_code = 404
    message = "Not found."


# ============================================================================
# CONFLICTS (409, release edit guard 417)
# ============================================================================

class ConflictError(ImsReleaseError):
    status_code = 409
    message = "Conflict."


class BlobKeyExistsError(ConflictError):
    message = "A file with that name already exists for this release."


class DownversioningNotAllowedError(ConflictError):
    status_code = 417
    message = "The version of a release cannot be decreased."


class MustUpversionError(ConflictError):
    status_code = 417
    message = "Editing a released release requires a higher version."


# ============================================================================
# PRECONDITIONS (417)
# ============================================================================

class PreconditionError(ImsReleaseError):
    status_code = 417
    message = "Precondition failed."


class PagesNotEmptyError(PreconditionError):
    message = "The release still has pages. Delete them first."


class ReleasesNotEmptyError(PreconditionError):
    message = "The project still has releases. Delete them first."


# ============================================================================
# STORAGE (500) AND AUTH (401)
# ============================================================================

class StorageError(ImsReleaseError):
    status_code = 500
    message = "Storage failure. Please try again later."


class UnauthorizedError(ImsReleaseError):
    status_code = 401
    message = "Authorization required."
