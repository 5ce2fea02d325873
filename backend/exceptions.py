"""Exception hierarchy for the real-estate API."""


class RealEstateError(Exception):
    """Base exception for all application errors."""


class NotFoundError(RealEstateError):
    """Raised when a referenced row does not exist."""


class ConflictError(RealEstateError):
    """Raised when a write would violate a uniqueness rule."""


class AlreadySubscribedError(ConflictError):
    """Raised when an email is already on the newsletter list."""

    def __init__(self, email: str):
        super().__init__("This email is already subscribed to our newsletter")
        self.email = email


class ImageUploadError(RealEstateError):
    """Base class for rejected uploads."""


class UnsupportedImageError(ImageUploadError):
    """Raised when an upload is not an image."""


class ImageTooLargeError(ImageUploadError):
    """Raised when an upload exceeds the size ceiling."""


class ConfigurationError(RealEstateError):
    """Raised when configuration is invalid or missing."""
