"""Tests for the exception hierarchy."""

import pytest

from exceptions import (
    AlreadySubscribedError,
    ConfigurationError,
    ConflictError,
    ImageTooLargeError,
    ImageUploadError,
    NotFoundError,
    RealEstateError,
    UnsupportedImageError,
)


@pytest.mark.parametrize("error_class", [
    NotFoundError,
    ConflictError,
    ImageUploadError,
    ConfigurationError,
])
def test_all_errors_share_base(error_class):
    assert issubclass(error_class, RealEstateError)


def test_upload_errors():
    assert issubclass(UnsupportedImageError, ImageUploadError)
    assert issubclass(ImageTooLargeError, ImageUploadError)


def test_already_subscribed():
    error = AlreadySubscribedError("a@b.com")

    assert isinstance(error, ConflictError)
    assert error.email == "a@b.com"
    assert str(error) == "This email is already subscribed to our newsletter"
