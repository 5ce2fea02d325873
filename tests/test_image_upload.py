"""Tests for the image upload pipeline and its endpoints."""

from PIL import Image
import pytest

from conftest import make_image_bytes
from exceptions import ImageTooLargeError, ImageUploadError, UnsupportedImageError
from services.image_upload import (
    MAX_BATCH_FILES,
    IncomingImage,
    slugify_stem,
    validate_image,
)


def png(name="plot.png", **kwargs) -> IncomingImage:
    return IncomingImage(filename=name, content_type="image/png", data=make_image_bytes(**kwargs))


class TestSlugify:

    def test_keeps_words(self):
        assert slugify_stem("My Plot (1).JPG") == "My-Plot-1"

    def test_keeps_arabic(self):
        assert slugify_stem("أرض عبدون.png") == "أرض-عبدون"

    def test_fallback(self):
        assert slugify_stem("...") == "image"
        assert slugify_stem("") == "image"


class TestValidation:

    def test_rejects_non_image_content_type(self):
        with pytest.raises(UnsupportedImageError):
            validate_image(IncomingImage("notes.txt", "text/plain", b"hello"))

    def test_rejects_undecodable_bytes(self):
        with pytest.raises(UnsupportedImageError):
            validate_image(IncomingImage("fake.png", "image/png", b"not really a png"))

    def test_rejects_oversized(self):
        with pytest.raises(ImageTooLargeError):
            validate_image(png(), max_bytes=10)

    def test_rejects_decompression_bomb(self, monkeypatch):
        monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 1000)

        with pytest.raises(UnsupportedImageError, match="too large"):
            validate_image(png(size=(100, 100)))

    def test_accepts_image(self):
        validate_image(png())


class TestImageUploader:

    def test_writes_three_variants(self, uploader):
        result = uploader.process_image(png())

        files = sorted(p.name for p in uploader.upload_dir.glob("*.webp"))
        assert len(files) == 3
        assert result["image_url"].startswith("/uploads/plot-")
        assert result["thumbnail_url"].endswith("-thumb.webp")
        assert result["small_thumbnail_url"].endswith("-small.webp")
        assert result["original_name"] == "plot.png"
        assert result["size"] > 0

    def test_variant_dimensions(self, uploader):
        result = uploader.process_image(png(size=(3000, 1000)))
        base = result["image_url"].rsplit("/", 1)[1][:-len(".webp")]

        expected = {"": (1200, 800), "-thumb": (400, 300), "-small": (200, 150)}
        for suffix, size in expected.items():
            with Image.open(uploader.upload_dir / f"{base}{suffix}.webp") as img:
                assert img.size == size
                assert img.format == "WEBP"

    def test_same_name_does_not_collide(self, uploader):
        first = uploader.process_image(png())
        second = uploader.process_image(png())
        assert first["image_url"] != second["image_url"]

    def test_batch_validates_before_writing(self, uploader):
        batch = [png(), IncomingImage("bad.png", "image/png", b"garbage")]

        with pytest.raises(UnsupportedImageError):
            uploader.process_images(batch)

        assert list(uploader.upload_dir.glob("*.webp")) == []

    def test_batch_limit(self, uploader):
        with pytest.raises(ImageUploadError):
            uploader.process_images([png() for _ in range(MAX_BATCH_FILES + 1)])

    def test_cleanup(self, uploader):
        result = uploader.process_image(png())

        assert uploader.cleanup_image(result["image_url"]) is True
        assert list(uploader.upload_dir.glob("*.webp")) == []

    def test_cleanup_ignores_foreign_urls(self, uploader):
        assert uploader.cleanup_image("https://images.pexels.com/photo.jpeg") is False
        assert uploader.cleanup_image("/uploads/land-property-1.svg") is False
        assert uploader.cleanup_image(None) is False


class TestUploadEndpoints:

    def test_single_upload(self, admin_client, settings):
        response = admin_client.post(
            "/api/admin/upload",
            files={"image": ("plot.png", make_image_bytes(), "image/png")},
        )

        assert response.status_code == 200
        assert len(list(settings.upload_dir.glob("*.webp"))) == 3

        served = admin_client.get(response.json()["thumbnail_url"])
        assert served.status_code == 200

    def test_non_image_rejected(self, admin_client, settings):
        response = admin_client.post(
            "/api/admin/upload",
            files={"image": ("notes.txt", b"hello", "text/plain")},
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Only image files are allowed!"
        assert list(settings.upload_dir.glob("*")) == []

    def test_oversized_rejected(self, admin_client, settings):
        oversized = b"\x89PNG" + b"0" * (10 * 1024 * 1024)

        response = admin_client.post(
            "/api/admin/upload",
            files={"image": ("big.png", oversized, "image/png")},
        )

        assert response.status_code == 413
        assert list(settings.upload_dir.glob("*")) == []

    def test_decompression_bomb_rejected(self, admin_client, settings, monkeypatch):
        monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 1000)

        response = admin_client.post(
            "/api/admin/upload",
            files={"image": ("huge.png", make_image_bytes(size=(100, 100)), "image/png")},
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Image dimensions are too large"
        assert list(settings.upload_dir.glob("*")) == []

    def test_missing_file_field(self, admin_client):
        assert admin_client.post("/api/admin/upload").status_code == 400

    def test_multiple_upload(self, admin_client, settings):
        response = admin_client.post(
            "/api/admin/upload-multiple",
            files=[
                ("images", ("a.png", make_image_bytes(), "image/png")),
                ("images", ("b.jpg", make_image_bytes(image_format="JPEG"), "image/jpeg")),
            ],
        )

        assert response.status_code == 200
        assert len(response.json()["images"]) == 2
        assert len(list(settings.upload_dir.glob("*.webp"))) == 6

    def test_multiple_upload_all_or_nothing(self, admin_client, settings):
        response = admin_client.post(
            "/api/admin/upload-multiple",
            files=[
                ("images", ("a.png", make_image_bytes(), "image/png")),
                ("images", ("b.txt", b"text", "text/plain")),
            ],
        )

        assert response.status_code == 400
        assert list(settings.upload_dir.glob("*")) == []

    def test_delete_upload(self, admin_client, settings):
        url = admin_client.post(
            "/api/admin/upload",
            files={"image": ("plot.png", make_image_bytes(), "image/png")},
        ).json()["image_url"]

        assert admin_client.delete("/api/admin/upload", params={"url": url}).status_code == 200
        assert list(settings.upload_dir.glob("*")) == []
        assert admin_client.delete("/api/admin/upload", params={"url": url}).status_code == 404
