"""
Image upload service - validates uploads and writes WebP variants with Pillow

Every upload produces three center-cropped files in the upload directory:
``<base>.webp`` (1200x800), ``<base>-thumb.webp`` (400x300) and
``<base>-small.webp`` (200x150).
"""
import io
import logging
import re
import secrets
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

from PIL import Image, ImageOps, UnidentifiedImageError

from exceptions import ImageTooLargeError, ImageUploadError, UnsupportedImageError

logger = logging.getLogger(__name__)

MAX_IMAGE_BYTES = 10 * 1024 * 1024
MAX_BATCH_IMAGE_BYTES = 5 * 1024 * 1024
MAX_BATCH_FILES = 10

# (filename suffix, size, WebP quality)
VARIANTS = [
    ("", (1200, 800), 85),
    ("-thumb", (400, 300), 80),
    ("-small", (200, 150), 75),
]


@dataclass
class IncomingImage:
    """Raw upload as received from the multipart body"""

    filename: str
    content_type: Optional[str]
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)


def slugify_stem(filename: str) -> str:
    """File stem reduced to word characters and dashes (Arabic letters kept)"""
    stem = Path(filename or "").stem
    slug = re.sub(r"[^\w\-]+", "-", stem).strip("-_")
    return slug[:60] or "image"


def build_base_name(filename: str) -> str:
    timestamp = int(time.time() * 1000)
    return f"{slugify_stem(filename)}-{timestamp}-{secrets.token_hex(4)}"


def validate_image(upload: IncomingImage, max_bytes: int = MAX_IMAGE_BYTES) -> None:
    """Raise an ImageUploadError subclass unless the upload is a decodable image"""
    if not upload.content_type or not upload.content_type.startswith("image/"):
        raise UnsupportedImageError("Only image files are allowed!")

    if upload.size > max_bytes:
        limit_mb = max_bytes // (1024 * 1024)
        raise ImageTooLargeError(f"File too large. Maximum size is {limit_mb}MB")

    try:
        with Image.open(io.BytesIO(upload.data)) as img:
            img.verify()
    except Image.DecompressionBombError as e:
        raise UnsupportedImageError("Image dimensions are too large") from e
    except (UnidentifiedImageError, OSError, SyntaxError) as e:
        raise UnsupportedImageError("Uploaded file is not a valid image") from e


class ImageUploader:
    """Writes processed uploads under ``upload_dir`` served at ``url_prefix``"""

    def __init__(self, upload_dir: Path, url_prefix: str = "/uploads"):
        self.upload_dir = Path(upload_dir)
        self.url_prefix = url_prefix.rstrip("/")
        self.upload_dir.mkdir(parents=True, exist_ok=True)

    def _variant_path(self, base_name: str, suffix: str) -> Path:
        return self.upload_dir / f"{base_name}{suffix}.webp"

    def _url(self, base_name: str, suffix: str) -> str:
        return f"{self.url_prefix}/{base_name}{suffix}.webp"

    def _write_variants(self, upload: IncomingImage) -> Dict:
        base_name = build_base_name(upload.filename)
        written: List[Path] = []
        try:
            with Image.open(io.BytesIO(upload.data)) as source:
                img = ImageOps.exif_transpose(source).convert("RGB")
                for suffix, size, quality in VARIANTS:
                    variant = ImageOps.fit(img, size, method=Image.Resampling.LANCZOS, centering=(0.5, 0.5))
                    path = self._variant_path(base_name, suffix)
                    variant.save(path, "WEBP", quality=quality)
                    written.append(path)
        except (OSError, Image.DecompressionBombError) as e:
            for path in written:
                path.unlink(missing_ok=True)
            logger.exception("Failed to process image %s", upload.filename)
            raise ImageUploadError("Failed to process image") from e

        logger.info("Processed upload %s -> %s (%d bytes)", upload.filename, base_name, upload.size)
        return {
            "image_url": self._url(base_name, ""),
            "thumbnail_url": self._url(base_name, "-thumb"),
            "small_thumbnail_url": self._url(base_name, "-small"),
            "original_name": upload.filename,
            "size": upload.size,
        }

    def process_image(self, upload: IncomingImage) -> Dict:
        """Validate and store a single upload"""
        validate_image(upload, MAX_IMAGE_BYTES)
        return self._write_variants(upload)

    def process_images(self, uploads: List[IncomingImage]) -> List[Dict]:
        """Validate every upload first, then store them all"""
        if not uploads:
            raise ImageUploadError("No files uploaded")
        if len(uploads) > MAX_BATCH_FILES:
            raise ImageUploadError(f"Too many files. Maximum is {MAX_BATCH_FILES}")

        for upload in uploads:
            validate_image(upload, MAX_BATCH_IMAGE_BYTES)

        results = []
        try:
            for upload in uploads:
                results.append(self._write_variants(upload))
        except ImageUploadError:
            for result in results:
                self.cleanup_image(result["image_url"])
            raise
        return results

    def cleanup_image(self, image_url: Optional[str]) -> bool:
        """Delete the three variants behind an upload URL

        Returns False for URLs that do not point into the upload directory
        (external images, the placeholder SVG).
        """
        if not image_url or not image_url.startswith(f"{self.url_prefix}/") or not image_url.endswith(".webp"):
            return False

        base_name = Path(image_url).name[:-len(".webp")]
        removed = False
        for suffix, _, _ in VARIANTS:
            path = self._variant_path(base_name, suffix)
            try:
                if path.exists():
                    path.unlink()
                    removed = True
            except OSError:
                logger.warning("Could not delete uploaded image %s", path, exc_info=True)
        return removed
