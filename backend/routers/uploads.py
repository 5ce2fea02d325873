"""
Uploads router - Admin image upload and cleanup
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile

from exceptions import ImageTooLargeError, ImageUploadError
from routers.dependencies import get_uploader
from services.auth_service import require_admin
from services.image_upload import ImageUploader, IncomingImage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin", tags=["uploads"], dependencies=[Depends(require_admin)])


async def _read_upload(upload: UploadFile) -> IncomingImage:
    data = await upload.read()
    return IncomingImage(filename=upload.filename or "image", content_type=upload.content_type, data=data)


def _upload_error(error: ImageUploadError) -> HTTPException:
    status_code = 413 if isinstance(error, ImageTooLargeError) else 400
    logger.warning("Rejected upload: %s", error)
    return HTTPException(status_code=status_code, detail=str(error))


@router.post("/upload")
async def upload_image(
    image: UploadFile = File(...),
    uploader: ImageUploader = Depends(get_uploader),
):
    """Single image (field ``image``, 10MB max) -> three WebP variants"""
    incoming = await _read_upload(image)
    try:
        return uploader.process_image(incoming)
    except ImageUploadError as e:
        raise _upload_error(e)
    except Exception:
        logger.exception("Image processing error")
        raise HTTPException(status_code=500, detail="Failed to process image")


@router.post("/upload-multiple")
async def upload_images(
    images: List[UploadFile] = File(...),
    uploader: ImageUploader = Depends(get_uploader),
):
    """Up to 10 images (field ``images``, 5MB each); nothing is written unless all are valid"""
    incoming = [await _read_upload(image) for image in images]
    try:
        results = uploader.process_images(incoming)
    except ImageUploadError as e:
        raise _upload_error(e)
    except Exception:
        logger.exception("Image processing error")
        raise HTTPException(status_code=500, detail="Failed to process images")

    return {"message": f"{len(results)} images uploaded successfully", "images": results}


@router.delete("/upload")
async def delete_uploaded_image(
    url: str = Query(..., min_length=1),
    uploader: ImageUploader = Depends(get_uploader),
):
    removed = uploader.cleanup_image(url)
    if not removed:
        raise HTTPException(status_code=404, detail="Image not found")
    return {"message": "Image deleted successfully"}
