"""
Shared FastAPI dependencies
"""
from typing import Annotated

from fastapi import Path, Request

from models import MAX_INT
from services.image_upload import ImageUploader
from storage.base import Storage

# Path ids outside the integer column range are rejected with 400
RowId = Annotated[int, Path(ge=1, le=MAX_INT)]


def get_storage(request: Request) -> Storage:
    """Storage instance attached to the app at startup"""
    return request.app.state.storage


def get_uploader(request: Request) -> ImageUploader:
    return request.app.state.uploader
