"""
Backend API - Rand Real Estate
Public listing site and admin back office for land in Jordan
"""
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.sessions import SessionMiddleware

from config.logging_config import setup_logging
from config.settings import Settings
from exceptions import ConfigurationError
from routers import (
    admin_auth_router,
    admin_router,
    catalog_router,
    leads_router,
    properties_router,
    uploads_router,
)
from services.clock import get_local_now
from services.image_upload import ImageUploader
from storage import create_storage
from storage.base import Storage

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"


def register_exception_handlers(app: FastAPI):
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content={"message": "Invalid request data", "errors": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"message": "Internal server error"})


def create_app(
    storage: Optional[Storage] = None,
    settings: Optional[Settings] = None,
    uploader: Optional[ImageUploader] = None,
) -> FastAPI:
    """Build the application; tests pass their own storage and upload dir"""
    settings = settings or Settings.from_env()
    if not settings.session_secret:
        raise ConfigurationError("SESSION_SECRET must not be empty")

    app = FastAPI(title="Rand Real Estate API", version=API_VERSION)

    app.state.storage = storage or create_storage(settings)
    app.state.uploader = uploader or ImageUploader(settings.upload_dir, settings.upload_url_prefix)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.session_secret,
        max_age=settings.session_max_age,
        same_site="lax",
    )

    register_exception_handlers(app)

    app.include_router(properties_router)
    app.include_router(leads_router)
    app.include_router(catalog_router)
    app.include_router(admin_auth_router)
    app.include_router(admin_router)
    app.include_router(uploads_router)

    app.mount(
        settings.upload_url_prefix,
        StaticFiles(directory=str(app.state.uploader.upload_dir)),
        name="uploads",
    )

    @app.get("/")
    async def root():
        """Root endpoint"""
        return {"message": "Rand Real Estate API is running", "timestamp": get_local_now(), "version": API_VERSION}

    @app.get("/health")
    async def health():
        """Healthcheck endpoint for Docker"""
        return {"status": "healthy", "timestamp": get_local_now()}

    return app


_settings = Settings.from_env()
setup_logging(_settings.log_level, _settings.log_format)
app = create_app(settings=_settings)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
