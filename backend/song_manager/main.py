from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
import logging
import time

from song_manager.config import settings
from song_manager.api import routes
from song_manager.services.song_store import SongStore
from song_manager.utils.seed_loader import load_seed_songs


# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events
    """

    routes.song_store = SongStore(load_seed_songs(settings.SEED_CSV_PATH))
    routes.started_at = time.monotonic()

    logger.info("=" * 60)
    logger.info("Backend service started successfully!")
    logger.info(f"Environment: {settings.ENVIRONMENT}")
    logger.info(f"Songs loaded: {len(routes.song_store)}")
    logger.info(f"API Base URL: http://{settings.HOST}:{settings.PORT}/api")
    logger.info("=" * 60)

    yield

    routes.song_store = None
    logger.info("Backend service stopped")


def _format_validation_errors(exc: RequestValidationError) -> list[dict]:
    errors = []
    for error in exc.errors():
        location = error.get("loc", ())
        errors.append({
            "location": location[0] if location else None,
            "field": ".".join(str(part) for part in location[1:]),
            "message": str(error.get("msg", "")).removeprefix("Value error, "),
        })
    return errors


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Validation failed for {request.method} {request.url.path}")
    return JSONResponse(
        status_code=400,
        content={"message": "Validation failed", "errors": _format_validation_errors(exc)},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.API_TITLE,
        description="REST API for managing a music catalog",
        version=settings.API_VERSION,
        lifespan=lifespan
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "X-Requested-With"],
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    # Include API routes
    app.include_router(routes.router)

    # Root endpoint
    @app.get("/")
    async def root():
        return {
            "message": settings.API_TITLE,
            "version": settings.API_VERSION,
            "endpoints": {
                "songs": "/api/songs",
                "genres": "/api/genres",
                "health": "/health",
            },
            "docs": "/docs",
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    # Run with uvicorn
    uvicorn.run(
        "song_manager.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.ENVIRONMENT == "development",
        log_level=settings.LOG_LEVEL.lower()
    )
