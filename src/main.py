"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.api import (
    auth,
    capsule_reminders,
    exercise,
    nutrition,
    playlists,
    search,
    sleep,
    tracks,
)
from src.config import get_settings
from src.database import init_db
from src.services.errors import AppError

logger = logging.getLogger(__name__)

settings = get_settings()


def configure_logging() -> None:
    """Apply LOG_LEVEL to the root logger."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    # Startup: schema is created directly from the models, there are no migrations
    init_db()
    logger.info(f"Health tracker API started ({settings.environment})")
    yield


app = FastAPI(
    title="Health Tracker API",
    description="Personal exercise, nutrition, sleep, reminder and music tracking",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware for development
if settings.is_development:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:3000",
            "http://localhost:5173",
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> Response:
    """Render application errors as ``{"error": message}``, or no body for 401/403."""
    if not exc.has_body:
        return Response(status_code=exc.status_code, headers=exc.headers)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message},
        headers=exc.headers,
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> Response:
    """Report every invalid field as ``{"errors": [{"field", "message"}]}`` with a 400."""
    errors = []
    for error in exc.errors():
        # loc is ("body" | "query" | "path", field, ...)
        loc = [str(part) for part in error["loc"]]
        errors.append(
            {
                "field": ".".join(loc[1:]) or loc[0],
                "message": error["msg"],
            }
        )
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"errors": errors})


# Register routers
app.include_router(auth.router)
app.include_router(exercise.router)
app.include_router(nutrition.router)
app.include_router(sleep.router)
app.include_router(capsule_reminders.router)
app.include_router(playlists.router)
app.include_router(tracks.router)
app.include_router(search.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}


def run() -> None:
    """Serve the API with uvicorn."""
    configure_logging()
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
