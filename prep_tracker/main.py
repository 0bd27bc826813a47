"""
FastAPI application entry point
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from prep_tracker.app.api.v1.ai_suggestions import routes as ai_suggestions
from prep_tracker.app.api.v1.analytics import routes as analytics
from prep_tracker.app.api.v1.applications import routes as applications
from prep_tracker.app.api.v1.auth import routes as auth
from prep_tracker.app.api.v1.contacts import routes as contacts
from prep_tracker.app.api.v1.dashboard import routes as dashboard
from prep_tracker.app.api.v1.interviews import routes as interviews
from prep_tracker.app.api.v1.practice import routes as practice
from prep_tracker.app.api.v1.profile import routes as profile
from prep_tracker.app.api.v1.resources import routes as resources
from prep_tracker.app.api.v1.roadmap import routes as roadmap
from prep_tracker.app.api.v1.schedule import routes as schedule
from prep_tracker.app.core.config import settings
from prep_tracker.app.core.errors import AppError
from prep_tracker.app.core.logging_config import setup_logging
from prep_tracker.app.db.base import Base
from prep_tracker.app.db.session import engine
from prep_tracker.app.utils import cache

# Import models so they register with Base.metadata
import prep_tracker.app.models  # noqa: F401

logger = setup_logging()

# Create database tables (alembic is the source of truth for deployed databases)
try:
    Base.metadata.create_all(bind=engine)
except SQLAlchemyError as e:
    logger.error("Database error: %s", e)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await cache.connect()
    yield
    await cache.close()


# Initialize FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Interview preparation tracker API",
    version=settings.app_version,
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    if exc.status_code >= 500:
        logger.error("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    else:
        logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.client_message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        first = errors[0]
        loc = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
        message = f"{loc}: {first.get('msg')}" if loc else str(first.get("msg"))
    else:
        message = "Invalid request"
    logger.warning("%s %s -> 422: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=422, content={"error": message})


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404 and exc.detail == "Not Found":
        return JSONResponse(status_code=404, content={"error": "Not found"})
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
        headers=getattr(exc, "headers", None),
    )


# Include routers
for module in (
    auth,
    profile,
    dashboard,
    resources,
    roadmap,
    applications,
    interviews,
    contacts,
    schedule,
    practice,
    analytics,
    ai_suggestions,
):
    app.include_router(module.router, prefix="/api")


@app.get("/")
def read_root():
    """Root endpoint"""
    return {"message": settings.app_name, "version": settings.app_version}


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
