# /gradebook/main.py

# --- Core FastAPI Imports ---
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import config

# --- Application-specific Router Imports ---
from .routers import (
    assignments_router,
    classes_router,
    dashboard_router,
    grades_router,
    reports_router,
    students_router,
)

# --- Database and Service Imports for Startup Logic ---
from .db.base import Base
from .db.database import SessionLocal, engine
from .services.database_service import DatabaseService
from .services.exceptions import GatewayError
from .services.seed_service import seed_from_file

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


# --- Application Lifecycle Management ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    # Runs once on startup: make sure the tables exist, then load fixtures
    # into an empty store if a seed file is configured.
    Base.metadata.create_all(bind=engine)
    logger.info("Gradebook tables ready")
    if config.SEED_PATH:
        session = SessionLocal()
        try:
            seed_from_file(config.SEED_PATH, DatabaseService(session))
        finally:
            session.close()
    yield


# --- FastAPI Application Instance Creation ---
app = FastAPI(
    title="Gradebook API",
    description="Students, classes, assignments and grades, with derived averages, rankings and reports.",
    version="1.0.0",
    lifespan=lifespan
)

# --- Middleware Configuration ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# --- Error Translation ---
@app.exception_handler(GatewayError)
async def gateway_error_handler(request: Request, exc: GatewayError):
    # The failure itself was logged where it happened.
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": str(exc), "operation": exc.operation, "retryable": True},
    )


# --- API Router Inclusion ---
app.include_router(dashboard_router.router, prefix="/api/dashboard", tags=["Dashboard"])
app.include_router(students_router.router, prefix="/api/students", tags=["Students"])
app.include_router(classes_router.router, prefix="/api/classes", tags=["Classes"])
app.include_router(assignments_router.router, prefix="/api/assignments", tags=["Assignments"])
app.include_router(grades_router.router, prefix="/api/grades", tags=["Grades"])
app.include_router(reports_router.router, prefix="/api/reports", tags=["Reports"])


# --- Root / Health Check Endpoint ---
@app.get("/", tags=["Health Check"])
async def read_root():
    """A simple health check endpoint to confirm the API is online."""
    return {"status": "Gradebook API is running!", "version": app.version}
