from contextlib import asynccontextmanager
import logging
import os

from dotenv import load_dotenv
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from database import create_db_and_tables
from routes import auth, tasks
from services.exceptions import TaskTrackerError
from utils.log import setup_logging

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging and create database tables on startup"""
    setup_logging()
    create_db_and_tables()
    logger.info("Task tracker API started")
    yield


# Create FastAPI app
app = FastAPI(
    title="Task Tracker API",
    description="Multi-user task tracking API with JWT authentication",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# CORS configuration
cors_origins = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "*").split(",")
    if origin.strip()
]
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials="*" not in cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(TaskTrackerError)
async def task_tracker_error_handler(_request: Request, exc: TaskTrackerError) -> JSONResponse:
    """Render service errors as {"errorMsg": ...} with their status"""
    return JSONResponse(status_code=exc.status_code, content={"errorMsg": exc.message})


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"errorMsg": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    _request: Request, exc: RequestValidationError,
) -> JSONResponse:
    """Missing body fields or a non-integer task id"""
    logger.debug("Rejected request: %s", exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"errorMsg": "Invalid request"},
    )


# Include routers
app.include_router(auth.router, tags=["auth"])
app.include_router(tasks.router, tags=["tasks"])


@app.get("/")
def read_root():
    """Root endpoint"""
    return {
        "message": "Task Tracker API is running",
        "version": "1.0.0",
        "docs": "/docs"
    }


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}
