"""
Guardian service - account signup, login and password recovery
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from .config import settings
from .db import init_db
from .routes import dev_monitor, guardian
from .utils.error_logger import configure_logging

configure_logging(settings.LOG_DIR, settings.LOG_LEVEL)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Initialize database on startup"""
    init_db()
    yield


app = FastAPI(
    title="Guardian Service",
    description="Guardian account management",
    version="1.0.0",
    lifespan=lifespan
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(guardian.router)
app.include_router(dev_monitor.router)
