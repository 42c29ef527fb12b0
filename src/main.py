"""FastAPI application entry point."""

from contextlib import asynccontextmanager
from datetime import UTC, datetime

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api import auth
from src.config import get_settings
from src.database import init_db
from src.errors import register_exception_handlers
from src.schemas.common import HealthResponse

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    init_db()
    yield


app = FastAPI(
    title="Auth Backend API",
    description="User registration, login and logout with JWT cookies",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_url],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Register routers
app.include_router(auth.router)


@app.get("/api/health", response_model=HealthResponse)
@app.get("/", response_model=HealthResponse, include_in_schema=False)
async def health_check():
    """Health check endpoint."""
    return HealthResponse(message="Server is running", timestamp=datetime.now(UTC))
