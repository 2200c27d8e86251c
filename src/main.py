"""FastAPI application entry point."""

import logging
import sys
from contextlib import asynccontextmanager
from typing import Annotated

import uvicorn
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api import todos, users
from src.api.dependencies import get_current_user
from src.api.errors import register_exception_handlers
from src.api.middleware import register_middleware
from src.config import get_settings
from src.models.user import User
from src.schemas.auth import MessageResponse

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s  %(levelname)-8s  %(name)s - %(message)s",
    stream=sys.stdout,
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    logger.info(
        f"API started on port {settings.port} (http://localhost:{settings.port}), "
        f"environment={settings.environment}"
    )
    yield
    logger.info("API shutting down")


app = FastAPI(
    title="Todo List API",
    description="Multi-user todo list with token authentication",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
register_middleware(app)
register_exception_handlers(app)

# Register routers
app.include_router(users.router)
app.include_router(todos.router)


@app.get("/", response_model=MessageResponse)
async def root(current_user: Annotated[User, Depends(get_current_user)]):
    """Authenticated ping."""
    return MessageResponse(response="Success")


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}


def run() -> None:
    """Serve the API with uvicorn."""
    uvicorn.run("src.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
