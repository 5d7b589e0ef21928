from fastapi import FastAPI
from typing import Any, AsyncGenerator
from .routers import dashboard
from .config.dashboard import get_resource_catalog, load_resources_file
from contextlib import asynccontextmanager
import os
import logging
from dotenv import load_dotenv

# Configure logging at module level
logging.basicConfig(
    level=logging.WARNING,  # Set default to WARNING for all loggers
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler()],
)

# Set your application loggers to DEBUG
logging.getLogger("src").setLevel(logging.DEBUG)  # All src.* modules
logging.getLogger("__main__").setLevel(logging.DEBUG)

# Keep third-party loggers at INFO or WARNING to reduce noise
logging.getLogger("uvicorn.access").setLevel(logging.INFO)
logging.getLogger("uvicorn.error").setLevel(logging.INFO)
logging.getLogger("asyncio").setLevel(logging.WARNING)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[Any, Any]:
    # Load environment variables at startup
    env_path = os.path.join(os.path.dirname(__file__), "..", ".env")
    if os.path.exists(env_path):
        load_dotenv(env_path)
        logger.info(f"Loaded environment from {env_path}")
    else:
        logger.info(f"No .env file found at {env_path}, using system environment variables")

    # Register dashboard resources from configuration
    resources_file = os.environ.get("DASHBOARD_RESOURCES_FILE")
    if resources_file:
        load_resources_file(resources_file, get_resource_catalog())
    yield


app = FastAPI(
    lifespan=lifespan,
    title="Dashboard Menu Commands",
    description="URL commands for the context menus of orchestration dashboard resources",
    version="1.0.0",
)

# Include routers
app.include_router(dashboard.router)


@app.get("/")
async def root() -> dict[str, Any]:
    return {
        "message": "Welcome to the Dashboard Menu Commands API",
        "docs_url": "/docs",
        "endpoints": {"dashboard": "/dashboard/"},
    }
