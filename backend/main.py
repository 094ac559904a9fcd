from fastapi import FastAPI
from contextlib import asynccontextmanager
from config.app_config import LOG_LEVEL, get_log_dir
from init_db import init_database
from api import products, users
from utils.logging_utils import configure_logging
import logging

configure_logging(LOG_LEVEL, get_log_dir())

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the schema on startup."""
    init_database()
    logger.info("Application startup complete")
    yield
    logger.info("Application shutdown complete")


app = FastAPI(
    title="Catalog API",
    description="Users, profiles, addresses and a filterable product catalog",
    version="1.0.0",
    lifespan=lifespan
)

# Include API routers
app.include_router(products.router, prefix="/api", tags=["products"])
app.include_router(users.router, prefix="/api", tags=["users"])


@app.get("/api/health")
def health_check():
    """Health check endpoint"""
    return {
        "status": "ok",
        "service": "Catalog API",
        "version": "1.0.0"
    }


if __name__ == "__main__":
    import uvicorn
    from constants import ServerConfig

    logger.info(f"🚀 Starting Catalog API on {ServerConfig.url()}...")
    uvicorn.run(app, host=ServerConfig.HOST, port=ServerConfig.PORT)
