"""Main FastAPI application entry point"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from portfolio_cms.api.admin_categories import router as admin_categories_router
from portfolio_cms.api.admin_content_blocks import router as admin_content_blocks_router
from portfolio_cms.api.admin_media import router as admin_media_router
from portfolio_cms.api.admin_projects import router as admin_projects_router
from portfolio_cms.api.admin_site import router as admin_site_router
from portfolio_cms.api.auth import router as auth_router
from portfolio_cms.api.errors import HANDLED_EXCEPTIONS, service_error_handler
from portfolio_cms.api.health import router as health_router
from portfolio_cms.api.public import router as public_router, seo_router
from portfolio_cms.config import settings
from portfolio_cms.services.redis_service import RedisService

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting portfolio CMS API ({settings.environment})")
    yield
    await RedisService.close()


app = FastAPI(
    title="Portfolio CMS API",
    description="Projects, media and site content for the construction portfolio site and its admin area",
    version="1.0.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
    max_age=3600,
)

for exc_class in HANDLED_EXCEPTIONS:
    app.add_exception_handler(exc_class, service_error_handler)

# Include routers
app.include_router(health_router)
app.include_router(seo_router)
app.include_router(public_router)
app.include_router(auth_router)
app.include_router(admin_site_router)
app.include_router(admin_projects_router)
app.include_router(admin_media_router)
app.include_router(admin_content_blocks_router)
app.include_router(admin_categories_router)


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "Portfolio CMS API",
        "version": "1.0.0",
        "status": "running",
    }
