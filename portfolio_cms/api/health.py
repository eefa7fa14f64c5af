"""Health check endpoints"""

from fastapi import APIRouter, status
from datetime import datetime
from sqlalchemy import text
from botocore.exceptions import ClientError

from portfolio_cms.database import AsyncSessionLocal
from portfolio_cms.services.redis_service import RedisService
from portfolio_cms.services.storage_service import get_storage_service

router = APIRouter(tags=["Health"])

VERSION = "1.0.0"


@router.get("/health", status_code=status.HTTP_200_OK)
async def basic_health_check():
    """
    Basic health check endpoint (no authentication required)

    Returns simple health status and timestamp
    """
    return {
        "status": "healthy",
        "timestamp": datetime.utcnow().isoformat() + "Z"
    }


@router.get("/api/v1/health", status_code=status.HTTP_200_OK)
async def detailed_health_check():
    """
    Detailed health check with service dependency status (no authentication required)

    Checks connectivity to:
    - Database (PostgreSQL)
    - Redis
    - Object storage bucket

    Returns overall status and individual service statuses
    """
    services = {}
    overall_status = "healthy"

    try:
        async with AsyncSessionLocal() as db:
            result = await db.execute(text("SELECT 1"))
            result.scalar_one()
        services["database"] = "connected"
    except Exception as e:
        services["database"] = f"disconnected: {str(e)}"
        overall_status = "degraded"

    try:
        await RedisService().ping()
        services["redis"] = "connected"
    except Exception as e:
        services["redis"] = f"disconnected: {str(e)}"
        overall_status = "degraded"

    try:
        storage = get_storage_service()
        storage.check_bucket()
        services["storage"] = "connected"
    except ClientError as e:
        error_code = e.response.get("Error", {}).get("Code", "Unknown")
        if error_code == "404":
            services["storage"] = "bucket_not_found"
        else:
            services["storage"] = f"disconnected: {error_code}"
        overall_status = "degraded"
    except Exception as e:
        services["storage"] = f"disconnected: {str(e)}"
        overall_status = "degraded"

    return {
        "status": overall_status,
        "version": VERSION,
        "timestamp": datetime.utcnow().isoformat() + "Z",
        "services": services
    }
