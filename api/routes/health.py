"""Liveness and health check routes"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
import logging

from adapters import MongoAdapter
from api.dependencies import get_mongo_adapter
from api.responses import HealthResponse, LivenessResponse
from app.config import settings
from services.meal_kit_service import iso_timestamp

router = APIRouter(tags=["Health"])
logger = logging.getLogger("chefkit.api.health")


@router.get("/", response_model=LivenessResponse)
def liveness():
    """Liveness check; never touches the database."""
    return {
        "message": f"{settings.app_name} server is running",
        "timestamp": iso_timestamp(datetime.now(timezone.utc)),
        "status": "OK",
    }


@router.get("/health-check", response_model=HealthResponse)
def health_check(mongo: MongoAdapter = Depends(get_mongo_adapter)):
    """Report whether the database connection has been established, without querying it."""
    database = mongo.status()["database"]
    return {
        "status": "ok",
        "service": settings.app_name,
        "version": settings.app_version,
        "database": database,
    }
