"""
Response models and utilities.
Shapes MongoDB documents and driver results into JSON-safe payloads.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from bson import ObjectId
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult

DEGRADED_HEADER = "X-Data-Status"


class LivenessResponse(BaseModel):
    """Liveness check response"""

    message: str = Field(..., description="Human-readable status message")
    timestamp: str = Field(..., description="Current server time, ISO-8601")
    status: str = Field(..., description="Always OK while the process is serving")


class HealthResponse(BaseModel):
    """Health check response"""

    status: str = Field(..., description="Service status")
    service: str = Field(..., description="Service name")
    version: Optional[str] = Field(None, description="Service version")
    database: str = Field(..., description="connected or unavailable")


def make_serializable(obj):
    """Convert BSON values to JSON-serializable format"""
    if isinstance(obj, ObjectId):
        return str(obj)
    elif isinstance(obj, datetime):
        return obj.isoformat()
    elif isinstance(obj, dict):
        return {k: make_serializable(v) for k, v in obj.items()}
    elif isinstance(obj, (list, tuple)):
        return [make_serializable(item) for item in obj]
    return obj


def document_list(docs: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [make_serializable(doc) for doc in docs]


def degraded_list() -> JSONResponse:
    """Empty list returned when the backend failed, flagged by header."""
    return JSONResponse(content=[], headers={DEGRADED_HEADER: "degraded"})


def insert_result(result: InsertOneResult) -> Dict[str, Any]:
    return {
        "acknowledged": result.acknowledged,
        "insertedId": make_serializable(result.inserted_id),
    }


def update_result(result: UpdateResult) -> Dict[str, Any]:
    upserted_id = result.upserted_id
    return {
        "acknowledged": result.acknowledged,
        "matchedCount": result.matched_count,
        "modifiedCount": result.modified_count,
        "upsertedCount": 0 if upserted_id is None else 1,
        "upsertedId": make_serializable(upserted_id),
    }


def delete_result(result: DeleteResult) -> Dict[str, Any]:
    return {
        "acknowledged": result.acknowledged,
        "deletedCount": result.deleted_count,
    }
