from fastapi import APIRouter, Depends

from user_api.core.config import settings
from user_api.core.dependencies import get_store
from user_api.storage.memory import MemoryStore, utc_timestamp

router = APIRouter(tags=["system"])

AVAILABLE_ROUTES = [
    "GET /",
    "GET /health",
    "POST /v1/users",
    "GET /v1/users",
    "GET /v1/users/:email",
    "DELETE /v1/users/:email",
    "POST /v2/users",
    "GET /v2/users",
    "GET /v2/users/:phone",
    "DELETE /v2/users/:phone",
]


@router.get("/")
def index():
    return {
        "success": True,
        "message": settings.app_name,
        "version": settings.app_version,
        "endpoints": {
            "v1": {
                "base": "/v1/users",
                "description": "Email-based user management",
                "methods": ["GET", "POST", "DELETE"],
            },
            "v2": {
                "base": "/v2/users",
                "description": "Phone-based user management",
                "methods": ["GET", "POST", "DELETE"],
            },
            "health": "/health",
        },
    }


@router.get("/health")
def health(store: MemoryStore = Depends(get_store)):
    return {
        "success": True,
        "message": "API is healthy",
        "data": {
            "status": "healthy",
            "timestamp": utc_timestamp(),
            "userCount": store.count_users(),
        },
    }
