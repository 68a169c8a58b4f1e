import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from user_api.core.config import settings
from user_api.core.errors import ApiError
from user_api.core.validation import ApiVersion
from user_api.routers import system
from user_api.routers.system import AVAILABLE_ROUTES
from user_api.routers.users import build_users_router
from user_api.storage.memory import MemoryStore

logger = logging.getLogger(__name__)


def create_app(store: Optional[MemoryStore] = None) -> FastAPI:
    app = FastAPI(title=settings.app_name, version=settings.app_version)
    app.state.store = store if store is not None else MemoryStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        logger.info("%s %s", request.method, request.url.path)
        return await call_next(request)

    app.include_router(system.router)
    for version in ApiVersion:
        app.include_router(build_users_router(version))

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.error)
        else:
            logger.info("%s %s -> %d %s", request.method, request.url.path, exc.status_code, exc.message)
        return JSONResponse(status_code=exc.status_code, content=exc.to_content())

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code in (404, 405):
            return JSONResponse(
                status_code=404,
                content={
                    "success": False,
                    "message": "Route not found",
                    "error": f"Cannot {request.method} {request.url.path}",
                    "availableRoutes": AVAILABLE_ROUTES,
                },
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "message": str(exc.detail)},
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content={
                "success": False,
                "message": "Internal server error",
                "error": "Something went wrong",
            },
        )

    return app


app = create_app()
