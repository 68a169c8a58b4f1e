import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from user_api.core.dependencies import get_store
from user_api.core.errors import InternalFault, MalformedRequest, NotFound, ValidationError
from user_api.core.validation import ApiVersion, validate_identifier, validate_record
from user_api.storage.memory import MemoryStore

logger = logging.getLogger(__name__)

IDENTIFIER_LABELS = {
    ApiVersion.BY_EMAIL: "email",
    ApiVersion.BY_PHONE: "phone",
}
FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def _read_body(request: Request):
    """Parse a create body sent as JSON or as an HTML form.

    Bodies that do not decode to a JSON object or array are rejected before
    validation. An empty body reads as an empty object.
    """
    content_type = request.headers.get("content-type", "").lower()
    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        return dict(form)

    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        body = await request.json()
    except ValueError as exc:
        raise MalformedRequest() from exc
    if not isinstance(body, (dict, list)):
        raise MalformedRequest()
    return body


def _normalized_identifier(identifier: str, version: ApiVersion) -> str:
    validation = validate_identifier(identifier, version)
    if not validation.valid:
        raise ValidationError(validation.errors, message="Invalid ID format")
    return validation.normalized


def build_users_router(version: ApiVersion) -> APIRouter:
    """Create the CRUD router for one API version.

    Every version shares the same store; only identifier validation differs.
    """
    label = IDENTIFIER_LABELS[version]
    router = APIRouter(prefix=f"/{version.value}/users", tags=[f"users-{version.value}"])

    @router.post("", status_code=201)
    async def create_user(request: Request, store: MemoryStore = Depends(get_store)):
        body = await _read_body(request)
        validation = validate_record(body, version)
        if not validation.valid:
            raise ValidationError(validation.errors)

        user = store.create_user(validation.normalized.id, validation.normalized.password)
        logger.info("Created %s user %s (internalId=%d)", label, user.id, user.internal_id)
        return JSONResponse(
            status_code=201,
            content={
                "success": True,
                "message": "User created successfully",
                "data": user.to_response(),
            },
        )

    @router.get("")
    def list_users(store: MemoryStore = Depends(get_store)):
        users = [user.to_response() for user in store.list_users()]
        return {
            "success": True,
            "message": "Users retrieved successfully",
            "data": users,
            "count": len(users),
        }

    @router.get("/{identifier:path}")
    def get_user(identifier: str, store: MemoryStore = Depends(get_store)):
        user_id = _normalized_identifier(identifier, version)
        user = store.get_user(user_id)
        if user is None:
            raise NotFound(user_id)
        return {
            "success": True,
            "message": "User retrieved successfully",
            "data": user.to_response(),
        }

    @router.delete("/{identifier:path}")
    def delete_user(identifier: str, store: MemoryStore = Depends(get_store)):
        user_id = _normalized_identifier(identifier, version)
        if not store.user_exists(user_id):
            raise NotFound(user_id)

        if not store.delete_user(user_id):
            raise InternalFault(message="Failed to delete user", error="User could not be deleted")

        logger.info("Deleted %s user %s", label, user_id)
        return {
            "success": True,
            "message": "User deleted successfully",
            "data": {"id": user_id, "deleted": True},
        }

    return router
