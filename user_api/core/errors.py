from typing import List, Optional


class ApiError(Exception):
    status_code = 500
    message = "Internal server error"

    def __init__(
        self,
        message: Optional[str] = None,
        error: Optional[str] = None,
        errors: Optional[List[str]] = None,
    ) -> None:
        super().__init__(message or self.message)
        if message:
            self.message = message
        self.error = error
        self.errors = errors

    def to_content(self) -> dict:
        content = {"success": False, "message": self.message}
        if self.errors is not None:
            content["errors"] = self.errors
        if self.error is not None:
            content["error"] = self.error
        return content


class ValidationError(ApiError):
    status_code = 400
    message = "Validation failed"

    def __init__(self, errors: List[str], message: Optional[str] = None) -> None:
        super().__init__(message=message, errors=list(errors))


class DuplicateKey(ApiError):
    status_code = 409
    message = "User already exists"

    def __init__(self, user_id: str) -> None:
        super().__init__(error="Duplicate user")
        self.user_id = user_id


class NotFound(ApiError):
    status_code = 404
    message = "User not found"

    def __init__(self, user_id: str) -> None:
        super().__init__(error="User does not exist")
        self.user_id = user_id


class MalformedRequest(ApiError):
    status_code = 400
    message = "Invalid JSON in request body"

    def __init__(self) -> None:
        super().__init__(error="Bad request")


class InternalFault(ApiError):
    status_code = 500
    message = "Internal server error"

    def __init__(self, message: Optional[str] = None, error: str = "Something went wrong") -> None:
        super().__init__(message=message, error=error)
