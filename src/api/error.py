from fastapi import status
from src.domain.errors import AuthServiceError, Error


class ApiError(Exception):
    """Error raised by route handlers and rendered by the app-level handlers"""

    def __init__(self, base_error: Error, status_code: int):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)

    def to_body(self, message: str = None) -> dict:
        return {
            "error": {
                "code": self.base_error.code,
                "message": message or self.base_error.message,
            }
        }


class ClientError(ApiError):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(base_error, status_code)

    @classmethod
    def from_exception(cls, exc: AuthServiceError, status_code: int) -> "ClientError":
        return cls(exc.error, status_code=status_code)


class ServerError(ApiError):
    def __init__(self, base_error: Error):
        super().__init__(base_error, status.HTTP_500_INTERNAL_SERVER_ERROR)
