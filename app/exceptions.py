"""Application errors rendered as ``{code, status, message}`` JSON bodies."""

BAD_REQUEST = "BAD_REQUEST"
TOKEN_EXPIRED = "TOKEN_EXPIRED"


class AppError(Exception):
    """Base class for errors surfaced to API clients."""

    code: str = BAD_REQUEST
    status: int = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"code": self.code, "status": self.status, "message": self.message}


class ConflictError(AppError):
    """A unique field (email or username) is already taken."""

    status = 409


class NotFoundError(AppError):
    status = 404


class TokenExpiredError(AppError):
    code = TOKEN_EXPIRED
    status = 410

    def __init__(self, message: str = "token has expired") -> None:
        super().__init__(message)
