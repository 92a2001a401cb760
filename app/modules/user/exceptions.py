"""用户模块 - 异常"""

from app.core.error_codes import ErrorCode
from app.core.exceptions import AlreadyDeletedError, DuplicateDataError, NotFoundError


class UserNotFoundError(NotFoundError):
    """用户不存在"""

    def __init__(self, user_id: str) -> None:
        super().__init__(
            code=ErrorCode.USER_NOT_FOUND,
            message=f"No user found with the id: {user_id}",
            detail={"user_id": user_id},
        )


class UserAlreadyDeletedError(AlreadyDeletedError):
    """用户已被删除"""

    def __init__(self, user_id: str) -> None:
        super().__init__(
            code=ErrorCode.USER_ALREADY_DELETED,
            message="User is already deleted",
            detail={"user_id": user_id},
        )


class EmailAlreadyExistsError(DuplicateDataError):
    """邮箱已注册"""

    def __init__(self, email: str) -> None:
        super().__init__(
            code=ErrorCode.EMAIL_ALREADY_EXISTS,
            message=f"A user with the email '{email}' already exists",
            detail={"email": email},
        )
