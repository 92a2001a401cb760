"""业务异常定义"""

from app.core.error_codes import ErrorCode


class ApiError(Exception):
    """业务异常基类"""

    def __init__(
        self,
        code: ErrorCode,
        message: str | None = None,
        status_code: int = 400,
        detail: dict | None = None,
    ) -> None:
        self.code = code
        self.message = message or code.name.replace("_", " ").capitalize()
        self.status_code = status_code
        self.detail = detail
        super().__init__(self.message)


class NotFoundError(ApiError):
    """资源不存在"""

    def __init__(
        self,
        code: ErrorCode = ErrorCode.RESOURCE_NOT_FOUND,
        message: str = "Resource not found",
        detail: dict | None = None,
    ) -> None:
        super().__init__(code, message, status_code=404, detail=detail)


class AlreadyDeletedError(NotFoundError):
    """资源已被软删除（按不存在处理）"""


class DuplicateDataError(ApiError):
    """唯一字段重复"""

    def __init__(
        self,
        code: ErrorCode = ErrorCode.DUPLICATE_DATA,
        message: str = "Duplicate data",
        detail: dict | None = None,
    ) -> None:
        super().__init__(code, message, status_code=400, detail=detail)


class InvalidPasswordError(ApiError):
    """密码不符合策略"""

    def __init__(self, message: str) -> None:
        super().__init__(ErrorCode.INVALID_PASSWORD, message, status_code=400)


class StoreError(ApiError):
    """存储层未预期的错误（保留原始信息）"""

    def __init__(self, message: str) -> None:
        super().__init__(ErrorCode.STORE_ERROR, message, status_code=500)
