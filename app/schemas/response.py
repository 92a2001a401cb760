"""统一响应信封：{code, message, data[, detail]}"""

from typing import Generic, TypeVar

from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.core.exceptions import ApiError

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """成功响应，code 固定为 0"""

    code: int = 0
    message: str = "success"
    data: T


class ErrorResponse(BaseModel):
    """错误响应，data 恒为 null"""

    code: int
    message: str
    data: None = None
    detail: dict | None = None

    @classmethod
    def from_error(cls, exc: ApiError) -> "ErrorResponse":
        return cls(code=exc.code, message=exc.message, detail=exc.detail)

    def render(
        self,
        status_code: int,
        headers: dict[str, str] | None = None,
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status_code,
            content=self.model_dump(mode="json"),
            headers=headers,
        )
