"""全局异常处理器注册"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.error_codes import ErrorCode
from app.core.exceptions import ApiError
from app.schemas.response import ErrorResponse


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    """业务异常处理"""
    if exc.status_code >= 500:
        logger.opt(exception=exc).error(
            "Store failure: {} | code={} path={}",
            exc.message,
            exc.code,
            request.url.path,
        )
    else:
        logger.warning(
            "Request rejected: {} | code={} path={}",
            exc.message,
            exc.code,
            request.url.path,
        )
    return ErrorResponse.from_error(exc).render(exc.status_code)


async def validation_error_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """请求验证异常处理"""
    errors = []
    for error in exc.errors():
        loc = error["loc"]
        field = ".".join(str(x) for x in loc[1:]) if len(loc) > 1 else str(loc[0])
        errors.append(
            {
                "field": field,
                "message": error["msg"],
                "type": error["type"],
            }
        )

    body = ErrorResponse(
        code=ErrorCode.INVALID_PARAMETER,
        message="Validation failed",
        detail={"errors": errors},
    )
    return body.render(422)


async def http_error_handler(
    request: Request,
    exc: StarletteHTTPException,
) -> JSONResponse:
    """HTTP 异常处理"""
    code_map = {
        400: ErrorCode.INVALID_REQUEST,
        404: ErrorCode.RESOURCE_NOT_FOUND,
        405: ErrorCode.INVALID_REQUEST,
        500: ErrorCode.SYSTEM_ERROR,
        503: ErrorCode.SERVICE_UNAVAILABLE,
    }
    code = code_map.get(exc.status_code, ErrorCode.SYSTEM_ERROR)

    body = ErrorResponse(code=code, message=str(exc.detail))
    return body.render(
        exc.status_code, headers=dict(exc.headers) if exc.headers else None
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """未捕获异常处理"""
    logger.opt(exception=exc).error(
        "Unhandled exception {method} {path}",
        method=request.method,
        path=request.url.path,
    )
    body = ErrorResponse(code=ErrorCode.SYSTEM_ERROR, message="Internal server error")
    return body.render(500)


def setup_exception_handlers(app: FastAPI) -> None:
    """注册全局异常处理器"""
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
