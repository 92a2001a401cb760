"""中间件配置"""

import time

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from loguru import logger
from starlette.datastructures import Headers, MutableHeaders
from starlette.types import ASGIApp, Message, Receive, Scope, Send
from uuid_utils import uuid7

from app.config import get_settings

settings = get_settings()

REQUEST_ID_HEADER = "X-Request-ID"
PROCESS_TIME_HEADER = "X-Process-Time"


class RequestLogMiddleware:
    """
    请求日志中间件（纯 ASGI）

    - 沿用客户端传入的 X-Request-ID，缺省时生成 UUIDv7
    - 请求处理期间 request_id 绑定到 loguru 上下文
    - 响应头回写 X-Request-ID 与 X-Process-Time
    """

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request_id = Headers(scope=scope).get(REQUEST_ID_HEADER) or str(uuid7())
        method, path = scope["method"], scope["path"]
        started = time.perf_counter()
        status_code = 500

        async def send_with_headers(message: Message) -> None:
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message["status"]
                headers = MutableHeaders(scope=message)
                headers[REQUEST_ID_HEADER] = request_id
                headers[PROCESS_TIME_HEADER] = f"{time.perf_counter() - started:.3f}"
            await send(message)

        with logger.contextualize(request_id=request_id):
            logger.info("{} {}", method, path)
            try:
                await self.app(scope, receive, send_with_headers)
            finally:
                logger.info(
                    "{} {} -> {} in {:.3f}s",
                    method,
                    path,
                    status_code,
                    time.perf_counter() - started,
                )


def setup_middlewares(app: FastAPI) -> None:
    """注册中间件（后注册的在外层）"""
    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
            expose_headers=[REQUEST_ID_HEADER, PROCESS_TIME_HEADER],
        )

    app.add_middleware(GZipMiddleware, minimum_size=1000)
    app.add_middleware(RequestLogMiddleware)
