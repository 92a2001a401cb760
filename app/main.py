"""
企业与用户登记服务

- create_app 工厂模式，便于测试和多实例
- 三层架构：Router → Service → Repository
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.api.v1.router import api_router
from app.config import get_settings
from app.core.database import close_database, init_database
from app.core.exception_handlers import setup_exception_handlers
from app.core.logging import setup_logging
from app.core.middlewares import setup_middlewares
from app.schemas.response import ApiResponse

settings = get_settings()

setup_logging(
    level=settings.log_level,
    json_format=settings.log_json,
    to_file=settings.log_to_file,
    log_dir=settings.log_dir,
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # 启动：验证数据库连接
    await init_database()
    yield
    # 关闭：释放连接池
    await close_database()


def create_app() -> FastAPI:
    """应用工厂函数"""
    application = FastAPI(
        title=settings.app_name,
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
    )

    # 注册组件
    setup_middlewares(application)
    application.include_router(api_router, prefix="/api/v1")
    setup_exception_handlers(application)

    @application.get("/health", response_model=ApiResponse[dict[str, str]])
    async def health_check() -> ApiResponse[dict[str, str]]:
        return ApiResponse(data={"status": "ok"})

    return application


app = create_app()
