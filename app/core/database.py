"""数据库配置 - 记录基类与生命周期"""

from collections.abc import AsyncGenerator
from datetime import datetime
from typing import Any, TypeVar

from loguru import logger
from sqlalchemy import Boolean, DateTime, MetaData, String, text
from sqlalchemy.ext.asyncio import (
    AsyncAttrs,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from app.config import get_settings
from app.core.ids import ID_LENGTH, generate_id
from app.core.timeutils import as_utc, utc_now

settings = get_settings()

# 命名约定（Alembic 自动生成迁移友好）
convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

engine = create_async_engine(
    settings.database_url,
    echo=settings.debug,
    pool_pre_ping=True,
)

AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


class Base(AsyncAttrs, DeclarativeBase):
    metadata = MetaData(naming_convention=convention)


class RecordMixin:
    """
    记录公共字段

    - id: CUID2 主键，服务端生成，不可变
    - created_at: 创建时写入一次
    - updated_at: 每次变更（含软删除）刷新，可为空
    - deleted: 软删除标记

    字段由 new_record / apply_update / mark_deleted 显式赋值，不依赖 ORM 钩子。
    """

    id: Mapped[str] = mapped_column(String(ID_LENGTH), primary_key=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True))
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        default=None,
    )
    deleted: Mapped[bool] = mapped_column(Boolean, default=False, index=True)


RecordT = TypeVar("RecordT", bound=RecordMixin)


def new_record(model: type[RecordT], **fields: Any) -> RecordT:
    """构造新记录（未持久化），自动填充 id / created_at / deleted"""
    record = model(**fields)
    record.id = generate_id()
    record.created_at = utc_now()
    record.updated_at = None
    record.deleted = False
    return record


def _next_updated_at(record: RecordMixin) -> datetime:
    """新的 updated_at 不早于 created_at 和上一次 updated_at"""
    candidates = [utc_now(), as_utc(record.created_at)]
    if record.updated_at is not None:
        candidates.append(as_utc(record.updated_at))
    return max(candidates)


def apply_update(record: RecordT, **fields: Any) -> RecordT:
    """写入变更字段并刷新 updated_at"""
    for name, value in fields.items():
        setattr(record, name, value)
    record.updated_at = _next_updated_at(record)
    return record


def mark_deleted(record: RecordT) -> RecordT:
    """标记为软删除"""
    return apply_update(record, deleted=True)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """数据库会话依赖，自动管理事务"""
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def init_database() -> None:
    """初始化数据库：验证连接（开发环境自动建表）"""
    try:
        async with engine.begin() as conn:
            await conn.execute(text("SELECT 1"))
            if settings.debug:
                await conn.run_sync(Base.metadata.create_all)
        logger.info("Database connection established")
    except Exception as e:
        logger.warning(f"Database connection failed: {e}, starting without database")


async def close_database() -> None:
    """关闭连接池"""
    await engine.dispose()
