"""通用数据访问层（字段等值过滤）"""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, Generic, TypeVar

from loguru import logger
from sqlalchemy import ColumnElement, func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import RecordMixin, apply_update, new_record
from app.core.exceptions import DuplicateDataError, StoreError


@contextmanager
def store_errors() -> Iterator[None]:
    """
    转换存储层异常

    - 唯一约束冲突 -> DuplicateDataError（并发写入时唯一索引才是最终保证），
      驱动原文只写日志，不进入响应
    - 其他 SQLAlchemy 异常 -> StoreError（保留原始信息）
    """
    try:
        yield
    except IntegrityError as e:
        logger.warning("Unique constraint violated: {}", e.orig)
        raise DuplicateDataError(message="Record violates a unique constraint") from e
    except SQLAlchemyError as e:
        raise StoreError(str(e)) from e


ModelT = TypeVar("ModelT", bound=RecordMixin)


class Repository(Generic[ModelT]):
    """
    记录数据访问层

    注意：
    - 事务由 get_db() 依赖自动管理，Repository 只用 flush/refresh
    - 查询不做软删除过滤，需要时显式传 deleted=False
    """

    model: type[ModelT]

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    def _criteria(self, filters: dict[str, Any]) -> list[ColumnElement[bool]]:
        return [getattr(self.model, name) == value for name, value in filters.items()]

    async def find_one(self, **filters: Any) -> ModelT | None:
        """按字段等值查询单条记录"""
        stmt = select(self.model).where(*self._criteria(filters)).limit(1)
        with store_errors():
            return await self.db.scalar(stmt)

    async def find(self, **filters: Any) -> list[ModelT]:
        """按字段等值查询记录列表（按创建时间排序）"""
        stmt = (
            select(self.model)
            .where(*self._criteria(filters))
            .order_by(self.model.created_at)
        )
        with store_errors():
            result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def count(self, *, exclude_id: str | None = None, **filters: Any) -> int:
        """统计匹配记录数（包含已软删除的记录）"""
        stmt = (
            select(func.count())
            .select_from(self.model)
            .where(*self._criteria(filters))
        )
        if exclude_id is not None:
            stmt = stmt.where(self.model.id != exclude_id)
        with store_errors():
            return await self.db.scalar(stmt) or 0

    def create(self, **fields: Any) -> ModelT:
        """构造新记录（未保存）"""
        return new_record(self.model, **fields)

    async def save(self, record: ModelT) -> ModelT:
        """保存记录"""
        with store_errors():
            self.db.add(record)
            await self.db.flush()
            await self.db.refresh(record)
        return record

    async def update(self, record_id: str, **fields: Any) -> ModelT | None:
        """按 ID 更新字段并返回最新记录，记录不存在时返回 None"""
        record = await self.find_one(id=record_id)
        if record is None:
            return None
        apply_update(record, **fields)
        return await self.save(record)
