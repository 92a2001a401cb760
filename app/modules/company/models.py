"""企业模块 - ORM 模型"""

from sqlalchemy import Index, String
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base, RecordMixin


class Company(RecordMixin, Base):
    """
    企业模型

    继承自 RecordMixin，获得：
    - id: CUID2 主键
    - created_at, updated_at: 时间戳
    - deleted: 软删除标记
    """

    __tablename__ = "company"

    name: Mapped[str] = mapped_column(String(255))
    # 纳税人/注册号
    document: Mapped[str] = mapped_column(String(64))

    __table_args__ = (
        # 全局唯一索引（软删除后仍不可复用）
        Index("uq_company_name", "name", unique=True),
        Index("uq_company_document", "document", unique=True),
    )
