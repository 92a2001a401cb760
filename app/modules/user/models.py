"""用户模块 - ORM 模型"""

from sqlalchemy import Index, String
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base, RecordMixin


class User(RecordMixin, Base):
    """
    用户模型

    继承自 RecordMixin，获得：
    - id: CUID2 主键
    - created_at, updated_at: 时间戳
    - deleted: 软删除标记
    """

    __tablename__ = "app_user"

    email: Mapped[str] = mapped_column(String(255))
    # 仅保存 bcrypt 哈希
    password: Mapped[str] = mapped_column(String(255))

    __table_args__ = (
        # 全局唯一索引（软删除后仍不可复用）
        Index("uq_app_user_email", "email", unique=True),
    )
