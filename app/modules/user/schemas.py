"""用户模块 - Schema"""

from enum import StrEnum

from pydantic import BaseModel, EmailStr

from app.schemas.base import RecordResponse


class UserStatus(StrEnum):
    """用户状态：active 对应 deleted=False，inactive 对应 deleted=True"""

    ACTIVE = "active"
    INACTIVE = "inactive"

    @property
    def deleted(self) -> bool:
        return self is UserStatus.INACTIVE


class UserCreate(BaseModel):
    email: EmailStr
    # 可为空：缺失或 null 交给 Service 层密码策略拒绝（400）
    password: str | None = None


class UserUpdate(BaseModel):
    email: EmailStr | None = None
    password: str | None = None


class UserResponse(RecordResponse):
    """用户响应模型（不含密码）"""

    email: EmailStr
