"""用户模块 - 业务逻辑层"""

from typing import Any

from loguru import logger

from app.core.database import apply_update, mark_deleted
from app.core.security import hash_password

from .exceptions import (
    EmailAlreadyExistsError,
    UserAlreadyDeletedError,
    UserNotFoundError,
)
from .models import User
from .repository import UserRepository
from .schemas import UserCreate, UserResponse, UserStatus, UserUpdate


class UserService:
    """
    用户业务逻辑层

    注意：
    - 邮箱唯一性检查覆盖全部记录（包含已软删除的）
    - 密码只以哈希形式保存，更新时未提供密码则保留原哈希
    """

    def __init__(self, repository: UserRepository) -> None:
        self.repository = repository

    async def get_list(self) -> list[UserResponse]:
        """获取未删除的用户列表"""
        return await self.get_list_by_status(UserStatus.ACTIVE)

    async def get_list_by_status(self, status: UserStatus) -> list[UserResponse]:
        """按状态获取用户列表"""
        users = await self.repository.find(deleted=status.deleted)
        return [UserResponse.model_validate(u) for u in users]

    async def get_one(self, user_id: str) -> UserResponse:
        """获取单个用户（包含已删除）"""
        user = await self._get_existing(user_id)
        return UserResponse.model_validate(user)

    async def create(self, user_in: UserCreate) -> UserResponse:
        """创建用户：先查邮箱，再校验并哈希密码"""
        await self._ensure_email_available(user_in.email)

        user = self.repository.create(
            email=user_in.email,
            password=hash_password(user_in.password),
        )
        user = await self.repository.save(user)
        logger.info("User created: {}", user.id)
        return UserResponse.model_validate(user)

    async def update(self, user_id: str, user_in: UserUpdate) -> UserResponse:
        """
        更新用户

        校验顺序：存在性 -> 邮箱 -> 密码。
        """
        user = await self._get_existing(user_id)

        changes: dict[str, Any] = {}
        if user_in.email is not None:
            await self._ensure_email_available(user_in.email, exclude_id=user_id)
            changes["email"] = user_in.email
        if user_in.password is not None:
            changes["password"] = hash_password(user_in.password)

        user = await self.repository.save(apply_update(user, **changes))
        logger.info("User updated: {}", user_id)
        return UserResponse.model_validate(user)

    async def delete(self, user_id: str) -> None:
        """软删除用户"""
        user = await self._get_existing(user_id)
        if user.deleted:
            raise UserAlreadyDeletedError(user_id)

        await self.repository.save(mark_deleted(user))
        logger.info("User soft-deleted: {}", user_id)

    async def _get_existing(self, user_id: str) -> User:
        user = await self.repository.find_one(id=user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    async def _ensure_email_available(
        self, email: str, *, exclude_id: str | None = None
    ) -> None:
        if await self.repository.count_by_email(email, exclude_id=exclude_id):
            raise EmailAlreadyExistsError(email)
