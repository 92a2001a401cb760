"""用户模块 - 数据访问层"""

from app.core.repository import Repository

from .models import User


class UserRepository(Repository[User]):
    model = User

    async def count_by_email(self, email: str, *, exclude_id: str | None = None) -> int:
        """统计同邮箱用户（包含已删除）"""
        return await self.count(email=email, exclude_id=exclude_id)
