"""企业模块 - 数据访问层"""

from app.core.repository import Repository

from .models import Company


class CompanyRepository(Repository[Company]):
    model = Company

    async def count_by_name(self, name: str, *, exclude_id: str | None = None) -> int:
        """统计同名企业（包含已删除）"""
        return await self.count(name=name, exclude_id=exclude_id)

    async def count_by_document(
        self, document: str, *, exclude_id: str | None = None
    ) -> int:
        """统计同证件号企业（包含已删除）"""
        return await self.count(document=document, exclude_id=exclude_id)
