"""企业模块 - 业务逻辑层"""

from loguru import logger

from app.core.database import mark_deleted

from .exceptions import (
    CompanyAlreadyDeletedError,
    CompanyDocumentExistsError,
    CompanyNameExistsError,
    CompanyNotFoundError,
)
from .models import Company
from .repository import CompanyRepository
from .schemas import CompanyCreate, CompanyResponse, CompanyUpdate


class CompanyService:
    """
    企业业务逻辑层

    注意：
    - 唯一性检查覆盖全部记录（包含已软删除的），删除后名称与证件号仍不可复用
    - 校验失败在任何写入之前抛出
    """

    def __init__(self, repository: CompanyRepository) -> None:
        self.repository = repository

    async def get_list(self) -> list[CompanyResponse]:
        """获取未删除的企业列表"""
        companies = await self.repository.find(deleted=False)
        return [CompanyResponse.model_validate(c) for c in companies]

    async def get_one(self, company_id: str) -> CompanyResponse:
        """获取单个企业（包含已删除）"""
        company = await self._get_existing(company_id)
        return CompanyResponse.model_validate(company)

    async def create(self, company_in: CompanyCreate) -> CompanyResponse:
        """创建企业：先查名称，再查证件号"""
        await self._ensure_name_available(company_in.name)
        await self._ensure_document_available(company_in.document)

        company = self.repository.create(
            name=company_in.name,
            document=company_in.document,
        )
        company = await self.repository.save(company)
        logger.info("Company created: {}", company.id)
        return CompanyResponse.model_validate(company)

    async def update(
        self, company_id: str, company_in: CompanyUpdate
    ) -> CompanyResponse:
        """
        更新企业

        校验顺序：名称 -> 证件号 -> 存在性。
        因此目标 ID 不存在时也可能先返回重复数据错误。
        """
        await self._ensure_name_available(company_in.name, exclude_id=company_id)
        await self._ensure_document_available(
            company_in.document, exclude_id=company_id
        )

        company = await self.repository.update(
            company_id,
            name=company_in.name,
            document=company_in.document,
        )
        if company is None:
            raise CompanyNotFoundError(company_id)
        logger.info("Company updated: {}", company_id)
        return CompanyResponse.model_validate(company)

    async def delete(self, company_id: str) -> None:
        """软删除企业"""
        company = await self._get_existing(company_id)
        if company.deleted:
            raise CompanyAlreadyDeletedError(company_id)

        await self.repository.save(mark_deleted(company))
        logger.info("Company soft-deleted: {}", company_id)

    async def _get_existing(self, company_id: str) -> Company:
        company = await self.repository.find_one(id=company_id)
        if company is None:
            raise CompanyNotFoundError(company_id)
        return company

    async def _ensure_name_available(
        self, name: str, *, exclude_id: str | None = None
    ) -> None:
        if await self.repository.count_by_name(name, exclude_id=exclude_id):
            raise CompanyNameExistsError(name)

    async def _ensure_document_available(
        self, document: str, *, exclude_id: str | None = None
    ) -> None:
        if await self.repository.count_by_document(document, exclude_id=exclude_id):
            raise CompanyDocumentExistsError(document)
