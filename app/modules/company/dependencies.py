"""企业模块 - 依赖注入"""

from typing import Annotated

from fastapi import Depends

from app.dependencies import DBSession

from .repository import CompanyRepository
from .service import CompanyService


def get_company_repository(db: DBSession) -> CompanyRepository:
    return CompanyRepository(db)


def get_company_service(
    repository: Annotated[CompanyRepository, Depends(get_company_repository)],
) -> CompanyService:
    return CompanyService(repository)


CompanyServiceDep = Annotated[CompanyService, Depends(get_company_service)]
