"""企业模块 - 路由"""

from typing import Annotated

from fastapi import APIRouter, Path, Request, Response, status

from app.core.ids import ID_PATTERN
from app.schemas.response import ApiResponse

from .dependencies import CompanyServiceDep
from .schemas import CompanyCreate, CompanyResponse, CompanyUpdate

router = APIRouter()

CompanyId = Annotated[str, Path(pattern=ID_PATTERN, description="企业 ID")]


@router.get("/", response_model=ApiResponse[list[CompanyResponse]])
async def list_companies(
    service: CompanyServiceDep,
) -> ApiResponse[list[CompanyResponse]]:
    """获取企业列表（不含已删除）"""
    companies = await service.get_list()
    return ApiResponse(data=companies)


@router.get("/{company_id}", response_model=ApiResponse[CompanyResponse])
async def get_company(
    company_id: CompanyId,
    service: CompanyServiceDep,
) -> ApiResponse[CompanyResponse]:
    """获取单个企业"""
    company = await service.get_one(company_id)
    return ApiResponse(data=company)


@router.post(
    "/",
    response_model=ApiResponse[CompanyResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_company(
    company_in: CompanyCreate,
    request: Request,
    response: Response,
    service: CompanyServiceDep,
) -> ApiResponse[CompanyResponse]:
    """创建企业"""
    company = await service.create(company_in)
    response.headers["Location"] = request.url_for(
        "get_company", company_id=company.id
    ).path
    return ApiResponse(data=company)


@router.put("/{company_id}", response_model=ApiResponse[CompanyResponse])
async def update_company(
    company_id: CompanyId,
    company_in: CompanyUpdate,
    service: CompanyServiceDep,
) -> ApiResponse[CompanyResponse]:
    """更新企业"""
    company = await service.update(company_id, company_in)
    return ApiResponse(data=company)


@router.delete(
    "/{company_id}", response_model=ApiResponse[None], status_code=status.HTTP_200_OK
)
async def delete_company(
    company_id: CompanyId,
    service: CompanyServiceDep,
) -> ApiResponse[None]:
    """删除企业（软删除）"""
    await service.delete(company_id)
    return ApiResponse(data=None, message="Company deleted")
