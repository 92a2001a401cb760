"""用户模块 - 路由"""

from typing import Annotated

from fastapi import APIRouter, Path, Query, Request, Response, status

from app.core.ids import ID_PATTERN
from app.schemas.response import ApiResponse

from .dependencies import UserServiceDep
from .schemas import UserCreate, UserResponse, UserStatus, UserUpdate

router = APIRouter()

UserId = Annotated[str, Path(pattern=ID_PATTERN, description="用户 ID")]


@router.get("/", response_model=ApiResponse[list[UserResponse]])
async def list_users(
    service: UserServiceDep,
    user_status: Annotated[
        UserStatus | None,
        Query(alias="status", description="active / inactive，默认 active"),
    ] = None,
) -> ApiResponse[list[UserResponse]]:
    """获取用户列表"""
    if user_status is None:
        users = await service.get_list()
    else:
        users = await service.get_list_by_status(user_status)
    return ApiResponse(data=users)


@router.get("/{user_id}", response_model=ApiResponse[UserResponse])
async def get_user(
    user_id: UserId,
    service: UserServiceDep,
) -> ApiResponse[UserResponse]:
    """获取单个用户"""
    user = await service.get_one(user_id)
    return ApiResponse(data=user)


@router.post(
    "/", response_model=ApiResponse[UserResponse], status_code=status.HTTP_201_CREATED
)
async def create_user(
    user_in: UserCreate,
    request: Request,
    response: Response,
    service: UserServiceDep,
) -> ApiResponse[UserResponse]:
    """创建用户"""
    user = await service.create(user_in)
    response.headers["Location"] = request.url_for("get_user", user_id=user.id).path
    return ApiResponse(data=user)


@router.put("/{user_id}", response_model=ApiResponse[UserResponse])
async def update_user(
    user_id: UserId,
    user_in: UserUpdate,
    service: UserServiceDep,
) -> ApiResponse[UserResponse]:
    """更新用户"""
    user = await service.update(user_id, user_in)
    return ApiResponse(data=user)


@router.delete(
    "/{user_id}", response_model=ApiResponse[None], status_code=status.HTTP_200_OK
)
async def delete_user(
    user_id: UserId,
    service: UserServiceDep,
) -> ApiResponse[None]:
    """删除用户（软删除）"""
    await service.delete(user_id)
    return ApiResponse(data=None, message="User deleted")
