"""企业模块 - Schema"""

from pydantic import BaseModel, Field

from app.schemas.base import RecordResponse


class CompanyBase(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    document: str = Field(min_length=1, max_length=64)


class CompanyCreate(CompanyBase):
    pass


class CompanyUpdate(CompanyBase):
    """整体替换 name 与 document"""


class CompanyResponse(RecordResponse):
    name: str
    document: str
