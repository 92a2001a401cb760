"""Schema 基类与公共字段"""

from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, PlainSerializer

from app.core.timeutils import as_utc, to_iso8601z

# 读入统一为 UTC aware，输出为 ISO8601（Z 后缀）
UTCDateTime = Annotated[
    datetime,
    AfterValidator(as_utc),
    PlainSerializer(to_iso8601z, return_type=str),
]


class BaseSchema(BaseModel):
    """响应 Schema 基类，可直接由 ORM 对象构造"""

    model_config = ConfigDict(from_attributes=True, str_strip_whitespace=True)


class RecordResponse(BaseSchema):
    """所有记录共有的服务端字段"""

    id: str
    created_at: UTCDateTime
    updated_at: UTCDateTime | None = None
    deleted: bool
