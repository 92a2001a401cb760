"""业务错误码

- 0: 成功
- 1xxxx: 通用错误
- 2xxxx: 企业模块
- 3xxxx: 用户模块
- 5xxxx: 系统错误
"""

from enum import IntEnum


class ErrorCode(IntEnum):
    # 通用错误
    INVALID_REQUEST = 10000
    INVALID_PARAMETER = 10001
    RESOURCE_NOT_FOUND = 10002
    DUPLICATE_DATA = 10003

    # 企业
    COMPANY_NOT_FOUND = 20001
    COMPANY_ALREADY_DELETED = 20002
    COMPANY_NAME_EXISTS = 20003
    COMPANY_DOCUMENT_EXISTS = 20004

    # 用户
    USER_NOT_FOUND = 30001
    USER_ALREADY_DELETED = 30002
    EMAIL_ALREADY_EXISTS = 30003
    INVALID_PASSWORD = 30004

    # 系统错误
    SYSTEM_ERROR = 50000
    STORE_ERROR = 50001
    SERVICE_UNAVAILABLE = 50003
