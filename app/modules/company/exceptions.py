"""企业模块 - 异常"""

from app.core.error_codes import ErrorCode
from app.core.exceptions import AlreadyDeletedError, DuplicateDataError, NotFoundError


class CompanyNotFoundError(NotFoundError):
    """企业不存在"""

    def __init__(self, company_id: str) -> None:
        super().__init__(
            code=ErrorCode.COMPANY_NOT_FOUND,
            message=f"No company found with the id: {company_id}",
            detail={"company_id": company_id},
        )


class CompanyAlreadyDeletedError(AlreadyDeletedError):
    """企业已被删除"""

    def __init__(self, company_id: str) -> None:
        super().__init__(
            code=ErrorCode.COMPANY_ALREADY_DELETED,
            message="Company is already deleted",
            detail={"company_id": company_id},
        )


class CompanyNameExistsError(DuplicateDataError):
    """企业名称已存在"""

    def __init__(self, name: str) -> None:
        super().__init__(
            code=ErrorCode.COMPANY_NAME_EXISTS,
            message=f"A company with the name '{name}' already exists",
            detail={"name": name},
        )


class CompanyDocumentExistsError(DuplicateDataError):
    """企业证件号已存在"""

    def __init__(self, document: str) -> None:
        super().__init__(
            code=ErrorCode.COMPANY_DOCUMENT_EXISTS,
            message=f"A company with the document '{document}' already exists",
            detail={"document": document},
        )
