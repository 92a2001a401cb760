"""Tests for company validation and soft-delete lifecycle."""

import pytest

from app.core.exceptions import AlreadyDeletedError, DuplicateDataError, NotFoundError
from app.core.ids import generate_id, is_valid_id
from app.modules.company.exceptions import (
    CompanyAlreadyDeletedError,
    CompanyDocumentExistsError,
    CompanyNameExistsError,
    CompanyNotFoundError,
)
from app.modules.company.schemas import CompanyCreate, CompanyUpdate


async def _create(service, name="Sony S/A", document="1234567890"):
    return await service.create(CompanyCreate(name=name, document=document))


async def test_create_assigns_server_side_fields(company_service):
    company = await _create(company_service)

    assert is_valid_id(company.id)
    assert company.name == "Sony S/A"
    assert company.document == "1234567890"
    assert company.deleted is False
    assert company.updated_at is None
    assert company.created_at.tzinfo is not None


async def test_create_rejects_duplicate_name(company_service):
    await _create(company_service)

    with pytest.raises(CompanyNameExistsError) as exc_info:
        await _create(company_service, document="other")
    assert isinstance(exc_info.value, DuplicateDataError)
    assert exc_info.value.status_code == 400


async def test_create_rejects_duplicate_document(company_service):
    await _create(company_service)

    with pytest.raises(CompanyDocumentExistsError):
        await _create(company_service, name="Other")


async def test_create_checks_name_before_document(company_service):
    await _create(company_service)

    with pytest.raises(CompanyNameExistsError):
        await _create(company_service)


async def test_create_rejects_values_of_soft_deleted_company(company_service):
    company = await _create(company_service)
    await company_service.delete(company.id)

    with pytest.raises(CompanyNameExistsError):
        await _create(company_service, document="other")
    with pytest.raises(CompanyDocumentExistsError):
        await _create(company_service, name="Other")


async def test_get_list_excludes_deleted(company_service):
    kept = await _create(company_service)
    removed = await _create(company_service, name="Collins - Huel", document="411")
    await company_service.delete(removed.id)

    companies = await company_service.get_list()

    assert [c.id for c in companies] == [kept.id]


async def test_get_one(company_service):
    company = await _create(company_service)

    found = await company_service.get_one(company.id)

    assert found == company


async def test_get_one_unknown_id(company_service):
    with pytest.raises(CompanyNotFoundError):
        await company_service.get_one(generate_id())


async def test_get_one_returns_soft_deleted_company(company_service):
    company = await _create(company_service)
    await company_service.delete(company.id)

    found = await company_service.get_one(company.id)

    assert found.deleted is True


async def test_update_replaces_fields_and_refreshes_updated_at(company_service):
    company = await _create(company_service)

    updated = await company_service.update(
        company.id, CompanyUpdate(name="Microsoft S/A", document="756348694")
    )

    assert updated.id == company.id
    assert updated.name == "Microsoft S/A"
    assert updated.document == "756348694"
    assert updated.created_at == company.created_at
    assert updated.updated_at >= company.created_at


async def test_update_twice_keeps_updated_at_monotonic(company_service):
    company = await _create(company_service)
    first = await company_service.update(
        company.id, CompanyUpdate(name="A", document="1")
    )
    second = await company_service.update(
        company.id, CompanyUpdate(name="B", document="2")
    )

    assert second.updated_at >= first.updated_at


async def test_update_keeping_own_values_is_allowed(company_service):
    company = await _create(company_service)

    updated = await company_service.update(
        company.id, CompanyUpdate(name=company.name, document=company.document)
    )

    assert updated.name == company.name


async def test_update_rejects_name_of_another_company(company_service):
    await _create(company_service)
    other = await _create(company_service, name="Other", document="2")

    with pytest.raises(CompanyNameExistsError):
        await company_service.update(
            other.id, CompanyUpdate(name="Sony S/A", document="2")
        )


async def test_update_rejects_document_of_another_company(company_service):
    await _create(company_service)
    other = await _create(company_service, name="Other", document="2")

    with pytest.raises(CompanyDocumentExistsError):
        await company_service.update(
            other.id, CompanyUpdate(name="Other", document="1234567890")
        )


async def test_update_checks_duplicates_before_existence(company_service):
    await _create(company_service)

    with pytest.raises(CompanyNameExistsError):
        await company_service.update(
            generate_id(), CompanyUpdate(name="Sony S/A", document="new")
        )


async def test_update_unknown_id(company_service):
    with pytest.raises(CompanyNotFoundError):
        await company_service.update(
            generate_id(), CompanyUpdate(name="New", document="new")
        )


async def test_delete_marks_company_deleted(company_service, company_repository):
    company = await _create(company_service)

    await company_service.delete(company.id)

    stored = await company_repository.find_one(id=company.id)
    assert stored.deleted is True
    assert stored.updated_at is not None


async def test_delete_twice_fails(company_service):
    company = await _create(company_service)
    await company_service.delete(company.id)

    with pytest.raises(CompanyAlreadyDeletedError) as exc_info:
        await company_service.delete(company.id)
    assert isinstance(exc_info.value, AlreadyDeletedError)
    assert isinstance(exc_info.value, NotFoundError)
    assert exc_info.value.status_code == 404


async def test_delete_unknown_id(company_service):
    with pytest.raises(CompanyNotFoundError):
        await company_service.delete(generate_id())
