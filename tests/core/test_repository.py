"""Tests for the generic store adapter."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from app.core.error_codes import ErrorCode
from app.core.exceptions import DuplicateDataError, NotFoundError, StoreError
from app.core.ids import generate_id
from app.core.repository import store_errors
from app.modules.company.repository import CompanyRepository


async def test_create_returns_unsaved_record(company_repository):
    company = company_repository.create(name="Sony S/A", document="1")

    assert company.deleted is False
    assert await company_repository.count() == 0


async def test_save_and_find(company_repository):
    saved = await company_repository.save(
        company_repository.create(name="Sony S/A", document="1")
    )

    found = await company_repository.find_one(id=saved.id)
    assert found is not None
    assert found.name == "Sony S/A"
    assert await company_repository.find_one(id=generate_id()) is None


async def test_find_filters_by_field_equality(company_repository):
    first = await company_repository.save(
        company_repository.create(name="Sony S/A", document="1")
    )
    await company_repository.save(
        company_repository.create(name="Collins - Huel", document="2")
    )
    first.deleted = True
    await company_repository.save(first)

    active = await company_repository.find(deleted=False)
    deleted = await company_repository.find(deleted=True)

    assert [c.name for c in active] == ["Collins - Huel"]
    assert [c.name for c in deleted] == ["Sony S/A"]
    assert len(await company_repository.find()) == 2


async def test_count_with_exclude_id(company_repository):
    saved = await company_repository.save(
        company_repository.create(name="Sony S/A", document="1")
    )

    assert await company_repository.count(name="Sony S/A") == 1
    assert await company_repository.count(name="Sony S/A", exclude_id=saved.id) == 0
    assert await company_repository.count(name="Other") == 0


async def test_update_refreshes_record(company_repository):
    saved = await company_repository.save(
        company_repository.create(name="Sony S/A", document="1")
    )

    updated = await company_repository.update(saved.id, document="2")

    assert updated is not None
    assert updated.document == "2"
    assert updated.updated_at is not None


async def test_update_unknown_id_returns_none(company_repository):
    assert await company_repository.update(generate_id(), name="x") is None


async def test_unique_constraint_becomes_duplicate_data(company_repository):
    await company_repository.save(
        company_repository.create(name="Sony S/A", document="1")
    )

    with pytest.raises(DuplicateDataError) as exc_info:
        await company_repository.save(
            company_repository.create(name="Sony S/A", document="2")
        )
    assert exc_info.value.code == ErrorCode.DUPLICATE_DATA
    assert exc_info.value.message == "Record violates a unique constraint"
    assert exc_info.value.detail is None


async def test_other_store_failures_are_wrapped_preserving_message():
    db = MagicMock()
    db.scalar = AsyncMock(
        side_effect=OperationalError("SELECT 1", {}, Exception("connection lost"))
    )
    repository = CompanyRepository(db)

    with pytest.raises(StoreError) as exc_info:
        await repository.count(name="Sony S/A")
    assert "connection lost" in exc_info.value.message
    assert exc_info.value.status_code == 500


def test_domain_errors_pass_through_unwrapped():
    error = NotFoundError()
    with pytest.raises(NotFoundError) as exc_info:
        with store_errors():
            raise error
    assert exc_info.value is error
