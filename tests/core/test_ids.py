"""Tests for record id generation."""

import pytest

from app.core.ids import ID_LENGTH, generate_id, is_valid_id


def test_generated_ids_are_unique():
    ids = {generate_id() for _ in range(1000)}
    assert len(ids) == 1000


def test_generated_id_format():
    record_id = generate_id()
    assert len(record_id) == ID_LENGTH
    assert record_id[0].isalpha()
    assert record_id == record_id.lower()
    assert record_id.isalnum()
    assert is_valid_id(record_id)


@pytest.mark.parametrize(
    "value",
    [
        "",
        "abc",
        "1" + "a" * (ID_LENGTH - 1),
        "A" * ID_LENGTH,
        "a" * (ID_LENGTH + 1),
        "a" * (ID_LENGTH - 2) + "-x",
        None,
        42,
    ],
)
def test_is_valid_id_rejects_malformed_values(value):
    assert not is_valid_id(value)
