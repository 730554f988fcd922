# backend/tests/unit/core/test_ulid_helper.py
import pytest

from carwash.core.ulid_helper import (
    CONFIRMATION_CODE_ALPHABET,
    generate_confirmation_code,
    generate_ulid,
    is_valid_ulid,
    normalize_confirmation_code,
    parse_ulid,
)


def test_generated_ulids_are_valid_and_unique():
    ids = {generate_ulid() for _ in range(500)}

    assert len(ids) == 500
    assert all(len(value) == 26 and is_valid_ulid(value) for value in ids)


@pytest.mark.parametrize("value", ["", "not-a-ulid", "0" * 25])
def test_invalid_ulids(value):
    assert parse_ulid(value) is None
    assert is_valid_ulid(value) is False


def test_confirmation_codes_use_unambiguous_alphabet():
    code = generate_confirmation_code()

    assert len(code) == 8
    assert set(code) <= set(CONFIRMATION_CODE_ALPHABET)
    assert not set("ILOU") & set(CONFIRMATION_CODE_ALPHABET)


def test_confirmation_code_length_is_configurable():
    assert len(generate_confirmation_code(12)) == 12
    with pytest.raises(ValueError):
        generate_confirmation_code(0)


def test_normalize_confirmation_code_maps_lookalikes():
    assert normalize_confirmation_code(" ab-cd 1o2i ") == "ABCD1021"
    assert normalize_confirmation_code("l0") == "10"
