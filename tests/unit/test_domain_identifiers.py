"""Unit tests for BoxId / ItemId value objects.

Tests cover:
- Range validation (signed 64-bit)
- Type validation (int only, bool rejected)
- Equality and hashing by kind and value
"""

import pytest

from boxkeeper.domain.value_objects.identifiers import (
    MAX_IDENTIFIER,
    MIN_IDENTIFIER,
    BoxId,
    ItemId,
)


@pytest.mark.unit
class TestIdentifierValidation:
    """Test construction rules."""

    @pytest.mark.parametrize("value", [MIN_IDENTIFIER, -1, 0, 1, MAX_IDENTIFIER])
    def test_accepts_signed_64_bit_values(self, value):
        assert BoxId(value).value == value
        assert ItemId(value).value == value

    @pytest.mark.parametrize("value", [MIN_IDENTIFIER - 1, MAX_IDENTIFIER + 1, 2**64])
    def test_rejects_out_of_range_values(self, value):
        with pytest.raises(ValueError):
            BoxId(value)

    @pytest.mark.parametrize("value", ["1", 1.0, None, True])
    def test_rejects_non_int_values(self, value):
        with pytest.raises(TypeError):
            ItemId(value)

    def test_identifier_is_immutable(self):
        box_id = BoxId(5)

        with pytest.raises(AttributeError):
            box_id.value = 6  # type: ignore[misc]


@pytest.mark.unit
class TestIdentifierEquality:
    """Test value semantics."""

    def test_same_kind_same_value_equal(self):
        assert BoxId(42) == BoxId(42)
        assert hash(BoxId(42)) == hash(BoxId(42))

    def test_different_kinds_never_equal(self):
        assert BoxId(7) != ItemId(7)

    def test_usable_as_dict_keys(self):
        index = {BoxId(1): "box", ItemId(1): "item"}

        assert index[BoxId(1)] == "box"
        assert index[ItemId(1)] == "item"

    def test_int_and_str_conversion(self):
        assert int(ItemId(-12)) == -12
        assert str(BoxId(99)) == "99"
