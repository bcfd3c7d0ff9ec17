"""Unit tests for identifier generators."""

import pytest

from boxkeeper.domain.value_objects.identifiers import MAX_IDENTIFIER, MIN_IDENTIFIER
from boxkeeper.infrastructure.identifiers import (
    RandomIdentifierGenerator,
    SequenceIdentifierGenerator,
)


@pytest.mark.unit
class TestRandomIdentifierGenerator:
    """Test RandomIdentifierGenerator."""

    def test_values_in_signed_64_bit_range(self):
        generator = RandomIdentifierGenerator()

        values = [generator.next() for _ in range(1000)]

        assert all(MIN_IDENTIFIER <= v <= MAX_IDENTIFIER for v in values)

    def test_values_cover_both_signs(self):
        generator = RandomIdentifierGenerator()

        values = [generator.next() for _ in range(1000)]

        assert any(v < 0 for v in values)
        assert any(v > 0 for v in values)

    def test_values_rarely_repeat(self):
        generator = RandomIdentifierGenerator()

        values = [generator.next() for _ in range(1000)]

        assert len(set(values)) == len(values)


@pytest.mark.unit
class TestSequenceIdentifierGenerator:
    """Test the deterministic generator."""

    def test_two_values_then_repeat_last(self):
        generator = SequenceIdentifierGenerator(1234, 5678)

        assert [generator.next() for _ in range(4)] == [1234, 5678, 5678, 5678]

    def test_single_value_repeats(self):
        generator = SequenceIdentifierGenerator(7)

        assert [generator.next() for _ in range(3)] == [7, 7, 7]

    def test_call_count(self):
        generator = SequenceIdentifierGenerator(1, 2)

        generator.next()
        generator.next()
        generator.next()

        assert generator.call_count == 3
