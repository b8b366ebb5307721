import pytest
from utils.base_model import ImmutableModel


class Pair(ImmutableModel):
    """Simple two-field value model."""
    first: float
    second: float


class Triple(ImmutableModel):
    """Value model with a different shape."""
    a: float
    b: float
    c: float


class TestImmutableModel:
    """Test suite for ImmutableModel base class."""

    def test_basic_creation(self):
        model = Pair(first=1.0, second=2.0)
        assert model.first == 1.0
        assert model.second == 2.0

    def test_immutability(self):
        model = Pair(first=1.0, second=2.0)

        with pytest.raises(Exception):
            model.first = 3.0

    def test_components_in_declaration_order(self):
        assert Pair(first=1.0, second=2.0).components() == (1.0, 2.0)
        assert Triple(a=3.0, b=2.0, c=1.0).components() == (3.0, 2.0, 1.0)

    def test_is_close_to_compares_matching_fields(self):
        model = Pair(first=1.0, second=2.0)

        assert model.is_close_to(Pair(first=1.0, second=2.0))
        assert not model.is_close_to(Pair(first=1.0, second=1.0))
        assert not model.is_close_to(Pair(first=2.0, second=2.0))

    def test_is_close_to_custom_tolerance(self):
        model = Pair(first=1.0, second=2.0)
        other = Pair(first=1.05, second=2.0)

        assert not model.is_close_to(other)
        assert model.is_close_to(other, tolerance=0.1)

    def test_is_close_to_other_type(self):
        assert not Pair(first=1.0, second=2.0).is_close_to(Triple(a=1.0, b=2.0, c=0.0))

    def test_with_changes_basic(self):
        original = Pair(first=1.0, second=2.0)
        modified = original.with_changes(second=5.0)

        assert original.second == 2.0
        assert modified.second == 5.0
        assert modified.first == 1.0
        assert original is not modified

    def test_with_changes_invalid_field(self):
        model = Pair(first=1.0, second=2.0)

        with pytest.raises(ValueError) as exc_info:
            model.with_changes(nonexistent=1.0)

        assert "Invalid field: nonexistent" in str(exc_info.value)

    def test_chained_with_changes(self):
        result = Pair(first=1.0, second=2.0).with_changes(first=3.0).with_changes(second=4.0)

        assert result.components() == (3.0, 4.0)
