"""Tests for domain value objects."""

import pytest

from catalog_api.domain import Money, ProductStatus, ValidationError


class TestMoney:
    """Tests for Money value object."""

    def test_create(self) -> None:
        """Money wraps a non-negative integer amount."""
        money = Money.create(1999)
        assert money.amount == 1999
        assert money.to_int() == 1999

    def test_zero(self) -> None:
        """Zero money can be created."""
        assert Money.zero().amount == 0

    def test_zero_amount_is_allowed(self) -> None:
        assert Money.create(0) == Money.zero()

    def test_negative_amount_raises_error(self) -> None:
        """Negative amounts are rejected."""
        with pytest.raises(ValidationError, match="Money amount must be >= 0"):
            Money.create(-1)

    @pytest.mark.parametrize("amount", [1.5, "100", True, None])
    def test_non_integer_amount_raises_error(self, amount: object) -> None:
        with pytest.raises(ValidationError, match="must be an integer"):
            Money.create(amount)  # type: ignore[arg-type]

    def test_addition(self) -> None:
        """Money amounts can be added."""
        assert Money.create(1000) + Money.create(500) == Money.create(1500)
        assert Money.create(1000).add(Money.zero()) == Money.create(1000)

    def test_scale(self) -> None:
        """Money can be multiplied by a quantity."""
        assert Money.create(250).scale(4) == Money.create(1000)
        assert Money.create(250) * 2 == Money.create(500)
        assert 3 * Money.create(100) == Money.create(300)

    def test_scale_by_zero(self) -> None:
        assert Money.create(250).scale(0) == Money.zero()

    def test_scale_negative_raises_error(self) -> None:
        with pytest.raises(ValidationError, match="Quantity must be >= 0"):
            Money.create(250).scale(-1)

    def test_ordering(self) -> None:
        """Money values compare by amount."""
        prices = [Money.create(300), Money.create(100), Money.create(200)]
        assert min(prices) == Money.create(100)
        assert max(prices) == Money.create(300)

    def test_immutable(self) -> None:
        money = Money.create(100)
        with pytest.raises(AttributeError):
            money.amount = 200  # type: ignore[misc]

    def test_str(self) -> None:
        assert str(Money.create(1200)) == "1200"


class TestProductStatus:
    """Tests for ProductStatus."""

    def test_values(self) -> None:
        assert [s.value for s in ProductStatus] == ["draft", "published", "archived"]

    def test_from_string(self) -> None:
        assert ProductStatus("published") is ProductStatus.PUBLISHED
