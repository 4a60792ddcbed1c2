"""
Tests for the pricing component.
"""

from __future__ import annotations

from primer.components.pricing import (
    MostExpensiveInput,
    Product,
    get_most_expensive,
    run_most_expensive,
)


class TestGetMostExpensive:
    def test_empty_returns_none(self) -> None:
        assert get_most_expensive([]) is None

    def test_single_product(self) -> None:
        assert get_most_expensive([Product("a", 1)]) == Product("a", 1)

    def test_first_maximum_wins(self) -> None:
        products = [Product("a", 10), Product("b", 20), Product("c", 20)]
        result = get_most_expensive(products)
        assert result is products[1]

    def test_maximum_at_end(self) -> None:
        products = [Product("a", 1), Product("b", 2), Product("c", 3)]
        assert get_most_expensive(products) == Product("c", 3)

    def test_negative_prices(self) -> None:
        products = [Product("a", -5), Product("b", -1), Product("c", -3)]
        assert get_most_expensive(products) == Product("b", -1)

    def test_does_not_mutate_input(self) -> None:
        products = [Product("b", 2), Product("a", 1)]
        get_most_expensive(products)
        assert products == [Product("b", 2), Product("a", 1)]


class TestRunMostExpensive:
    def test_found(self) -> None:
        out = run_most_expensive(MostExpensiveInput([Product("a", 1), Product("b", 9)]))
        assert out.found
        assert out.product == Product("b", 9)

    def test_absent(self) -> None:
        out = run_most_expensive(MostExpensiveInput([]))
        assert not out.found
        assert out.product is None
        assert out.success
