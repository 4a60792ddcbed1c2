"""
Pricing component - Selecting the most expensive product.

Invariants:
- Single pass, one comparison per element
- Strict '>' so the first of several equal maxima wins
- Empty input yields None, not an error
"""

from __future__ import annotations

from collections.abc import Sequence

from .models import MostExpensiveInput, MostExpensiveOutput, Product


def get_most_expensive(products: Sequence[Product]) -> Product | None:
    """Return the highest-priced product, or None if there are none."""
    if not products:
        return None

    best = products[0]
    for product in products[1:]:
        if product.price > best.price:
            best = product
    return best


def run_most_expensive(inp: MostExpensiveInput) -> MostExpensiveOutput:
    """Select the most expensive product carried by inp."""
    product = get_most_expensive(inp.products)
    return MostExpensiveOutput(product=product, found=product is not None)


def run(inp: MostExpensiveInput) -> MostExpensiveOutput:
    """Main entry point for the pricing component."""
    return run_most_expensive(inp)
