from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Product:
    name: str
    price: float


@dataclass(frozen=True)
class MostExpensiveInput:
    """Input for selecting the most expensive product."""

    products: Sequence[Product]


@dataclass(frozen=True)
class MostExpensiveOutput:
    """
    Output for most-expensive selection.

    product is None (and found is False) when there were no products.
    """

    product: Product | None
    found: bool
    success: bool = True
