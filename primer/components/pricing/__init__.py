"""
Pricing component - Selecting the most expensive product.
"""

from .component import get_most_expensive, run, run_most_expensive
from .models import MostExpensiveInput, MostExpensiveOutput, Product

__all__ = [
    "run",
    "run_most_expensive",
    "get_most_expensive",
    "MostExpensiveInput",
    "MostExpensiveOutput",
    "Product",
]
