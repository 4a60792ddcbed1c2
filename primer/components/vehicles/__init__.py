"""
Vehicles component - Vehicle and Car entities.

Car composes a Vehicle rather than subclassing it; both satisfy InfoProvider.
"""

from .component import describe
from .models import Car, Vehicle
from .ports import InfoProvider

__all__ = [
    "Car",
    "InfoProvider",
    "Vehicle",
    "describe",
]
