"""
Vehicles component models.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Vehicle:
    """A vehicle identified by make and model year."""

    make: str
    year: int

    def get_info(self) -> str:
        return f"Make: {self.make}, Year: {self.year}"


@dataclass(frozen=True, init=False)
class Car:
    """
    A Vehicle plus a model name.

    Make and year are stored on the inner Vehicle; get_info delegates to it
    unchanged.
    """

    vehicle: Vehicle
    model: str

    def __init__(self, make: str, year: int, model: str) -> None:
        object.__setattr__(self, "vehicle", Vehicle(make, year))
        object.__setattr__(self, "model", model)

    @property
    def make(self) -> str:
        return self.vehicle.make

    @property
    def year(self) -> int:
        return self.vehicle.year

    def get_info(self) -> str:
        return self.vehicle.get_info()

    def get_model(self) -> str:
        return f"Model: {self.model}"
