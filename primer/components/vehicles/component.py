from __future__ import annotations

from .models import Car, Vehicle


def describe(vehicle: Vehicle | Car) -> str:
    """Join every accessor the vehicle offers into one line."""
    if isinstance(vehicle, Car):
        return f"{vehicle.get_info()}, {vehicle.get_model()}"
    return vehicle.get_info()
