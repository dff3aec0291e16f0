"""Vehicle and car records.

A car is a vehicle record plus a model. Formatting functions operate on
each record; there is no class hierarchy to dispatch through.
"""

from __future__ import annotations

from pydantic import BaseModel


class VehicleRecord(BaseModel):
    """Make and year shared by every vehicle."""

    model_config = {"frozen": True}

    make: str
    year: int


class CarRecord(BaseModel):
    """A vehicle extended with its model name."""

    model_config = {"frozen": True}

    vehicle: VehicleRecord
    model: str

    @classmethod
    def build(cls, make: str, year: int, model: str) -> CarRecord:
        return cls(vehicle=VehicleRecord(make=make, year=year), model=model)


def vehicle_info(vehicle: VehicleRecord) -> str:
    return f"Make: {vehicle.make}, Year: {vehicle.year}"


def car_info(car: CarRecord) -> str:
    return vehicle_info(car.vehicle)


def car_model(car: CarRecord) -> str:
    return f"Model: {car.model}"
