from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import date
from enum import Enum, IntEnum
from typing import Any


class StateCode(str, Enum):
    MP = "MP"
    MH = "MH"
    DL = "DL"
    KA = "KA"
    UP = "UP"
    RJ = "RJ"
    TN = "TN"
    GJ = "GJ"
    PB = "PB"
    CG = "CG"


class VehicleType(str, Enum):
    BIKE = "Bike"
    CAR = "Car"
    TRUCK = "Truck"


class EngineType(str, Enum):
    PETROL = "Petrol"
    DIESEL = "Diesel"
    ELECTRIC = "Electric"


class FuelType(str, Enum):
    PETROL = "Petrol"
    DIESEL = "Diesel"
    ELECTRIC = "Electric"


class EngineStrokes(IntEnum):
    TWO = 2
    FOUR = 4


class EmissionStandard(str, Enum):
    BS_IV = "BS-IV"
    BS_VI = "BS-VI"


_DATE_FIELDS = ("date_of_manufacturing", "registration_date", "insurance_expiry")


@dataclass(frozen=True)
class VehicleRecord:
    vehicle_number: str
    vehicle_type: VehicleType
    company: str
    model: str
    engine_type: EngineType
    engine_horse_power: str
    engine_strokes: EngineStrokes
    date_of_manufacturing: date
    registration_date: date
    insurance_expiry: date
    fuel_tank_capacity: str
    owner_name: str
    registration_state: StateCode
    fuel_type: FuelType
    emission_standard: EmissionStandard

    def to_dict(self) -> dict[str, Any]:
        """Plain, JSON-ready mapping in declaration order."""
        out: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, Enum):
                value = value.value
            elif isinstance(value, date):
                value = value.isoformat()
            out[f.name] = value
        return out

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> VehicleRecord:
        return cls(
            vehicle_number=str(payload["vehicle_number"]),
            vehicle_type=VehicleType(payload["vehicle_type"]),
            company=str(payload["company"]),
            model=str(payload["model"]),
            engine_type=EngineType(payload["engine_type"]),
            engine_horse_power=str(payload["engine_horse_power"]),
            engine_strokes=EngineStrokes(int(payload["engine_strokes"])),
            fuel_tank_capacity=str(payload["fuel_tank_capacity"]),
            owner_name=str(payload["owner_name"]),
            registration_state=StateCode(payload["registration_state"]),
            fuel_type=FuelType(payload["fuel_type"]),
            emission_standard=EmissionStandard(payload["emission_standard"]),
            **{name: date.fromisoformat(payload[name]) for name in _DATE_FIELDS},
        )
