from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from registry.data_models import StateCode, VehicleType


STATE_CODES: tuple[StateCode, ...] = tuple(StateCode)
VEHICLE_TYPES: tuple[VehicleType, ...] = tuple(VehicleType)

COMPANIES_BY_TYPE: Mapping[VehicleType, tuple[str, ...]] = MappingProxyType(
    {
        VehicleType.BIKE: ("Hero", "Bajaj", "TVS"),
        VehicleType.CAR: ("Maruti Suzuki", "Hyundai", "Toyota", "Renault", "Mahindra"),
        VehicleType.TRUCK: ("Tata", "Ashok Leyland", "Eicher"),
    }
)

# Freeform model names; not tied to company or vehicle type.
VEHICLE_MODELS: tuple[str, ...] = (
    "Splendor",
    "Pulsar",
    "Apache",
    "Jupiter",
    "Passion",
    "Swift",
    "Baleno",
    "Creta",
    "Venue",
    "Innova",
    "Fortuner",
    "Kwid",
    "Triber",
    "Scorpio",
    "Thar",
    "XUV700",
    "Ace",
    "Prima",
    "Dost",
    "Boss",
    "Pro 2049",
    "Civic",
    "Corolla",
    "Accord",
    "Camry",
    "Golf",
    "Polo",
    "Focus",
    "Explorer",
    "Model 3",
)
