from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class GenerationConfig:
    record_count: int = 200
    output_path: str = "vehicles.json"
    manufactured_from: date = date(2018, 1, 1)
    manufactured_to: date = date(2023, 12, 31)
    registered_until: date = date(2024, 12, 31)
    insurance_horizon_years: int = 2
    horse_power_range: tuple[int, int] = (80, 400)
    tank_capacity_range: tuple[int, int] = (10, 100)
    rto_range: tuple[int, int] = (1, 99)
    serial_range: tuple[int, int] = (1000, 9999)
