from __future__ import annotations

import re
from typing import Sequence

from registry.config import GenerationConfig
from registry.data_models import VehicleRecord
from registry.plates import parse_state_code
from registry.reference_tables import COMPANIES_BY_TYPE

_HORSE_POWER_RE = re.compile(r"^(\d+) HP$")
_TANK_RE = re.compile(r"^(\d+)L$")


class RecordInvariantError(ValueError):
    pass


def _in_range(pattern: re.Pattern[str], text: str, bounds: tuple[int, int]) -> bool:
    match = pattern.match(text)
    if match is None:
        return False
    low, high = bounds
    return low <= int(match.group(1)) <= high


def record_violations(record: VehicleRecord, config: GenerationConfig = GenerationConfig()) -> list[str]:
    problems: list[str] = []

    try:
        plate_state = parse_state_code(record.vehicle_number)
    except ValueError as exc:
        problems.append(str(exc))
    else:
        if plate_state != record.registration_state:
            problems.append(
                f"state {record.registration_state.value} does not match plate {record.vehicle_number}"
            )

    if record.company not in COMPANIES_BY_TYPE[record.vehicle_type]:
        problems.append(f"company {record.company!r} is not a {record.vehicle_type.value} maker")

    if not config.manufactured_from <= record.date_of_manufacturing <= config.manufactured_to:
        problems.append(f"manufactured {record.date_of_manufacturing} outside window")
    if record.registration_date < record.date_of_manufacturing:
        problems.append(
            f"registered {record.registration_date} before manufacture {record.date_of_manufacturing}"
        )
    if record.registration_date > config.registered_until:
        problems.append(f"registered {record.registration_date} after {config.registered_until}")

    if not _in_range(_HORSE_POWER_RE, record.engine_horse_power, config.horse_power_range):
        problems.append(f"bad horse power {record.engine_horse_power!r}")
    if not _in_range(_TANK_RE, record.fuel_tank_capacity, config.tank_capacity_range):
        problems.append(f"bad tank capacity {record.fuel_tank_capacity!r}")

    return problems


def check_batch(
    records: Sequence[VehicleRecord],
    expected_count: int,
    config: GenerationConfig = GenerationConfig(),
    max_reported: int = 5,
) -> None:
    if len(records) != expected_count:
        raise RecordInvariantError(f"expected {expected_count} records, got {len(records)}")

    reported: list[str] = []
    for idx, record in enumerate(records):
        for problem in record_violations(record, config):
            reported.append(f"record {idx}: {problem}")
        if len(reported) >= max_reported:
            break
    if reported:
        raise RecordInvariantError("; ".join(reported[:max_reported]))
