from __future__ import annotations

import re

from faker import Faker

from registry.config import GenerationConfig
from registry.data_models import StateCode


VEHICLE_NUMBER_PATTERN = re.compile(
    r"^(?P<state>[A-Z]{2}) (?P<rto>\d{2}) (?P<series>[A-Z]{2}) (?P<serial>\d{4})$"
)


def format_vehicle_number(fake: Faker, state: StateCode, config: GenerationConfig = GenerationConfig()) -> str:
    rto = fake.random_int(*config.rto_range)
    series = fake.random_uppercase_letter() + fake.random_uppercase_letter()
    serial = fake.random_int(*config.serial_range)
    return f"{state.value} {rto:02d} {series} {serial}"


def parse_state_code(vehicle_number: str) -> StateCode:
    match = VEHICLE_NUMBER_PATTERN.match(vehicle_number)
    if match is None:
        raise ValueError(f"malformed vehicle number: {vehicle_number!r}")
    return StateCode(match.group("state"))
