from __future__ import annotations

from datetime import date, timedelta

from faker import Faker

from registry.config import GenerationConfig
from registry.data_models import (
    EmissionStandard,
    EngineStrokes,
    EngineType,
    FuelType,
    VehicleRecord,
)
from registry.plates import format_vehicle_number
from registry.reference_tables import COMPANIES_BY_TYPE, STATE_CODES, VEHICLE_TYPES


def _date_between(fake: Faker, start: date, end: date) -> date:
    """Uniform calendar date in [start, end], both ends inclusive."""
    return start + timedelta(days=fake.random_int(0, (end - start).days))


def _add_years(day: date, years: int) -> date:
    try:
        return day.replace(year=day.year + years)
    except ValueError:
        # 29 February in a non-leap target year
        return day.replace(year=day.year + years, day=28)


def manufacturing_date(fake: Faker, config: GenerationConfig = GenerationConfig()) -> date:
    return _date_between(fake, config.manufactured_from, config.manufactured_to)


def registration_date_after(
    fake: Faker,
    manufactured: date,
    config: GenerationConfig = GenerationConfig(),
) -> date:
    return _date_between(fake, manufactured, config.registered_until)


def insurance_expiry_from(
    fake: Faker,
    today: date | None = None,
    config: GenerationConfig = GenerationConfig(),
) -> date:
    """Random expiry strictly after ``today`` and at most the insurance horizon ahead."""
    today = today or date.today()
    horizon = _add_years(today, config.insurance_horizon_years)
    return _date_between(fake, today + timedelta(days=1), horizon)


def generate_record(
    fake: Faker,
    *,
    today: date | None = None,
    config: GenerationConfig = GenerationConfig(),
) -> VehicleRecord:
    state = fake.random_element(STATE_CODES)
    vehicle_type = fake.random_element(VEHICLE_TYPES)
    company = fake.random_element(COMPANIES_BY_TYPE[vehicle_type])
    model = fake.vehicle_model()

    engine_type = fake.random_element(tuple(EngineType))
    fuel_type = fake.random_element(tuple(FuelType))
    engine_strokes = fake.random_element(tuple(EngineStrokes))
    emission_standard = fake.random_element(tuple(EmissionStandard))

    manufactured = manufacturing_date(fake, config)
    registered = registration_date_after(fake, manufactured, config)
    insurance_expiry = insurance_expiry_from(fake, today, config)

    horse_power = fake.random_int(*config.horse_power_range)
    tank_capacity = fake.random_int(*config.tank_capacity_range)

    return VehicleRecord(
        vehicle_number=format_vehicle_number(fake, state, config),
        vehicle_type=vehicle_type,
        company=company,
        model=model,
        engine_type=engine_type,
        engine_horse_power=f"{horse_power} HP",
        engine_strokes=engine_strokes,
        date_of_manufacturing=manufactured,
        registration_date=registered,
        insurance_expiry=insurance_expiry,
        fuel_tank_capacity=f"{tank_capacity}L",
        owner_name=fake.name(),
        registration_state=state,
        fuel_type=fuel_type,
        emission_standard=emission_standard,
    )
