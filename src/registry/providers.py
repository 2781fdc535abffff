from __future__ import annotations

from faker import Faker
from faker.providers import BaseProvider

from registry.reference_tables import VEHICLE_MODELS


class VehicleProvider(BaseProvider):
    def vehicle_model(self) -> str:
        return self.random_element(VEHICLE_MODELS)


def make_faker(seed: int | None = None, locale: str = "en_IN") -> Faker:
    """Build a Faker instance carrying the vehicle provider.

    Every generation routine takes this object explicitly; pass a seed to get
    a reproducible stream of records.
    """
    fake = Faker(locale)
    fake.add_provider(VehicleProvider)
    if seed is not None:
        fake.seed_instance(seed)
    return fake
