from datetime import date

from registry.generator import generate_record
from registry.providers import make_faker
from registry.summary import summarize_batch


def test_summary_counts_add_up():
    fake = make_faker(seed=8)
    records = [generate_record(fake, today=date(2026, 1, 1)) for _ in range(60)]
    summary = summarize_batch(records)
    assert summary["total"] == 60
    assert sum(summary["by_vehicle_type"].values()) == 60
    assert sum(summary["by_state"].values()) == 60
    assert sum(summary["by_fuel_type"].values()) == 60
    assert set(summary["by_vehicle_type"]) <= {"Bike", "Car", "Truck"}


def test_summary_of_empty_batch():
    assert summarize_batch([])["total"] == 0
