from __future__ import annotations

from typing import Any, Sequence

import pandas as pd

from registry.data_models import VehicleRecord


def summarize_batch(records: Sequence[VehicleRecord]) -> dict[str, Any]:
    """Counts per vehicle type, registration state and fuel type."""
    if not records:
        return {"total": 0, "by_vehicle_type": {}, "by_state": {}, "by_fuel_type": {}}

    df = pd.DataFrame([r.to_dict() for r in records])
    return {
        "total": int(len(df)),
        "by_vehicle_type": {k: int(v) for k, v in df["vehicle_type"].value_counts().sort_index().items()},
        "by_state": {k: int(v) for k, v in df["registration_state"].value_counts().sort_index().items()},
        "by_fuel_type": {k: int(v) for k, v in df["fuel_type"].value_counts().sort_index().items()},
    }
