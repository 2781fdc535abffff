from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Any

from faker import Faker

from batch.writer import write_batch
from registry.config import GenerationConfig
from registry.data_models import VehicleRecord
from registry.generator import generate_record
from registry.providers import make_faker
from registry.summary import summarize_batch
from registry.validation import check_batch

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BatchResult:
    path: Path
    record_count: int
    summary: dict[str, Any]


def generate_batch(
    fake: Faker,
    count: int | None = None,
    *,
    today: date | None = None,
    config: GenerationConfig = GenerationConfig(),
) -> list[VehicleRecord]:
    if count is None:
        count = config.record_count
    today = today or date.today()
    return [generate_record(fake, today=today, config=config) for _ in range(count)]


def run(
    fake: Faker | None = None,
    *,
    output_path: str | Path | None = None,
    today: date | None = None,
    config: GenerationConfig = GenerationConfig(),
) -> BatchResult:
    if fake is None:
        fake = make_faker()
    target = Path(output_path or config.output_path)

    records = generate_batch(fake, config.record_count, today=today, config=config)
    check_batch(records, config.record_count, config)

    summary = summarize_batch(records)
    logger.info("generated %d vehicle records", summary["total"], extra={"extra_data": summary})

    path = write_batch(records, target)
    return BatchResult(path=path, record_count=len(records), summary=summary)
