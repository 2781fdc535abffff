import io
import json
import logging

import pytest

from batch.logging_config import configure_logging


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_text_lines_carry_run_id():
    stream = io.StringIO()
    run_id = configure_logging("INFO", "text", stream=stream, run_id="feedbeef0001")

    logging.getLogger("batch.writer").info("wrote %d records", 200)

    line = stream.getvalue().strip()
    assert run_id == "feedbeef0001"
    assert "[batch.writer] run=feedbeef0001 wrote 200 records" in line


def test_json_lines_carry_run_id_and_data():
    stream = io.StringIO()
    configure_logging("INFO", "json", stream=stream, run_id="cafe00000002")

    logging.getLogger("batch.driver").info("generated", extra={"extra_data": {"total": 3}})

    entry = json.loads(stream.getvalue())
    assert entry["run_id"] == "cafe00000002"
    assert entry["logger"] == "batch.driver"
    assert entry["data"] == {"total": 3}


def test_generated_run_id_is_stable_for_the_run():
    stream = io.StringIO()
    run_id = configure_logging("DEBUG", "text", stream=stream)
    log = logging.getLogger("registry")
    log.debug("one")
    log.warning("two")

    lines = stream.getvalue().splitlines()
    assert len(run_id) == 12
    assert len(lines) == 2
    assert all(f"run={run_id} " in line for line in lines)


def test_level_filters_records():
    stream = io.StringIO()
    configure_logging("WARNING", "text", stream=stream)
    logging.getLogger("batch").info("hidden")
    assert stream.getvalue() == ""
