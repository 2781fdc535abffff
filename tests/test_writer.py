import json
import os
import stat
from datetime import date

import pytest

from batch.errors import OutputWriteFailure
from batch.writer import load_batch, render_batch, write_batch
from registry.generator import generate_record
from registry.providers import make_faker


@pytest.fixture
def records():
    fake = make_faker(seed=13)
    return [generate_record(fake, today=date(2026, 10, 19)) for _ in range(10)]


def test_render_batch_is_pretty_printed(records):
    text = render_batch(records)
    assert text.startswith("[\n  {\n    \"vehicle_number\": ")
    assert text.endswith("]\n")
    assert len(json.loads(text)) == 10


def test_write_batch_replaces_existing_file(tmp_path, records):
    target = tmp_path / "vehicles.json"
    target.write_text("stale content that is much longer than nothing" * 1000, encoding="utf-8")

    assert write_batch(records, target) == target

    payload = json.loads(target.read_text(encoding="utf-8"))
    assert len(payload) == 10
    assert list(payload[0])[0] == "vehicle_number"
    assert list(payload[0])[-1] == "emission_standard"
    assert [p.name for p in tmp_path.iterdir()] == ["vehicles.json"]


def test_load_batch_reads_back_records(tmp_path, records):
    target = write_batch(records, tmp_path / "out.json")
    assert load_batch(target) == records


def test_missing_directory_raises_output_write_failure(tmp_path, records):
    target = tmp_path / "missing" / "vehicles.json"
    with pytest.raises(OutputWriteFailure) as excinfo:
        write_batch(records, target)
    assert excinfo.value.path == target
    assert isinstance(excinfo.value.__cause__, OSError)
    assert not target.exists()


def test_failed_replace_leaves_no_partial_file(tmp_path, records):
    target = tmp_path / "vehicles.json"
    target.mkdir()
    with pytest.raises(OutputWriteFailure, match="could not write"):
        write_batch(records, target)
    assert [p.name for p in tmp_path.iterdir()] == ["vehicles.json"]
    assert target.is_dir()


@pytest.fixture
def umask_022():
    previous = os.umask(0o022)
    yield
    os.umask(previous)


@pytest.mark.skipif(os.name != "posix", reason="POSIX permission bits")
def test_new_file_gets_umask_default_mode(tmp_path, records, umask_022):
    target = write_batch(records, tmp_path / "vehicles.json")
    assert stat.S_IMODE(target.stat().st_mode) == 0o644


@pytest.mark.skipif(os.name != "posix", reason="POSIX permission bits")
def test_overwrite_keeps_existing_mode(tmp_path, records, umask_022):
    target = tmp_path / "vehicles.json"
    target.write_text("[]\n", encoding="utf-8")
    os.chmod(target, 0o640)

    write_batch(records, target)

    assert stat.S_IMODE(target.stat().st_mode) == 0o640
    assert len(json.loads(target.read_text(encoding="utf-8"))) == 10
