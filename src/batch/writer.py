from __future__ import annotations

import json
import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Sequence

from batch.errors import OutputWriteFailure
from registry.data_models import VehicleRecord

logger = logging.getLogger(__name__)


def render_batch(records: Sequence[VehicleRecord]) -> str:
    return json.dumps([r.to_dict() for r in records], indent=2, ensure_ascii=False) + "\n"


def _output_mode(target: Path) -> int:
    """Mode of the file being replaced, or the umask default for a new one."""
    try:
        return stat.S_IMODE(target.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_batch(records: Sequence[VehicleRecord], path: str | Path) -> Path:
    """Replace ``path`` with the rendered batch.

    The document is written to a temporary sibling and moved into place, so a
    failed run never leaves a truncated file behind. The replaced file keeps
    its permissions; a new file gets the usual umask-derived mode.
    """
    target = Path(path)
    payload = render_batch(records)
    tmp_name: str | None = None
    try:
        mode = _output_mode(target)
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=target.parent,
            prefix=f".{target.name}.",
            suffix=".tmp",
            delete=False,
        ) as fh:
            tmp_name = fh.name
            fh.write(payload)
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, target)
    except OSError as exc:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise OutputWriteFailure(target, exc.strerror or str(exc)) from exc

    logger.info("wrote %d records to %s (%d bytes)", len(records), target, len(payload.encode("utf-8")))
    return target


def load_batch(path: str | Path) -> list[VehicleRecord]:
    with open(path, encoding="utf-8") as fh:
        payload = json.load(fh)
    return [VehicleRecord.from_dict(item) for item in payload]
