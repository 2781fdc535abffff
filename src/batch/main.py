from __future__ import annotations

import logging

from batch.driver import run
from batch.errors import OutputWriteFailure
from batch.logging_config import configure_logging
from batch.settings import RuntimeSettings

logger = logging.getLogger(__name__)


def main() -> None:
    settings = RuntimeSettings()
    run_id = configure_logging(settings.log_level, settings.log_format)
    logger.debug("starting vehicle batch run %s", run_id)

    try:
        result = run()
    except OutputWriteFailure as exc:
        logger.error("vehicle batch not written: %s", exc)
        raise SystemExit(str(exc)) from exc

    print(f"✅ {result.record_count} vehicle records generated in {result.path}")


if __name__ == "__main__":
    main()
