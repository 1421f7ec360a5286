"""Multi-driver logging example.

Shows a console at INFO, a JSON file at WARNING and a text file at DEBUG
sharing one logger, plus a transaction and a stdlib logging bridge.

Run with:
    python examples/multi_driver_example.py
"""

import logging
import tempfile
from pathlib import Path

from fanlog import FanlogHandler, Level, Logger, create
from fanlog.adapters.drivers import ConsoleDriver


def main() -> None:
    log_dir = Path(tempfile.mkdtemp(prefix="fanlog-example-"))
    json_path = log_dir / "app.json"
    text_path = log_dir / "app.log"

    logger = Logger(
        ConsoleDriver(min_level=Level.INFO),
        create("json_file", {"file_path": str(json_path), "min_level": "warning"}),
        create("text_file", {"file_path": str(text_path)}),
    )

    with logger:
        logger.debug("This debug message only goes to the text file")
        logger.info("This info message goes to console and text file")
        logger.warning("This warning goes to all drivers", {"source": "example"})
        logger.error("This error goes to all drivers", {"code": "500"})

        tx = logger.transaction("request-123")
        tx.info("Processing request")
        tx.info("Executing database query", {"table": "users"})
        tx.warning("Slow query detected", {"duration_ms": "150"})

        # Records from the standard logging module reach the same drivers
        stdlib_logger = logging.getLogger("example.thirdparty")
        stdlib_logger.addHandler(FanlogHandler(logger))
        stdlib_logger.setLevel(logging.INFO)
        stdlib_logger.warning("Connection pool exhausted", extra={"pool": "db"})

    print(f"\nLogs written to {json_path} and {text_path}")


if __name__ == "__main__":
    main()
