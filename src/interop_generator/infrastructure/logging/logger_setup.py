#!/usr/bin/env python3

"""Console and file logging for generator runs."""

import logging
import sys
from datetime import datetime
from pathlib import Path

CONSOLE_FORMAT = "%(levelname)s: %(message)s"
VERBOSE_CONSOLE_FORMAT = "%(levelname)s [%(name)s]: %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(threadName)s - %(message)s"


class LoggerSetup:
    """Owns the root logger handlers for one generator run."""

    _initialized = False
    _log_file_path: Path | None = None
    _handlers: list[logging.Handler] = []

    @classmethod
    def initialize(cls, log_dir: Path, verbose: bool = False) -> None:
        """
        Attach a console handler and a timestamped log file to the root logger.

        Calling this again is a no-op until ``reset`` is called.

        Args:
            log_dir: Directory receiving ``interop_generator_<timestamp>.log``
            verbose: DEBUG on the console (with logger names) instead of INFO
        """
        if cls._initialized:
            return

        log_dir.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        cls._log_file_path = log_dir / f"interop_generator_{timestamp}.log"

        root_logger = logging.getLogger()
        root_logger.setLevel(logging.DEBUG)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
        console_handler.setFormatter(
            logging.Formatter(VERBOSE_CONSOLE_FORMAT if verbose else CONSOLE_FORMAT)
        )

        # the file always records DEBUG, including worker thread names
        file_handler = logging.FileHandler(cls._log_file_path, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

        cls._handlers = [console_handler, file_handler]
        for handler in cls._handlers:
            root_logger.addHandler(handler)

        cls._initialized = True

        logger = logging.getLogger(__name__)
        logger.info(f"Logging initialized. Log file: {cls._log_file_path}")
        logger.debug(f"Verbose mode: {verbose}")

    @classmethod
    def reset(cls) -> None:
        """Detach and close the handlers installed by ``initialize``."""
        root_logger = logging.getLogger()
        for handler in cls._handlers:
            root_logger.removeHandler(handler)
            handler.close()
        cls._handlers = []
        cls._log_file_path = None
        cls._initialized = False

    @classmethod
    def get_log_file_path(cls) -> Path | None:
        return cls._log_file_path
