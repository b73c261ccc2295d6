#!/usr/bin/env python3

"""Progress tracking for batch compilation."""

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from time import time

import psutil


class ProgressTracker:
    """
    Track and report compilation progress with timing statistics.

    Counters are shared by worker threads when structs are compiled in
    parallel, so updates go through a lock.
    """

    def __init__(self, logger: logging.Logger):
        """
        Initialize progress tracker.

        Args:
            logger: Logger instance for progress reporting
        """
        self.logger = logger
        self.start_time = time()
        self.struct_count = 0
        self.failed_count = 0
        self.address_count = 0
        self._lock = threading.Lock()

    @contextmanager
    def track_operation(self, operation_name: str) -> Iterator[None]:
        """
        Track a high-level operation with timing.

        Args:
            operation_name: Name of the operation being tracked

        Yields:
            None
        """
        start_time = time()

        self.logger.debug(f"Starting operation: {operation_name}")

        try:
            yield
            elapsed = time() - start_time
            self.logger.debug(f"Completed operation: {operation_name} in {elapsed:.3f}s")
        except Exception as e:
            elapsed = time() - start_time
            self.logger.error(f"Failed operation: {operation_name} after {elapsed:.3f}s: {e}")
            raise

    @contextmanager
    def track_struct(self, struct_name: str, address_count: int) -> Iterator[None]:
        """
        Track compilation of a single struct.

        Args:
            struct_name: Fully qualified name of the struct
            address_count: Number of address records the struct registers

        Yields:
            None
        """
        with self._lock:
            self.struct_count += 1
            index = self.struct_count
        struct_start = time()

        self.logger.debug(f"Compiling struct #{index}: {struct_name} ({address_count} addresses)")

        try:
            yield
            with self._lock:
                self.address_count += address_count
            elapsed = time() - struct_start
            self.logger.debug(f"Struct #{index} {struct_name} compiled in {elapsed:.3f}s")
        except Exception as e:
            with self._lock:
                self.failed_count += 1
            elapsed = time() - struct_start
            self.logger.error(f"Struct #{index} {struct_name} failed after {elapsed:.3f}s: {e}")
            raise

    def report_summary(self) -> None:
        """Report final compilation statistics."""
        total_time = time() - self.start_time
        rate = self.struct_count / total_time if total_time > 0 else 0

        self.logger.info(
            f"Compilation complete: {self.struct_count} structs "
            f"({self.failed_count} failed), {self.address_count} addresses "
            f"in {total_time:.2f}s ({rate:.1f} structs/s)"
        )

    def log_memory_usage(self) -> None:
        """Log resident memory of the current process."""
        memory_mb = psutil.Process().memory_info().rss / 1024 / 1024
        self.logger.debug(f"Memory usage: {memory_mb:.1f} MB")
