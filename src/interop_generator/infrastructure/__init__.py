#!/usr/bin/env python3

"""Infrastructure layer for technical concerns."""

from . import config, logging, metadata

__all__ = [
    "config",
    "logging",
    "metadata",
]
