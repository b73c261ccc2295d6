#!/usr/bin/env python3

"""Domain services layer."""

from . import encoding, rendering

__all__ = [
    "encoding",
    "rendering",
]
