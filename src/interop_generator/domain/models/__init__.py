#!/usr/bin/env python3

"""Domain models for the interop generator."""

from . import interop

__all__ = [
    "interop",
]
