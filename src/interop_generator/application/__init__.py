#!/usr/bin/env python3

"""Application layer orchestrating domain services."""

from . import generators

__all__ = [
    "generators",
]
