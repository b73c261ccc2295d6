#!/usr/bin/env python3

"""Domain layer containing descriptor models, errors and rendering services."""

from . import errors, models, services

__all__ = [
    "errors",
    "models",
    "services",
]
