#!/usr/bin/env python3

"""Metadata document loading."""

from .metadata_loader import METADATA_SCHEMA, load_metadata, parse_metadata, parse_struct

__all__ = [
    "METADATA_SCHEMA",
    "load_metadata",
    "parse_metadata",
    "parse_struct",
]
