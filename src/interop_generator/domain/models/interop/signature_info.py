#!/usr/bin/env python3

"""Byte signature model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SignatureInfo:
    """A byte pattern identifying a location inside a loaded binary image.

    ``signature`` is a space separated list of two-digit hex bytes and ``??``
    wildcards. ``relative_follow_offsets`` lists byte positions at which a
    4-byte relative displacement operand starts; the resolver follows those
    instead of using the match address directly.
    """

    signature: str
    relative_follow_offsets: tuple[int, ...] = ()
