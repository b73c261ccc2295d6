#!/usr/bin/env python3

"""Exceptions raised while compiling interop metadata."""


class InteropGeneratorError(Exception):
    """Base class for all generator errors."""


class MalformedSignatureError(InteropGeneratorError, ValueError):
    """A signature token is neither a two-digit hex byte nor a wildcard."""

    def __init__(self, signature: str, position: int, token: str, reason: str | None = None):
        self.signature = signature
        self.position = position
        self.token = token
        detail = reason or f"invalid token {token!r} at position {position}"
        super().__init__(f"Malformed signature '{signature}': {detail}")


class CompilationCancelledError(InteropGeneratorError):
    """Compilation was aborted through the cancellation signal."""


class MetadataError(InteropGeneratorError):
    """The metadata document could not be read or failed schema validation."""
