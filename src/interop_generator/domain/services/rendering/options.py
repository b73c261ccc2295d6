#!/usr/bin/env python3

"""Rendering options shared across a compilation batch."""

from dataclasses import dataclass

DEFAULT_GENERATOR_NAMESPACE = "InteropGenerator.Generated"


@dataclass(frozen=True)
class CompilerOptions:
    """Options controlling generated code.

    Attributes:
        pointer_size: Platform pointer width in bytes, used for vtable slot offsets
        generator_namespace: Namespace of the batch-level artifacts
        stackalloc_threshold: Largest UTF-8 byte count string overloads encode on the stack
    """

    pointer_size: int = 8
    generator_namespace: str = DEFAULT_GENERATOR_NAMESPACE
    stackalloc_threshold: int = 512

    def __post_init__(self) -> None:
        if self.pointer_size not in (4, 8):
            raise ValueError(f"Unsupported pointer size: {self.pointer_size}")
        if self.stackalloc_threshold < 0:
            raise ValueError("stackalloc_threshold must not be negative")
