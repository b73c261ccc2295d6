#!/usr/bin/env python3

"""Struct information model for interop generation."""

from dataclasses import dataclass

from .fixed_size_array_info import FixedSizeArrayInfo
from .function_info import (
    MemberFunctionInfo,
    StaticAddressInfo,
    StringOverloadInfo,
    VirtualFunctionInfo,
)
from .signature_info import SignatureInfo


@dataclass(frozen=True)
class StructInfo:
    """Everything the generator needs to know about one native struct.

    ``hierarchy`` lists the struct itself first followed by each enclosing
    type, so the outermost type is last.
    """

    name: str
    namespace: str
    hierarchy: tuple[str, ...]
    member_functions: tuple[MemberFunctionInfo, ...] = ()
    virtual_functions: tuple[VirtualFunctionInfo, ...] = ()
    static_addresses: tuple[StaticAddressInfo, ...] = ()
    string_overloads: tuple[StringOverloadInfo, ...] = ()
    fixed_size_arrays: tuple[FixedSizeArrayInfo, ...] = ()
    static_virtual_table_signature: SignatureInfo | None = None

    def __post_init__(self) -> None:
        if not self.hierarchy:
            raise ValueError(f"Struct {self.name} must have a non-empty hierarchy")

    def has_signatures(self) -> bool:
        """Whether the struct needs an ``Addresses`` block."""
        return (
            bool(self.member_functions)
            or bool(self.static_addresses)
            or self.static_virtual_table_signature is not None
        )

    def has_virtual_table(self) -> bool:
        return bool(self.virtual_functions)

    @property
    def fully_qualified_metadata_name(self) -> str:
        """CLR metadata name, nested types joined with ``+``."""
        nested = "+".join(reversed(self.hierarchy))
        return f"{self.namespace}.{nested}" if self.namespace else nested

    @property
    def fully_qualified_type_name(self) -> str:
        """C# type name usable from any namespace."""
        namespace = f"{self.namespace}." if self.namespace else ""
        return f"global::{namespace}{'.'.join(reversed(self.hierarchy))}"
