#!/usr/bin/env python3

"""Shared names and formatting helpers for generated C# code.

Every artifact refers to runtime types and address records through these
helpers so the per-struct code, the resolver registration and the address
records always agree on a symbol.
"""

from ...models.interop import MethodInfo, SignatureInfo, StructInfo

AUTO_GENERATED_HEADER = "// <auto-generated/>"

RUNTIME_NAMESPACE = "InteropGenerator.Runtime"
ADDRESS_TYPE = f"global::{RUNTIME_NAMESPACE}.Address"
THROW_HELPER = f"{RUNTIME_NAMESPACE}.ThrowHelper"
RESOLVER_INSTANCE = f"{RUNTIME_NAMESPACE}.Resolver.GetInstance"

INTEROP_SERVICES = "global::System.Runtime.InteropServices"
COMPILER_SERVICES = "global::System.Runtime.CompilerServices"
THIS_POINTER = f"{COMPILER_SERVICES}.Unsafe.AsPointer(ref this)"

STATIC_VIRTUAL_TABLE = "StaticVirtualTable"

STRUCT_HINT_SUFFIX = ".InteropGenerator.g.cs"
RESOLVER_HINT_NAME = "InteropGenerator.Addresses.g.cs"
FIXED_ARRAY_TYPES_HINT_NAME = "InteropGenerator.FixedSizeArrays.g.cs"


def format_word(word: int) -> str:
    """Render a 64-bit word as a fixed-width hex literal."""
    return f"0x{word:016X}"


def format_ulong_array(words: tuple[int, ...]) -> str:
    return "new ulong[] {" + ", ".join(format_word(word) for word in words) + "}"


def format_byte_array(values: tuple[int, ...]) -> str:
    return "new byte[] {" + ", ".join(str(value) for value in values) + "}"


def get_address_entries(struct_info: StructInfo) -> list[tuple[str, SignatureInfo]]:
    """Address record names and signatures in emission order.

    Member functions first, then static addresses, then the static virtual
    table. Both the Addresses block and the resolver registration iterate
    this list.
    """
    entries = [(mfi.method_info.name, mfi.signature_info) for mfi in struct_info.member_functions]
    entries.extend((sai.method_info.name, sai.signature_info) for sai in struct_info.static_addresses)
    if struct_info.static_virtual_table_signature is not None:
        entries.append((STATIC_VIRTUAL_TABLE, struct_info.static_virtual_table_signature))
    return entries


def function_pointer_type(method_info: MethodInfo, this_type: str | None) -> str:
    """``delegate* unmanaged`` type for a method, with an optional leading this pointer."""
    this_prefix = f"{this_type}*, " if this_type else ""
    return (
        f"delegate* unmanaged <{this_prefix}"
        f"{method_info.get_parameter_type_string_with_trailing_type()}{method_info.return_type}>"
    )


def this_pointer_cast(struct_info: StructInfo) -> str:
    return f"({struct_info.name}*){THIS_POINTER}"


def throw_null_address(struct_info: StructInfo, name: str, signature_info: SignatureInfo) -> str:
    return f'{THROW_HELPER}.ThrowNullAddress("{struct_info.name}.{name}", "{signature_info.signature}");'


def struct_hint_name(struct_info: StructInfo) -> str:
    return f"{struct_info.fully_qualified_metadata_name}{STRUCT_HINT_SUFFIX}"
