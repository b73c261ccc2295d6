#!/usr/bin/env python3

"""Virtual table layout and virtual function dispatch."""

from ...models.interop import StructInfo
from .naming import (
    COMPILER_SERVICES,
    INTEROP_SERVICES,
    STATIC_VIRTUAL_TABLE,
    function_pointer_type,
    this_pointer_cast,
)
from .text_writer import IndentedTextWriter


def render_virtual_table(struct_info: StructInfo, writer: IndentedTextWriter, pointer_size: int) -> None:
    """Render ``<Name>VirtualTable`` and the offset 0 table pointer field.

    Each slot sits at ``index * pointer_size``; the table pointer is the
    struct's first machine word, as in native C++ object layout.
    """
    table_type = f"{struct_info.name}VirtualTable"
    writer.write_line(
        f"[{INTEROP_SERVICES}.StructLayoutAttribute({INTEROP_SERVICES}.LayoutKind.Explicit)]"
    )
    writer.write_line(f"public unsafe partial struct {table_type}")
    with writer.block():
        for vfi in struct_info.virtual_functions:
            pointer_type = function_pointer_type(vfi.method_info, struct_info.name)
            writer.write_line(
                f"[{INTEROP_SERVICES}.FieldOffsetAttribute({vfi.index * pointer_size})] "
                f"public {pointer_type} {vfi.method_info.name};"
            )
    writer.write_line(f"[{INTEROP_SERVICES}.FieldOffsetAttribute(0)] public {table_type}* VirtualTable;")
    if struct_info.static_virtual_table_signature is not None:
        writer.write_line(
            f"public static {table_type}* StaticVirtualTablePointer => "
            f"({table_type}*)Addresses.{STATIC_VIRTUAL_TABLE}.Value;"
        )


def render_virtual_functions(struct_info: StructInfo, writer: IndentedTextWriter) -> None:
    """Render dispatch methods calling through the virtual table.

    Unlike member functions there is no null check: a live object always
    carries a valid table pointer.
    """
    for vfi in struct_info.virtual_functions:
        method = vfi.method_info
        writer.write_line(
            f"[{COMPILER_SERVICES}.MethodImplAttribute({COMPILER_SERVICES}.MethodImplOptions.AggressiveInlining)]"
        )
        param_names = f", {method.get_parameter_names_string()}" if method.parameters else ""
        writer.write_line(
            f"{method.get_declaration_string()} => "
            f"VirtualTable->{method.name}({this_pointer_cast(struct_info)}{param_names});"
        )
