#!/usr/bin/env python3

"""Delegate type declarations for member and virtual functions."""

from ...models.interop import MethodInfo, StructInfo
from .naming import INTEROP_SERVICES
from .text_writer import IndentedTextWriter

BOOL_RETURN_MARSHAL = (
    f"[return:{INTEROP_SERVICES}.MarshalAsAttribute({INTEROP_SERVICES}.UnmanagedType.U1)]"
)


def render_delegate_type_for_method(
    struct_name: str, method_info: MethodInfo, writer: IndentedTextWriter
) -> None:
    # native bools are one byte wide
    if method_info.return_type == "bool":
        writer.write_line(BOOL_RETURN_MARSHAL)

    if method_info.is_static:
        params = method_info.get_parameter_types_and_names_string()
    else:
        params = f"{struct_name}* thisPtr"
        if method_info.parameters:
            params += f", {method_info.get_parameter_types_and_names_string()}"

    modifiers = method_info.modifiers.replace(" partial", "").replace(" static", "")
    writer.write_line(f"{modifiers} delegate {method_info.return_type} {method_info.name}({params});")


def render_delegate_types(struct_info: StructInfo, writer: IndentedTextWriter) -> None:
    writer.write_line("public static partial class Delegates")
    with writer.block():
        for mfi in struct_info.member_functions:
            render_delegate_type_for_method(struct_info.name, mfi.method_info, writer)
        for vfi in struct_info.virtual_functions:
            render_delegate_type_for_method(struct_info.name, vfi.method_info, writer)
