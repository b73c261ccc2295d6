#!/usr/bin/env python3

"""Member function pointers and null-checked forwarding bodies."""

from ...models.interop import StructInfo
from .naming import function_pointer_type, this_pointer_cast, throw_null_address
from .text_writer import IndentedTextWriter


def render_member_functions(struct_info: StructInfo, writer: IndentedTextWriter) -> None:
    """Render ``MemberFunctionPointers`` and one forwarding method per function.

    Each body throws through the runtime helper when the resolver has not
    populated the address, otherwise calls the native function and returns
    its result.
    """
    writer.write_line("public unsafe static class MemberFunctionPointers")
    with writer.block():
        for mfi in struct_info.member_functions:
            method = mfi.method_info
            this_type = None if method.is_static else struct_info.name
            pointer_type = function_pointer_type(method, this_type)
            writer.write_line(
                f"public static {pointer_type} {method.name} => "
                f"({pointer_type}) {struct_info.name}.Addresses.{method.name}.Value;"
            )

    for mfi in struct_info.member_functions:
        method = mfi.method_info
        writer.write_line(method.get_declaration_string())
        with writer.block():
            writer.write_line(f"if (MemberFunctionPointers.{method.name} is null)")
            with writer.block():
                writer.write_line(throw_null_address(struct_info, method.name, mfi.signature_info))
            if method.is_static:
                arguments = method.get_parameter_names_string()
            else:
                arguments = this_pointer_cast(struct_info)
                if method.parameters:
                    arguments += f", {method.get_parameter_names_string()}"
            writer.write_line(
                f"{method.get_return_string()}MemberFunctionPointers.{method.name}({arguments});"
            )
