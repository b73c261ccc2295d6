#!/usr/bin/env python3

"""Static address pointers and their null-checked accessors."""

from ...models.interop import StructInfo
from .naming import throw_null_address
from .text_writer import IndentedTextWriter


def render_static_addresses(struct_info: StructInfo, writer: IndentedTextWriter) -> None:
    """Render ``StaticAddressPointers`` and an accessor per static address.

    A pointer-flagged address holds a pointer to the value, so its holder is
    ``pp<Name>`` with one extra level of indirection and the accessor
    dereferences it once.
    """
    writer.write_line("public unsafe static class StaticAddressPointers")
    with writer.block():
        for sai in struct_info.static_addresses:
            method = sai.method_info
            pointer_text = "* p" if sai.is_pointer else " "
            pointer = "*" if sai.is_pointer else ""
            writer.write_line(
                f"public static {method.return_type}{pointer_text}p{method.name} => "
                f"({method.return_type}{pointer}){struct_info.name}.Addresses.{method.name}.Value;"
            )

    for sai in struct_info.static_addresses:
        method = sai.method_info
        holder = f"{'p' if sai.is_pointer else ''}p{method.name}"
        dereference = "*" if sai.is_pointer else ""
        writer.write_line(method.get_declaration_string())
        with writer.block():
            writer.write_line(f"if (StaticAddressPointers.{holder} is null)")
            with writer.block():
                writer.write_line(throw_null_address(struct_info, method.name, sai.signature_info))
            writer.write_line(f"return {dereference}StaticAddressPointers.{holder};")
