#!/usr/bin/env python3

"""Addresses block: one resolver record per signature."""

from ...models.interop import StructInfo
from ..encoding import EncodedSignature
from .naming import ADDRESS_TYPE, format_byte_array, format_ulong_array
from .text_writer import IndentedTextWriter


def get_address_string(struct_info: StructInfo, name: str, encoded: EncodedSignature) -> str:
    """Declaration of a single ``Address`` record with a zero initial value."""
    return (
        f"public static readonly {ADDRESS_TYPE} {name} = new {ADDRESS_TYPE}("
        f'"{struct_info.fully_qualified_metadata_name}.{name}", '
        f'"{encoded.padded_signature}", '
        f"{format_byte_array(encoded.relocation_offsets)}, "
        f"{format_ulong_array(encoded.signature_words)}, "
        f"{format_ulong_array(encoded.mask_words)}, 0);"
    )


def render_addresses(
    struct_info: StructInfo,
    encoded_entries: list[tuple[str, EncodedSignature]],
    writer: IndentedTextWriter,
) -> None:
    """Render the ``Addresses`` class.

    Args:
        struct_info: Struct owning the addresses
        encoded_entries: Names and encoded signatures, in emission order
        writer: Output writer
    """
    writer.write_line("public static class Addresses")
    with writer.block():
        for name, encoded in encoded_entries:
            writer.write_line(get_address_string(struct_info, name, encoded))
