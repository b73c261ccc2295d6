#!/usr/bin/env python3

"""Fixed size array accessors and the shared inline array type declarations."""

from collections.abc import Iterable

from ...models.interop import FixedSizeArrayInfo, StructInfo
from .naming import AUTO_GENERATED_HEADER, COMPILER_SERVICES, THROW_HELPER
from .text_writer import IndentedTextWriter

UTF8 = "global::System.Text.Encoding.UTF8"
UNSCOPED_REF = "[global::System.Diagnostics.CodeAnalysis.UnscopedRefAttribute]"


def _throw_too_large(array: FixedSizeArrayInfo) -> str:
    return (
        f'{THROW_HELPER}.ThrowStringSizeTooLarge("{array.get_public_field_name()}String", {array.size});'
    )


def _render_byte_string_body(array: FixedSizeArrayInfo, writer: IndentedTextWriter) -> None:
    field = array.field_name
    writer.write_line(
        f"get => {UTF8}.GetString(global::System.Runtime.InteropServices.MemoryMarshal."
        f"CreateReadOnlySpanFromNullTerminated((byte*){COMPILER_SERVICES}.Unsafe.AsPointer(ref {field}[0])));"
    )
    writer.write_line("set")
    with writer.block():
        # length check precedes any write
        writer.write_line(f"if ({UTF8}.GetByteCount(value) > {array.size} - 1)")
        with writer.block():
            writer.write_line(_throw_too_large(array))
        writer.write_line(f"{UTF8}.GetBytes(value.AsSpan(), {field});")
        writer.write_line(f"{field}[{array.size - 1}] = 0;")


def _render_char_string_body(array: FixedSizeArrayInfo, writer: IndentedTextWriter) -> None:
    field = array.field_name
    writer.write_line(f"get => new string({field});")
    writer.write_line("set")
    with writer.block():
        writer.write_line(f"if (value.Length > {array.size} - 1)")
        with writer.block():
            writer.write_line(_throw_too_large(array))
        writer.write_line(f"value.CopyTo({field});")
        writer.write_line(f"{field}[{array.size - 1}] = '\\0';")


def render_fixed_size_array_accessors(struct_info: StructInfo, writer: IndentedTextWriter) -> None:
    """Render span accessors, plus string properties for character arrays."""
    for array in struct_info.fixed_size_arrays:
        public_name = array.get_public_field_name()
        writer.write_line(f'/// <inheritdoc cref="{array.field_name}" />')
        writer.write_line(f"{UNSCOPED_REF} public Span<{array.type_name}> {public_name} => {array.field_name};")
        if not array.has_string_accessor:
            continue
        writer.write_line(f'/// <inheritdoc cref="{array.field_name}" />')
        writer.write_line(f"public string {public_name}String")
        with writer.block():
            if array.type_name == "byte":
                _render_byte_string_body(array, writer)
            else:
                _render_char_string_body(array, writer)


def render_fixed_array_types(
    struct_infos: Iterable[StructInfo],
    generator_namespace: str,
    generated_sizes: set[int] | None = None,
) -> str:
    """Render one ``FixedSizeArray<N><T>`` inline array type per distinct size.

    Args:
        struct_infos: All structs of the batch
        generator_namespace: Namespace for the emitted types
        generated_sizes: Sizes already emitted for this batch; updated in place

    Returns:
        The fixed size array types artifact
    """
    if generated_sizes is None:
        generated_sizes = set()

    writer = IndentedTextWriter()
    writer.write_line(AUTO_GENERATED_HEADER)
    writer.write_line(f"namespace {generator_namespace};")
    for struct_info in struct_infos:
        for array in struct_info.fixed_size_arrays:
            if array.size in generated_sizes:
                continue
            writer.write_line(f"[{COMPILER_SERVICES}.InlineArrayAttribute({array.size})]")
            writer.write_line(f"public struct FixedSizeArray{array.size}<T> where T : unmanaged")
            with writer.block():
                writer.write_line("private T _element0;")
            generated_sizes.add(array.size)

    return writer.to_string()
