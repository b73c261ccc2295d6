#!/usr/bin/env python3

"""String-friendly overloads for functions taking ``byte*`` C strings."""

from ...models.interop import StringOverloadInfo, StructInfo
from .text_writer import IndentedTextWriter

UTF8 = "global::System.Text.Encoding.UTF8"


def _render_pinned_call(
    overload: StringOverloadInfo,
    params: tuple[str, ...],
    source_suffix: str,
    writer: IndentedTextWriter,
) -> None:
    # one nested fixed scope per converted parameter, released when the call returns
    method = overload.method_info
    for name in params:
        writer.write_line(f"fixed (byte* {name}Ptr = {name}{source_suffix})")
        writer.write_line("{")
        writer.increase_indent()

    arguments = method.get_parameter_names_string_for_string_overload(params)
    writer.write_line(f"{method.get_return_string()}{method.name}({arguments});")

    for _ in params:
        writer.decrease_indent()
        writer.write_line("}")


def render_string_overload(
    overload: StringOverloadInfo, writer: IndentedTextWriter, stackalloc_threshold: int
) -> None:
    """Render the ``string`` and ``ReadOnlySpan<byte>`` overloads of one function."""
    method = overload.method_info
    params = overload.get_overload_parameter_names()

    writer.write_line(method.get_declaration_string_for_string_overload("string", params))
    with writer.block():
        for name in params:
            length = f"{name}UTF8StrLen"
            writer.write_line(f"int {length} = {UTF8}.GetByteCount({name});")
            writer.write_line(
                f"Span<byte> {name}Bytes = {length} <= {stackalloc_threshold} "
                f"? stackalloc byte[{length} + 1] : new byte[{length} + 1];"
            )
            writer.write_line(f"{UTF8}.GetBytes({name}, {name}Bytes);")
            writer.write_line(f"{name}Bytes[{length}] = 0;")
        _render_pinned_call(overload, params, "Bytes", writer)

    writer.write_line(method.get_declaration_string_for_string_overload("ReadOnlySpan<byte>", params))
    with writer.block():
        _render_pinned_call(overload, params, "", writer)


def render_string_overloads(
    struct_info: StructInfo, writer: IndentedTextWriter, stackalloc_threshold: int = 512
) -> None:
    for overload in struct_info.string_overloads:
        render_string_overload(overload, writer, stackalloc_threshold)
