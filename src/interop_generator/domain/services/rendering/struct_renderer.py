#!/usr/bin/env python3

"""Per-struct artifact rendering.

Composes the block renderers in a fixed order inside the struct's nesting
hierarchy. Emission order and the "skip empty categories" rule are part of
the output contract: identical input must give byte-identical output.
"""

import threading

from ....infrastructure.logging import get_logger
from ...errors import CompilationCancelledError
from ...models.interop import StructInfo
from ..encoding import EncodedSignature, encode_signature
from .addresses import render_addresses
from .delegates import render_delegate_types
from .fixed_arrays import render_fixed_size_array_accessors
from .member_functions import render_member_functions
from .naming import AUTO_GENERATED_HEADER, get_address_entries
from .options import CompilerOptions
from .static_addresses import render_static_addresses
from .string_overloads import render_string_overloads
from .text_writer import IndentedTextWriter
from .virtual_functions import render_virtual_functions, render_virtual_table

logger = get_logger(__name__)


def _check_cancelled(cancel_event: threading.Event | None, struct_info: StructInfo) -> None:
    if cancel_event is not None and cancel_event.is_set():
        logger.debug(f"Compilation of {struct_info.name} cancelled")
        raise CompilationCancelledError(f"Compilation of {struct_info.name} was cancelled")


def encode_struct_signatures(struct_info: StructInfo) -> list[tuple[str, EncodedSignature]]:
    """Encode every signature of a struct up front.

    Raises:
        MalformedSignatureError: If any signature of the struct is invalid
    """
    return [(name, encode_signature(signature)) for name, signature in get_address_entries(struct_info)]


def render_struct(
    struct_info: StructInfo,
    options: CompilerOptions | None = None,
    cancel_event: threading.Event | None = None,
) -> str:
    """Render the complete binding artifact for one struct.

    Args:
        struct_info: Struct to render
        options: Rendering options (defaults when omitted)
        cancel_event: Checked between blocks; when set the artifact is discarded

    Returns:
        Generated C# source

    Raises:
        MalformedSignatureError: If a signature is invalid; nothing is rendered
        CompilationCancelledError: If cancel_event is set between two blocks
    """
    options = options or CompilerOptions()
    encoded_entries = encode_struct_signatures(struct_info)

    writer = IndentedTextWriter()
    writer.write_line(AUTO_GENERATED_HEADER)

    if struct_info.namespace:
        writer.write_line(f"namespace {struct_info.namespace};")
        writer.write_line()

    # outermost type first; partial declarations inherit accessibility
    for type_name in reversed(struct_info.hierarchy):
        writer.write_line(f"unsafe partial struct {type_name}")
        writer.write_line("{")
        writer.increase_indent()

    if struct_info.has_signatures():
        render_addresses(struct_info, encoded_entries, writer)
        _check_cancelled(cancel_event, struct_info)

    if struct_info.has_virtual_table():
        render_virtual_table(struct_info, writer, options.pointer_size)
        _check_cancelled(cancel_event, struct_info)

    if struct_info.member_functions or struct_info.virtual_functions:
        render_delegate_types(struct_info, writer)
        _check_cancelled(cancel_event, struct_info)

    if struct_info.member_functions:
        render_member_functions(struct_info, writer)
        _check_cancelled(cancel_event, struct_info)

    if struct_info.virtual_functions:
        render_virtual_functions(struct_info, writer)
        _check_cancelled(cancel_event, struct_info)

    if struct_info.static_addresses:
        render_static_addresses(struct_info, writer)
        _check_cancelled(cancel_event, struct_info)

    if struct_info.string_overloads:
        render_string_overloads(struct_info, writer, options.stackalloc_threshold)
        _check_cancelled(cancel_event, struct_info)

    if struct_info.fixed_size_arrays:
        render_fixed_size_array_accessors(struct_info, writer)
        _check_cancelled(cancel_event, struct_info)

    for _ in struct_info.hierarchy:
        writer.decrease_indent()
        writer.write_line("}")

    return writer.to_string()
