#!/usr/bin/env python3

"""C# binding renderers."""

from .fixed_arrays import render_fixed_array_types, render_fixed_size_array_accessors
from .naming import (
    FIXED_ARRAY_TYPES_HINT_NAME,
    RESOLVER_HINT_NAME,
    get_address_entries,
    struct_hint_name,
)
from .options import CompilerOptions
from .resolver import render_resolver_initializer
from .struct_renderer import encode_struct_signatures, render_struct
from .text_writer import IndentedTextWriter

__all__ = [
    "CompilerOptions",
    "FIXED_ARRAY_TYPES_HINT_NAME",
    "IndentedTextWriter",
    "RESOLVER_HINT_NAME",
    "encode_struct_signatures",
    "get_address_entries",
    "render_fixed_array_types",
    "render_fixed_size_array_accessors",
    "render_resolver_initializer",
    "render_struct",
    "struct_hint_name",
]
