#!/usr/bin/env python3

"""Process-wide resolver registration for every address record."""

from collections.abc import Sequence

from ...models.interop import StructInfo
from .naming import AUTO_GENERATED_HEADER, RESOLVER_INSTANCE, get_address_entries
from .text_writer import IndentedTextWriter


def get_add_to_resolver_string(struct_info: StructInfo, name: str) -> str:
    return f"{RESOLVER_INSTANCE}.RegisterAddress({struct_info.fully_qualified_type_name}.Addresses.{name});"


def get_remove_from_resolver_string(struct_info: StructInfo, name: str) -> str:
    return f"{RESOLVER_INSTANCE}.UnregisterAddress({struct_info.fully_qualified_type_name}.Addresses.{name});"


def render_resolver_initializer(struct_infos: Sequence[StructInfo], generator_namespace: str) -> str:
    """Render ``Addresses.Register()`` / ``Addresses.Unregister()`` for a batch."""
    writer = IndentedTextWriter()
    writer.write_line(AUTO_GENERATED_HEADER)
    writer.write_line(f"namespace {generator_namespace};")
    writer.write_line("public static class Addresses")
    with writer.block():
        writer.write_line("public static void Register()")
        with writer.block():
            for struct_info in struct_infos:
                for name, _ in get_address_entries(struct_info):
                    writer.write_line(get_add_to_resolver_string(struct_info, name))
        writer.write_line("public static void Unregister()")
        with writer.block():
            for struct_info in struct_infos:
                for name, _ in get_address_entries(struct_info):
                    writer.write_line(get_remove_from_resolver_string(struct_info, name))

    return writer.to_string()
