#!/usr/bin/env python3

"""Tests for fixed size array rendering, resolver registration and the text writer."""

import pytest

from interop_generator.domain.models.interop import (
    FixedSizeArrayInfo,
    MemberFunctionInfo,
    MethodInfo,
    SignatureInfo,
    StructInfo,
)
from interop_generator.domain.services.rendering import (
    IndentedTextWriter,
    render_fixed_array_types,
    render_fixed_size_array_accessors,
    render_resolver_initializer,
)

UNSCOPED_REF = "[global::System.Diagnostics.CodeAnalysis.UnscopedRefAttribute]"


def _accessor_lines(struct: StructInfo) -> list[str]:
    writer = IndentedTextWriter()
    render_fixed_size_array_accessors(struct, writer)
    return writer.to_string().splitlines()


class TestFixedSizeArrayAccessors:
    """Span and string accessors."""

    @pytest.mark.unit
    def test_span_accessor(self, plain_struct):
        assert _accessor_lines(plain_struct) == [
            '/// <inheritdoc cref="_components" />',
            f"{UNSCOPED_REF} public Span<float> Components => _components;",
        ]

    @pytest.mark.unit
    def test_byte_string_setter_checks_length_before_writing(self, game_object):
        lines = _accessor_lines(game_object)
        check = "        if (global::System.Text.Encoding.UTF8.GetByteCount(value) > 16 - 1)"
        write = "        global::System.Text.Encoding.UTF8.GetBytes(value.AsSpan(), _name);"

        assert "public string NameString" in lines
        assert lines.index(check) < lines.index(write)
        assert (
            '            InteropGenerator.Runtime.ThrowHelper.ThrowStringSizeTooLarge("NameString", 16);'
            in lines
        )
        assert "        _name[15] = 0;" in lines

    @pytest.mark.unit
    def test_byte_string_getter_stops_at_terminator(self, game_object):
        text = "\n".join(_accessor_lines(game_object))

        assert "CreateReadOnlySpanFromNullTerminated" in text
        assert "AsPointer(ref _name[0])" in text

    @pytest.mark.unit
    def test_char_string_accessor(self):
        struct = StructInfo(
            name="Label",
            namespace="UI",
            hierarchy=("Label",),
            fixed_size_arrays=(FixedSizeArrayInfo("_text", "char", 64, is_string=True),),
        )
        lines = _accessor_lines(struct)

        assert "    get => new string(_text);" in lines
        assert "        if (value.Length > 64 - 1)" in lines
        assert "        value.CopyTo(_text);" in lines
        assert "        _text[63] = '\\0';" in lines

    @pytest.mark.unit
    def test_non_string_arrays_have_no_string_accessor(self, game_object):
        lines = _accessor_lines(game_object)

        assert f"{UNSCOPED_REF} public Span<float> Position => _position;" in lines
        assert "public string PositionString" not in lines


class TestFixedArrayTypes:
    """Batch-wide inline array declarations."""

    @pytest.mark.unit
    def test_one_declaration_per_size(self, plain_struct):
        other = StructInfo(
            name="Matrix",
            namespace="Math",
            hierarchy=("Matrix",),
            fixed_size_arrays=(
                FixedSizeArrayInfo("_cells", "float", 32),
                FixedSizeArrayInfo("_tag", "byte", 8),
            ),
        )
        text = render_fixed_array_types([plain_struct, other], "Interop.Generated")

        assert text.startswith("// <auto-generated/>\nnamespace Interop.Generated;\n")
        assert text.count("public struct FixedSizeArray32<T> where T : unmanaged") == 1
        assert text.count("public struct FixedSizeArray8<T> where T : unmanaged") == 1
        assert "[global::System.Runtime.CompilerServices.InlineArrayAttribute(32)]" in text
        assert "    private T _element0;" in text

    @pytest.mark.unit
    def test_first_encounter_order(self, game_object, plain_struct):
        text = render_fixed_array_types([game_object, plain_struct], "Gen")

        assert text.index("FixedSizeArray16<T>") < text.index("FixedSizeArray3<T>")
        assert text.index("FixedSizeArray3<T>") < text.index("FixedSizeArray32<T>")

    @pytest.mark.unit
    def test_accumulator_is_updated_and_respected(self, game_object, plain_struct):
        generated: set[int] = set()

        render_fixed_array_types([game_object], "Gen", generated)
        assert generated == {16, 3}

        text = render_fixed_array_types([game_object, plain_struct], "Gen", generated)
        assert "FixedSizeArray16<T>" not in text
        assert "FixedSizeArray32<T>" in text
        assert generated == {16, 3, 32}

    @pytest.mark.unit
    def test_fresh_batches_are_independent(self, plain_struct):
        first = render_fixed_array_types([plain_struct], "Gen")
        second = render_fixed_array_types([plain_struct], "Gen")

        assert first == second


class TestResolverInitializer:
    """Register and Unregister bodies."""

    @pytest.mark.unit
    def test_registers_every_address_in_order(self, game_object):
        lines = render_resolver_initializer([game_object], "Gen").splitlines()
        register = [line.strip() for line in lines if "RegisterAddress(" in line and "Un" not in line]

        assert register == [
            f"InteropGenerator.Runtime.Resolver.GetInstance.RegisterAddress("
            f"global::Game.Object.GameObject.Addresses.{name});"
            for name in ("IsVisible", "Create", "SetName", "Instance", "ObjectCount", "StaticVirtualTable")
        ]

    @pytest.mark.unit
    def test_unregister_mirrors_register(self, game_object):
        text = render_resolver_initializer([game_object], "Gen")

        assert text.count(".RegisterAddress(") == text.count(".UnregisterAddress(") == 6

    @pytest.mark.unit
    def test_nested_type_uses_dotted_global_name(self):
        inner = StructInfo(
            name="Inner",
            namespace="Game",
            hierarchy=("Inner", "Outer"),
            member_functions=(
                MemberFunctionInfo(
                    MethodInfo(name="GetValue", modifiers="public partial", return_type="int"),
                    SignatureInfo("E8 ?? ?? ?? ??", (1,)),
                ),
            ),
        )
        text = render_resolver_initializer([inner], "Gen")

        assert "RegisterAddress(global::Game.Outer.Inner.Addresses.GetValue);" in text

    @pytest.mark.unit
    def test_structure(self, plain_struct):
        assert render_resolver_initializer([plain_struct], "Gen").splitlines() == [
            "// <auto-generated/>",
            "namespace Gen;",
            "public static class Addresses",
            "{",
            "    public static void Register()",
            "    {",
            "    }",
            "    public static void Unregister()",
            "    {",
            "    }",
            "}",
        ]


class TestIndentedTextWriter:
    """Line and block indentation."""

    @pytest.mark.unit
    def test_blocks_indent_their_body(self):
        writer = IndentedTextWriter()
        writer.write_line("class A")
        with writer.block():
            writer.write_line("int x;")
            writer.write_line()

        assert writer.to_string() == "class A\n{\n    int x;\n\n}\n"

    @pytest.mark.unit
    def test_decrease_below_zero(self):
        with pytest.raises(RuntimeError):
            IndentedTextWriter().decrease_indent()

    @pytest.mark.unit
    def test_empty_writer(self):
        assert IndentedTextWriter().to_string() == ""
