"""Pytest configuration and shared fixtures."""

import json
import sys
from pathlib import Path

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from interop_generator.domain.models.interop import (
    FixedSizeArrayInfo,
    MemberFunctionInfo,
    MethodInfo,
    ParameterInfo,
    SignatureInfo,
    StaticAddressInfo,
    StringOverloadInfo,
    StructInfo,
    VirtualFunctionInfo,
)


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def set_name_method() -> MethodInfo:
    """Instance method taking a C string and a length."""
    return MethodInfo(
        name="SetName",
        modifiers="public partial",
        return_type="void",
        parameters=(ParameterInfo("name", "byte*"), ParameterInfo("length", "int")),
    )


@pytest.fixture
def game_object(set_name_method: MethodInfo) -> StructInfo:
    """A struct using every feature the generator supports."""
    return StructInfo(
        name="GameObject",
        namespace="Game.Object",
        hierarchy=("GameObject",),
        member_functions=(
            MemberFunctionInfo(
                MethodInfo(
                    name="IsVisible",
                    modifiers="public partial",
                    return_type="bool",
                ),
                SignatureInfo("E8 ?? ?? ?? ?? 84 C0 74 ?? 48 8B CB", (1,)),
            ),
            MemberFunctionInfo(
                MethodInfo(
                    name="Create",
                    modifiers="public static partial",
                    return_type="GameObject*",
                    is_static=True,
                    parameters=(ParameterInfo("kind", "uint"),),
                ),
                SignatureInfo("40 53 48 83 EC 20 8B D9"),
            ),
            MemberFunctionInfo(set_name_method, SignatureInfo("48 89 5C 24 ?? 57 48 83 EC 20")),
        ),
        virtual_functions=(
            VirtualFunctionInfo(
                MethodInfo(
                    name="Dtor",
                    modifiers="public partial",
                    return_type="void",
                    parameters=(ParameterInfo("freeFlags", "byte"),),
                ),
                0,
            ),
            VirtualFunctionInfo(
                MethodInfo(name="GetObjectKind", modifiers="public partial", return_type="byte"),
                3,
            ),
        ),
        static_addresses=(
            StaticAddressInfo(
                MethodInfo(
                    name="Instance",
                    modifiers="public static partial",
                    return_type="GameObject*",
                    is_static=True,
                ),
                SignatureInfo("48 8B 0D ?? ?? ?? ?? E8", (3,)),
                is_pointer=True,
            ),
            StaticAddressInfo(
                MethodInfo(
                    name="ObjectCount",
                    modifiers="public static partial",
                    return_type="int*",
                    is_static=True,
                ),
                SignatureInfo("8B 05 ?? ?? ?? ?? 85 C0", (2,)),
            ),
        ),
        string_overloads=(StringOverloadInfo(set_name_method),),
        fixed_size_arrays=(
            FixedSizeArrayInfo("_name", "byte", 16, is_string=True),
            FixedSizeArrayInfo("_position", "float", 3),
        ),
        static_virtual_table_signature=SignatureInfo("48 8D 05 ?? ?? ?? ?? 48 89 03", (3,)),
    )


@pytest.fixture
def plain_struct() -> StructInfo:
    """A struct with nothing but a fixed size array."""
    return StructInfo(
        name="Vector",
        namespace="",
        hierarchy=("Vector",),
        fixed_size_arrays=(FixedSizeArrayInfo("_components", "float", 32),),
    )


@pytest.fixture
def metadata_document() -> dict:
    """A metadata document describing two structs."""
    return {
        "structs": [
            {
                "name": "Inner",
                "namespace": "Game",
                "hierarchy": ["Inner", "Outer"],
                "member_functions": [
                    {
                        "method": {
                            "name": "GetValue",
                            "modifiers": "public partial",
                            "return_type": "int",
                            "parameters": [{"name": "index", "type": "int"}],
                        },
                        "signature": {
                            "signature": "E8 ?? ?? ?? ?? 8B C8",
                            "relative_follow_offsets": [1],
                        },
                    }
                ],
                "fixed_size_arrays": [
                    {"field_name": "_label", "type": "byte", "size": 32, "is_string": True}
                ],
            },
            {
                "name": "Camera",
                "namespace": "Game.Graphics",
                "hierarchy": ["Camera"],
                "virtual_functions": [
                    {
                        "method": {
                            "name": "Update",
                            "modifiers": "public partial",
                            "return_type": "void",
                        },
                        "index": 2,
                    }
                ],
                "static_addresses": [
                    {
                        "method": {
                            "name": "Instance",
                            "modifiers": "public static partial",
                            "return_type": "Camera*",
                            "is_static": True,
                        },
                        "signature": {"signature": "48 8B 05 ?? ?? ?? ??", "relative_follow_offsets": [3]},
                        "is_pointer": True,
                    }
                ],
                "fixed_size_arrays": [{"field_name": "_matrix", "type": "float", "size": 32}],
            },
        ]
    }


@pytest.fixture
def metadata_file(tmp_path: Path, metadata_document: dict) -> Path:
    """Write the metadata document to a temporary file."""
    path = tmp_path / "structs.json"
    path.write_text(json.dumps(metadata_document), encoding="utf-8")
    return path
