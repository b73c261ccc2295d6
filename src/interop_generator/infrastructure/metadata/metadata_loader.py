#!/usr/bin/env python3

"""Loading struct descriptors from a JSON metadata document.

The document is the hand-off point from a front-end (or a hand-written
fixture) to the compiler::

    {
      "structs": [
        {
          "name": "GameObject",
          "namespace": "Game.Object",
          "hierarchy": ["GameObject"],
          "member_functions": [
            {
              "method": {"name": "GetName", "modifiers": "public partial",
                         "return_type": "byte*", "parameters": []},
              "signature": {"signature": "E8 ?? ?? ?? ?? 48 8B D8",
                            "relative_follow_offsets": [1]}
            }
          ]
        }
      ]
    }

Only document structure is checked here; names and types are taken as given.
"""

import json
from pathlib import Path
from typing import Any

import jsonschema

from ...domain.errors import MetadataError
from ...domain.models.interop import (
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
from ..logging import get_logger, log_timing

logger = get_logger(__name__)

_STRING_LIST = {"type": "array", "items": {"type": "string"}}

METADATA_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["structs"],
    "properties": {"structs": {"type": "array", "items": {"$ref": "#/$defs/struct"}}},
    "$defs": {
        "parameter": {
            "type": "object",
            "required": ["name", "type"],
            "properties": {
                "name": {"type": "string", "minLength": 1},
                "type": {"type": "string", "minLength": 1},
                "default_value": {"type": "string"},
            },
            "additionalProperties": False,
        },
        "method": {
            "type": "object",
            "required": ["name", "modifiers", "return_type"],
            "properties": {
                "name": {"type": "string", "minLength": 1},
                "modifiers": {"type": "string"},
                "return_type": {"type": "string", "minLength": 1},
                "is_static": {"type": "boolean"},
                "parameters": {"type": "array", "items": {"$ref": "#/$defs/parameter"}},
            },
            "additionalProperties": False,
        },
        "signature": {
            "type": "object",
            "required": ["signature"],
            "properties": {
                "signature": {"type": "string"},
                "relative_follow_offsets": {
                    "type": "array",
                    "items": {"type": "integer", "minimum": 0, "maximum": 255},
                },
            },
            "additionalProperties": False,
        },
        "member_function": {
            "type": "object",
            "required": ["method", "signature"],
            "properties": {
                "method": {"$ref": "#/$defs/method"},
                "signature": {"$ref": "#/$defs/signature"},
            },
            "additionalProperties": False,
        },
        "virtual_function": {
            "type": "object",
            "required": ["method", "index"],
            "properties": {
                "method": {"$ref": "#/$defs/method"},
                "index": {"type": "integer", "minimum": 0},
            },
            "additionalProperties": False,
        },
        "static_address": {
            "type": "object",
            "required": ["method", "signature"],
            "properties": {
                "method": {"$ref": "#/$defs/method"},
                "signature": {"$ref": "#/$defs/signature"},
                "is_pointer": {"type": "boolean"},
            },
            "additionalProperties": False,
        },
        "string_overload": {
            "type": "object",
            "required": ["method"],
            "properties": {
                "method": {"$ref": "#/$defs/method"},
                "ignored_parameters": _STRING_LIST,
            },
            "additionalProperties": False,
        },
        "fixed_size_array": {
            "type": "object",
            "required": ["field_name", "type", "size"],
            "properties": {
                "field_name": {"type": "string", "minLength": 1},
                "type": {"type": "string", "minLength": 1},
                "size": {"type": "integer", "minimum": 1},
                "is_string": {"type": "boolean"},
            },
            "additionalProperties": False,
        },
        "struct": {
            "type": "object",
            "required": ["name", "hierarchy"],
            "properties": {
                "name": {"type": "string", "minLength": 1},
                "namespace": {"type": "string"},
                "hierarchy": {**_STRING_LIST, "minItems": 1},
                "member_functions": {"type": "array", "items": {"$ref": "#/$defs/member_function"}},
                "virtual_functions": {"type": "array", "items": {"$ref": "#/$defs/virtual_function"}},
                "static_addresses": {"type": "array", "items": {"$ref": "#/$defs/static_address"}},
                "string_overloads": {"type": "array", "items": {"$ref": "#/$defs/string_overload"}},
                "fixed_size_arrays": {"type": "array", "items": {"$ref": "#/$defs/fixed_size_array"}},
                "static_virtual_table_signature": {"$ref": "#/$defs/signature"},
            },
            "additionalProperties": False,
        },
    },
}


def _parse_method(payload: dict[str, Any]) -> MethodInfo:
    return MethodInfo(
        name=payload["name"],
        modifiers=payload["modifiers"],
        return_type=payload["return_type"],
        is_static=payload.get("is_static", False),
        parameters=tuple(
            ParameterInfo(name=p["name"], type_name=p["type"], default_value=p.get("default_value"))
            for p in payload.get("parameters", [])
        ),
    )


def _parse_signature(payload: dict[str, Any]) -> SignatureInfo:
    return SignatureInfo(
        signature=payload["signature"],
        relative_follow_offsets=tuple(payload.get("relative_follow_offsets", [])),
    )


def parse_struct(payload: dict[str, Any]) -> StructInfo:
    """Build a ``StructInfo`` from one schema-valid struct object."""
    static_vtable = payload.get("static_virtual_table_signature")
    return StructInfo(
        name=payload["name"],
        namespace=payload.get("namespace", ""),
        hierarchy=tuple(payload["hierarchy"]),
        member_functions=tuple(
            MemberFunctionInfo(_parse_method(m["method"]), _parse_signature(m["signature"]))
            for m in payload.get("member_functions", [])
        ),
        virtual_functions=tuple(
            VirtualFunctionInfo(_parse_method(v["method"]), v["index"])
            for v in payload.get("virtual_functions", [])
        ),
        static_addresses=tuple(
            StaticAddressInfo(
                _parse_method(s["method"]),
                _parse_signature(s["signature"]),
                s.get("is_pointer", False),
            )
            for s in payload.get("static_addresses", [])
        ),
        string_overloads=tuple(
            StringOverloadInfo(_parse_method(s["method"]), tuple(s.get("ignored_parameters", [])))
            for s in payload.get("string_overloads", [])
        ),
        fixed_size_arrays=tuple(
            FixedSizeArrayInfo(a["field_name"], a["type"], a["size"], a.get("is_string", False))
            for a in payload.get("fixed_size_arrays", [])
        ),
        static_virtual_table_signature=_parse_signature(static_vtable) if static_vtable else None,
    )


def parse_metadata(payload: Any, source: str = "<memory>") -> list[StructInfo]:
    """Validate a decoded metadata document and build its struct descriptors.

    Args:
        payload: Decoded JSON document
        source: Label used in error messages

    Returns:
        Struct descriptors in document order

    Raises:
        MetadataError: If the document does not match the metadata schema
    """
    try:
        jsonschema.validate(payload, METADATA_SCHEMA)
    except jsonschema.ValidationError as exc:
        location = "/".join(str(part) for part in exc.absolute_path) or "<root>"
        raise MetadataError(f"{source} failed schema validation at {location}: {exc.message}") from exc

    return [parse_struct(struct_payload) for struct_payload in payload["structs"]]


@log_timing
def load_metadata(path: Path) -> list[StructInfo]:
    """Read and validate a metadata document.

    Args:
        path: Path to the JSON metadata file

    Returns:
        Struct descriptors in document order

    Raises:
        MetadataError: If the file cannot be read, is not JSON, or fails validation
    """
    logger.debug(f"Loading metadata from {path}")
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise MetadataError(f"Cannot read metadata file {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise MetadataError(f"Invalid JSON in {path}: {exc}") from exc

    structs = parse_metadata(payload, str(path))
    logger.info(f"Loaded {len(structs)} struct(s) from {path}")
    return structs
