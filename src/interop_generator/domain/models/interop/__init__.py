#!/usr/bin/env python3

"""Interop descriptor models."""

from .fixed_size_array_info import CHARACTER_TYPES, FixedSizeArrayInfo
from .function_info import (
    STRING_POINTER_TYPE,
    MemberFunctionInfo,
    StaticAddressInfo,
    StringOverloadInfo,
    VirtualFunctionInfo,
)
from .method_info import MethodInfo
from .parameter_info import ParameterInfo
from .signature_info import SignatureInfo
from .struct_info import StructInfo

__all__ = [
    "CHARACTER_TYPES",
    "FixedSizeArrayInfo",
    "MemberFunctionInfo",
    "MethodInfo",
    "ParameterInfo",
    "STRING_POINTER_TYPE",
    "SignatureInfo",
    "StaticAddressInfo",
    "StringOverloadInfo",
    "StructInfo",
    "VirtualFunctionInfo",
]
