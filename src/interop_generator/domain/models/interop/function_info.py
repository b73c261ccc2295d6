#!/usr/bin/env python3

"""Function and address descriptor models attached to a struct."""

from dataclasses import dataclass

from .method_info import MethodInfo
from .signature_info import SignatureInfo

STRING_POINTER_TYPE = "byte*"


@dataclass(frozen=True)
class MemberFunctionInfo:
    """A function resolved by scanning the binary for its signature."""

    method_info: MethodInfo
    signature_info: SignatureInfo


@dataclass(frozen=True)
class VirtualFunctionInfo:
    """A function dispatched through slot ``index`` of the struct's virtual table."""

    method_info: MethodInfo
    index: int


@dataclass(frozen=True)
class StaticAddressInfo:
    """A static data location resolved from a signature.

    When ``is_pointer`` is set the resolved address holds a pointer to the
    value rather than the value itself.
    """

    method_info: MethodInfo
    signature_info: SignatureInfo
    is_pointer: bool = False


@dataclass(frozen=True)
class StringOverloadInfo:
    """Request for string-friendly overloads of a member function."""

    method_info: MethodInfo
    ignored_parameters: tuple[str, ...] = ()

    def get_overload_parameter_names(self) -> tuple[str, ...]:
        """Names of the ``byte*`` parameters that get string overloads."""
        return tuple(
            p.name
            for p in self.method_info.parameters
            if p.type_name == STRING_POINTER_TYPE and p.name not in self.ignored_parameters
        )
