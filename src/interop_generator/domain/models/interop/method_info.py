#!/usr/bin/env python3

"""Method information model for interop method shapes."""

from collections.abc import Collection
from dataclasses import dataclass

from .parameter_info import ParameterInfo


@dataclass(frozen=True)
class MethodInfo:
    """Shape of a partial method declared on a native struct.

    Holds everything needed to reproduce the user's declaration and to
    forward its arguments to a resolved native function.
    """

    name: str
    modifiers: str
    return_type: str
    is_static: bool = False
    parameters: tuple[ParameterInfo, ...] = ()

    def get_declaration_string(self) -> str:
        """Full declaration, e.g. ``public partial int Foo(int a, byte* b)``."""
        params = ", ".join(p.declaration() for p in self.parameters)
        return f"{self.modifiers} {self.return_type} {self.name}({params})"

    def get_return_string(self) -> str:
        """Prefix for a forwarding statement: ``return `` unless the method is void."""
        return "" if self.return_type == "void" else "return "

    def get_parameter_names_string(self) -> str:
        return ", ".join(p.name for p in self.parameters)

    def get_parameter_types_and_names_string(self) -> str:
        return ", ".join(f"{p.type_name} {p.name}" for p in self.parameters)

    def get_parameter_type_string_with_trailing_type(self) -> str:
        """Parameter types each followed by ``, `` so a return type can be appended.

        Used to build ``delegate* unmanaged <...>`` type argument lists.
        """
        return "".join(f"{p.type_name}, " for p in self.parameters)

    def get_declaration_string_for_string_overload(
        self, replacement_type: str, overloaded: Collection[str]
    ) -> str:
        """Declaration of a string overload.

        Parameters named in ``overloaded`` take ``replacement_type`` instead of
        their raw pointer type. The overload is a regular method, so the
        ``partial`` modifier is dropped.

        Args:
            replacement_type: Type substituted for overloaded parameters
            overloaded: Names of parameters to retype

        Returns:
            Declaration line without a body
        """
        modifiers = self.modifiers.replace(" partial", "")
        params = ", ".join(
            p.declaration(replacement_type if p.name in overloaded else None)
            for p in self.parameters
        )
        return f"{modifiers} {self.return_type} {self.name}({params})"

    def get_parameter_names_string_for_string_overload(self, overloaded: Collection[str]) -> str:
        """Argument list forwarding to the original method from a string overload.

        Converted parameters are passed through their pinned ``<name>Ptr`` local.
        """
        return ", ".join(f"{p.name}Ptr" if p.name in overloaded else p.name for p in self.parameters)
