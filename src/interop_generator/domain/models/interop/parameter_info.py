#!/usr/bin/env python3

"""Parameter information model for interop method shapes."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ParameterInfo:
    """Information about a method parameter."""

    name: str
    type_name: str
    default_value: str | None = None  # C# default expression, rendered verbatim

    def declaration(self, type_override: str | None = None) -> str:
        """Render the parameter as it appears in a method declaration."""
        type_name = type_override if type_override is not None else self.type_name
        if self.default_value is not None:
            return f"{type_name} {self.name} = {self.default_value}"
        return f"{type_name} {self.name}"
