#!/usr/bin/env python3

"""Fixed size inline array model."""

from dataclasses import dataclass

CHARACTER_TYPES = frozenset({"byte", "char"})


@dataclass(frozen=True)
class FixedSizeArrayInfo:
    """An inline fixed size array field backed by ``FixedSizeArray<N><T>``."""

    field_name: str
    type_name: str
    size: int
    is_string: bool = False

    @property
    def has_string_accessor(self) -> bool:
        """String accessors only exist for character unit element types."""
        return self.is_string and self.type_name in CHARACTER_TYPES

    def get_public_field_name(self) -> str:
        """Accessor name: ``_fieldName`` becomes ``FieldName``."""
        name = self.field_name.lstrip("_")
        return name[:1].upper() + name[1:]
