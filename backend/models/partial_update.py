"""
Base class for PUT bodies that only touch the fields they carry
"""
from typing import ClassVar, FrozenSet

from sqlmodel import SQLModel

# Largest value of a 32-bit INTEGER column
MAX_INT = 2_147_483_647


class PartialUpdate(SQLModel):
    """Fields left out of the body, or sent as null for a required column, are ignored"""

    nullable_fields: ClassVar[FrozenSet[str]] = frozenset()

    def changes(self) -> dict:
        return {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if value is not None or key in self.nullable_fields
        }
