"""
Whale-C Type References
=======================

The syntactic types a declaration can carry. Only two shapes exist:

| Spelling       | base_type | bits | is_signed |
|----------------|-----------|------|-----------|
| int            | INT       | 32   | True      |
| unsigned int   | INT       | 32   | False     |
| void           | VOID      | 0    | False     |

No checking is performed here; the lowering stage decides what a
``void`` variable or an unsigned comparison means.
"""

from dataclasses import dataclass
from enum import Enum, auto


class BaseType(Enum):
    """Fundamental types of the language."""
    INT = auto()
    VOID = auto()

    def __str__(self) -> str:
        return self.name.lower()


@dataclass(frozen=True)
class TypeRef:
    """
    A reference to a type, as written in the source.

    Attributes:
        base_type: INT or VOID
        bits: Width in bits (32 for integers, 0 for void)
        is_signed: False when declared 'unsigned'
    """
    base_type: BaseType
    bits: int = 32
    is_signed: bool = True

    @property
    def is_void(self) -> bool:
        return self.base_type == BaseType.VOID

    def __str__(self) -> str:
        if self.is_void:
            return "void"
        return "int" if self.is_signed else "unsigned int"


TYPE_INT = TypeRef(BaseType.INT, 32, True)
TYPE_UINT = TypeRef(BaseType.INT, 32, False)
TYPE_VOID = TypeRef(BaseType.VOID, 0, False)


def make_type(base_type: BaseType, is_unsigned: bool = False) -> TypeRef:
    """
    Build a TypeRef from a parsed base type and 'unsigned' prefix.

    'unsigned void' is accepted by the grammar and yields plain void.
    """
    if base_type == BaseType.VOID:
        return TYPE_VOID
    return TYPE_UINT if is_unsigned else TYPE_INT
