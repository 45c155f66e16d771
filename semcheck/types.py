"""Data types and symbol kinds of the checked language."""

from __future__ import annotations

from enum import Enum


class DataType(Enum):
    """Value types; each member's value is its spelling in source text."""

    INT = "int"
    REAL = "real"
    CHAR = "char"
    BOOL = "bool"
    STRING = "string"
    VOID = "void"
    PTR_INT = "int*"
    PTR_CHAR = "char*"
    PTR_REAL = "real*"


class SymbolKind(Enum):
    """Whether a symbol names a variable or a function."""

    VARIABLE = "Variable"
    FUNCTION = "Function"


_POINTER_BASES = {
    DataType.PTR_INT: DataType.INT,
    DataType.PTR_CHAR: DataType.CHAR,
    DataType.PTR_REAL: DataType.REAL,
}


def type_from_name(type_str: str) -> DataType:
    """Map a type spelling to its DataType; unknown spellings give INT."""
    try:
        return DataType(type_str)
    except ValueError:
        return DataType.INT


def name_from_type(data_type: object) -> str:
    """Return the spelling of a DataType, or ``"unknown"`` for anything else."""
    if isinstance(data_type, DataType):
        return data_type.value
    return "unknown"


def is_type_compatible(lhs: DataType, rhs: DataType) -> bool:
    """True when a value of type ``rhs`` may be assigned to ``lhs``."""
    return lhs == rhs or (lhs is DataType.REAL and rhs is DataType.INT)


def is_pointer_type(data_type: DataType) -> bool:
    return data_type in _POINTER_BASES


def base_type(ptr_type: DataType) -> DataType:
    """The type a pointer refers to; VOID for non-pointer types."""
    return _POINTER_BASES.get(ptr_type, DataType.VOID)