"""Type inference for expressions and the semantic checks built on it."""

from __future__ import annotations

import logging

from .ast import Node
from .symbols import SemanticError, SymbolTable
from .types import DataType, SymbolKind, base_type, name_from_type

log = logging.getLogger(__name__)

_ADDRESS_OF = {
    DataType.INT: DataType.PTR_INT,
    DataType.CHAR: DataType.PTR_CHAR,
    DataType.REAL: DataType.PTR_REAL,
}
_BOOL_LITERALS = frozenset({"true", "false", "TRUE", "FALSE"})
_BOOL_OPERATORS = frozenset({"and", "or", "not", "==", "!=", "<", ">", "<=", ">="})
_ARITHMETIC = frozenset({"+", "-", "*", "/"})
_DIGITS = "0123456789"


def _is_number(name: str) -> bool:
    if name[:1] and name[0] in _DIGITS:
        return True
    return name.startswith("-") and len(name) > 1 and name[1] in _DIGITS


def expr_type(table: SymbolTable, expr: Node | None) -> DataType:
    """Infer the type of an expression tree; unrecognised ones are INT."""
    if expr is None:
        return DataType.VOID
    name = expr.name
    if name is None:
        return DataType.INT

    if name == "&" and expr.child_count == 1:
        operand = expr_type(table, expr.children[0])
        return _ADDRESS_OF.get(operand, DataType.VOID)
    if name == "*" and expr.child_count == 1:
        return base_type(expr_type(table, expr.children[0]))
    if name == "array_access":
        return DataType.CHAR
    if name.startswith("'"):
        return DataType.CHAR
    if name.startswith('"'):
        return DataType.STRING
    if name in _BOOL_LITERALS:
        return DataType.BOOL
    if name == "nullptr":
        return DataType.PTR_INT
    if name in _BOOL_OPERATORS:
        return DataType.BOOL

    symbol = table.lookup(name)
    if symbol is not None:
        return symbol.data_type

    if expr.children and name in _ARITHMETIC:
        left = expr_type(table, expr.children[0])
        right = expr_type(table, expr.children[1]) if expr.child_count > 1 else DataType.VOID
        if DataType.REAL in (left, right):
            return DataType.REAL
        if left is DataType.INT and right is DataType.INT:
            return DataType.INT

    if _is_number(name):
        return DataType.REAL if "." in name else DataType.INT

    if name == "&array_access" and expr.child_count == 2:
        target = expr.children[0]
        symbol = table.lookup(target.name) if target is not None and target.name else None
        if symbol is not None and symbol.data_type is DataType.STRING:
            return DataType.PTR_CHAR
        return DataType.VOID

    return DataType.INT


def _call_types_recursive(table: SymbolTable, node: Node | None, found: list[DataType]) -> None:
    if node is None:
        return
    log.debug(
        "Processing node '%s' with %d children for parameter type extraction",
        node.name,
        node.child_count,
    )
    if node.name == "par":
        if node.child_count == 1:
            found.append(expr_type(table, node.children[0]))
        elif node.child_count == 2:
            _call_types_recursive(table, node.children[0], found)
            found.append(expr_type(table, node.children[1]))
    else:
        found.append(expr_type(table, node))


def call_param_types(table: SymbolTable, args_node: Node | None) -> list[DataType]:
    """The types of a call's arguments, in the order they are written."""
    if args_node is None or args_node.name != "args" or not args_node.children:
        return []
    first = args_node.children[0]
    if first is None or first.name == "none":
        return []
    found: list[DataType] = []
    _call_types_recursive(table, first, found)
    return found


def check_param_types(table: SymbolTable, func_name: str, args_node: Node | None) -> None:
    """Raise SemanticError when a call's arguments do not fit the function."""
    func = table.lookup(func_name)
    if func is None or func.kind is not SymbolKind.FUNCTION or not func.param_types:
        return
    actual = call_param_types(table, args_node)
    # Arguments that are missing are taken as INT.
    actual += [DataType.INT] * (func.param_count - len(actual))
    log.debug(
        "Checking params for function '%s', expects %d params",
        func_name,
        func.param_count,
    )
    for position, (formal, given) in enumerate(zip(func.param_types, actual), start=1):
        if given != formal and not (formal is DataType.REAL and given is DataType.INT):
            raise SemanticError(
                f"Semantic Error: Parameter {position} of function '{func_name}' "
                f"expects type {name_from_type(formal)}, got {name_from_type(given)}"
            )


def check_boolean_condition(
    table: SymbolTable, expr: Node | None, construct_name: str
) -> None:
    """Raise SemanticError unless the condition is boolean."""
    if expr is None:
        return
    found = expr_type(table, expr)
    if found is not DataType.BOOL:
        raise SemanticError(
            f"Semantic Error: Condition in '{construct_name}' statement must be "
            f"of boolean type, got {name_from_type(found)}"
        )


def check_return_type(table: SymbolTable, expr: Node | None, func_name: str) -> None:
    """Raise SemanticError when a return statement does not fit the function."""
    func = table.lookup(func_name)
    if func is None or func.kind is not SymbolKind.FUNCTION:
        log.debug("Could not find function '%s' for return type check", func_name)
        return

    if expr is not None and expr.name == "NONE":
        if func.data_type is not DataType.VOID:
            raise SemanticError(
                f"Semantic Error: Function '{func_name}' must return a value of "
                f"type {name_from_type(func.data_type)}"
            )
        return

    if func.data_type is DataType.VOID and expr is not None:
        raise SemanticError(
            f"Semantic Error: Function '{func_name}' has void return type but "
            "returns a value"
        )

    found = expr_type(table, expr)
    log.debug(
        "Function '%s' returns type %s, expression has type %s",
        func_name,
        name_from_type(func.data_type),
        name_from_type(found),
    )
    if func.data_type is DataType.BOOL and expr is not None and expr.name in ("TRUE", "FALSE"):
        return
    if found is DataType.INT and func.data_type in (DataType.REAL, DataType.BOOL):
        return
    if found != func.data_type:
        raise SemanticError(
            f"Semantic Error: Function '{func_name}' returns type "
            f"{name_from_type(func.data_type)} but return statement has type "
            f"{name_from_type(found)}"
        )


def check_string_index(table: SymbolTable, index_expr: Node | None) -> None:
    """Raise SemanticError unless a string index is an integer."""
    if index_expr is None:
        return
    found = expr_type(table, index_expr)
    if found is not DataType.INT:
        raise SemanticError(
            "Semantic Error: String index must be of integer type, got "
            f"{name_from_type(found)}"
        )