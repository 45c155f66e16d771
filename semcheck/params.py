"""Counting and typing the parameters of function declarations."""

from __future__ import annotations

import logging
import re

from .ast import Node
from .symbols import SemanticError
from .types import DataType, name_from_type, type_from_name

log = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _is_param_name(name: str | None) -> bool:
    return name is not None and name.startswith("par")


def _param_list(par_list: Node | None) -> Node | None:
    """The list under an argument node, or None when it declares nothing."""
    if par_list is None or not par_list.children:
        return None
    first = par_list.children[0]
    if first is None or first.name == "NONE":
        return None
    return first


def count_params(args_node: Node | None) -> int:
    """Count the formal parameters under a declaration's argument node."""
    params = _param_list(args_node)
    if params is None:
        return 0
    log.debug(
        "Parameter list node name: '%s', child_count: %d",
        params.name if params.name is not None else "(null)",
        params.child_count,
    )
    if _is_param_name(params.name):
        return 1
    if params.name != "":
        return 1
    if params.child_count == 1:
        return 1
    if params.child_count == 2:
        count = 0
        current: Node | None = params
        while current is not None and current.name == "" and current.child_count == 2:
            count += 1
            current = current.children[0]
        if current is not None and current.child_count > 0:
            count += 1
        log.debug("Recursive list structure detected with %d parameters", count)
        return count
    count = sum(1 for child in params.children if child is not None)
    log.debug("Flat list structure detected with %d parameters", count)
    return count


def count_params_helper(node: Node | None) -> int:
    """Count parameters along the left spine of a nested parameter list."""
    if node is None:
        return 0
    if node.name != "":
        return 1
    if node.child_count == 2:
        return 1 + count_params_helper(node.children[0])
    if node.child_count == 3:
        return 1
    return 0


def _count_actual_recursive(node: Node) -> int:
    if node.name == "par" and node.child_count == 2:
        rest = node.children[0]
        return 1 + (_count_actual_recursive(rest) if rest is not None else 0)
    return 1


def count_actual_params(args_node: Node | None) -> int:
    """Count the arguments of a function call's ``args`` node."""
    if args_node is None or args_node.name != "args" or not args_node.children:
        return 0
    first = args_node.children[0]
    if first is None or first.name == "none":
        return 0
    return _count_actual_recursive(first)


def _declared_type(param: Node) -> DataType:
    type_node = param.children[1]
    return type_from_name(type_node.name if type_node is not None else None)


def _collect_recursive(node: Node | None, found: list[DataType]) -> None:
    if node is None:
        return
    log.debug(
        "Recursive type extraction from node '%s' with %d children",
        node.name if node.name is not None else "(null)",
        node.child_count,
    )
    if _is_param_name(node.name) and node.child_count >= 2:
        found.append(_declared_type(node))
        return
    if node.name == "" and node.child_count == 2:
        rest, param = node.children
        _collect_recursive(rest, found)
        if param is not None:
            if _is_param_name(param.name) and param.child_count >= 2:
                found.append(_declared_type(param))
            else:
                _collect_recursive(param, found)
    elif node.child_count == 3:
        found.append(_declared_type(node))
    else:
        for child in node.children:
            _collect_recursive(child, found)


def collect_param_types(par_list: Node | None) -> list[DataType]:
    """The declared parameter types of an ``ARGS`` node, in declaration order."""
    if par_list is None or par_list.name != "ARGS":
        return []
    params = _param_list(par_list)
    if params is None:
        return []
    log.debug(
        "Collecting param types, list node: '%s', child_count: %d",
        params.name if params.name is not None else "(null)",
        params.child_count,
    )
    if _is_param_name(params.name):
        if params.child_count >= 2 and params.children[1] is not None:
            return [_declared_type(params)]
        return []

    found: list[DataType] = []
    if params.name == "" and params.child_count == 2:
        current: Node | None = params
        while current is not None and current.name == "" and current.child_count == 2:
            param = current.children[1]
            if param is not None and param.child_count >= 2:
                found.append(_declared_type(param))
            current = current.children[0]
        if current is not None and current.child_count >= 2:
            found.append(_declared_type(current))
    else:
        _collect_recursive(params, found)

    ordered = found[::-1]
    log.debug("Parameter types: %s", ", ".join(name_from_type(t) for t in ordered))
    return ordered


def collect_params_recursive(node: Node | None) -> list[DataType]:
    """Types found walking a nested list from its last entry leftwards."""
    found: list[DataType] = []
    while node is not None and node.child_count >= 2:
        if node.name == "":
            param = node.children[1]
            if param is not None and param.child_count >= 2:
                found.append(_declared_type(param))
            node = node.children[0]
        else:
            if node.child_count == 3:
                found.append(_declared_type(node))
            break
    return found


def expected_param_number(param_name: str) -> int:
    """The number after ``par`` in a parameter name, or -1 for other names."""
    if not param_name.startswith("par"):
        return -1
    match = _LEADING_INT.match(param_name[3:])
    return int(match.group(1)) if match else 0


def check_param_order(param_name: str, expected_number: int) -> None:
    """Raise SemanticError unless the parameter is ``par<expected_number>``."""
    if expected_param_number(param_name) != expected_number:
        raise SemanticError(
            "Semantic Error: Parameter order incorrect - "
            f"expected 'par{expected_number}', got '{param_name}'"
        )