"""Scoped symbol tables."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from .ast import Node
from .types import DataType, SymbolKind, name_from_type

MAX_PARAMS = 20
MAX_SCOPE_DEPTH = 100

log = logging.getLogger(__name__)


class SemanticError(Exception):
    """A semantic rule of the language was broken."""


@dataclass
class Symbol:
    """A named variable or function."""

    name: str
    kind: SymbolKind
    data_type: DataType
    param_types: tuple[DataType, ...] = ()

    @property
    def param_count(self) -> int:
        return len(self.param_types)


class SymbolTable:
    """A stack of scopes, innermost last.

    A scope that has been left keeps its symbols until a new scope is opened
    at the same depth, so the tables can still be listed after checking.
    """

    def __init__(self) -> None:
        self._scopes: list[list[Symbol]] = []
        self._depth = -1

    @property
    def current_scope(self) -> int:
        """Depth of the innermost open scope, -1 when none is open."""
        return self._depth

    @property
    def max_scope(self) -> int:
        """Deepest scope depth that was ever opened, -1 when none was."""
        return len(self._scopes) - 1

    def _current(self) -> list[Symbol]:
        if self._depth < 0:
            raise RuntimeError("no scope is open")
        return self._scopes[self._depth]

    def enter_scope(self) -> None:
        if self._depth + 1 >= MAX_SCOPE_DEPTH:
            raise RuntimeError(f"scope depth limit of {MAX_SCOPE_DEPTH} exceeded")
        self._depth += 1
        if self._depth < len(self._scopes):
            self._scopes[self._depth] = []
        else:
            self._scopes.append([])
        log.debug("create new scope current_scope is: %d", self._depth)

    def exit_scope(self) -> None:
        if self._depth < 0:
            raise RuntimeError("no scope is open")
        self._depth -= 1

    def insert(self, name: str, kind: SymbolKind, data_type: DataType) -> Symbol:
        """Add a symbol to the innermost scope without any checks."""
        symbol = Symbol(name, kind, data_type)
        self._current().append(symbol)
        return symbol

    def exists_in_current_scope(self, name: str) -> bool:
        return any(symbol.name == name for symbol in self._current())

    def lookup(self, name: str) -> Symbol | None:
        """Find the most recent symbol of that name, innermost scope first."""
        for scope in reversed(self._scopes[: self._depth + 1]):
            for symbol in reversed(scope):
                if symbol.name == name:
                    return symbol
        return None

    def insert_checked_variable(self, name: str, data_type: DataType) -> Symbol:
        """Add a variable, refusing a name already declared in this scope."""
        if self.exists_in_current_scope(name):
            raise SemanticError(
                f"Semantic Error: Var '{name}' already defined in this block"
            )
        symbol = self.insert(name, SymbolKind.VARIABLE, data_type)
        log.debug("Inserted '%s' as var in scope %d", name, self._depth)
        return symbol

    def insert_function(
        self, name: str, data_type: DataType, param_types: Iterable[DataType] = ()
    ) -> Symbol:
        """Add a function with its return type and parameter types."""
        params = tuple(param_types)
        if len(params) > MAX_PARAMS:
            raise ValueError(f"a function may have at most {MAX_PARAMS} parameters")
        symbol = Symbol(name, SymbolKind.FUNCTION, data_type, params)
        self._current().append(symbol)
        log.debug(
            "Inserted function '%s' with %d parameters in scope %d",
            name,
            len(params),
            self._depth,
        )
        if params:
            log.debug(
                "Parameter types: %s", ", ".join(name_from_type(t) for t in params)
            )
        return symbol

    def add_multiple_variables(self, id_list: Node | None, data_type: DataType) -> None:
        """Declare every identifier of a left-nested identifier list."""
        if id_list is None:
            return
        if id_list.name == "" and id_list.child_count == 2:
            rest, last = id_list.children
            self.add_multiple_variables(rest, data_type)
            if last is not None and last.name:
                self.insert_checked_variable(last.name, data_type)
        else:
            self.insert_checked_variable(id_list.name, data_type)

    def format_scope_hierarchy(self) -> str:
        """List the open scopes, innermost first."""
        lines = ["", "--- Scope Stack (top-down) ---"]
        lines.extend(f"Scope {depth}" for depth in range(self._depth, -1, -1))
        lines.append("------------------------------")
        return "\n".join(lines) + "\n"

    def format_symbol_tables(self) -> str:
        """List every scope depth ever opened with its symbols, newest first."""
        lines = ["", "===== SYMBOL TABLES (with empty scopes) ====="]
        for depth, scope in enumerate(self._scopes):
            lines.append(f"Scope {depth}:")
            if not scope:
                lines.append("  (empty)")
                continue
            for symbol in reversed(scope):
                lines.append(
                    f"  Name: {symbol.name:<10} | Kind: {symbol.kind.value:<8} "
                    f"| Type: {name_from_type(symbol.data_type)}"
                )
        lines.append("=======================================")
        return "\n".join(lines) + "\n"