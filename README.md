# semcheck

Building blocks for the semantic-analysis stage of a compiler for a small
C-like language. The package provides AST nodes, a scoped symbol table, and
type checks on expressions, function calls, conditions and return statements.

## Install

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `semcheck.ast`

- `Node(name, children)` is a dataclass. `name` may be `None`, and
  `child_count` is a property.
- `make_node(name, *children)` builds a node whose children are in the order
  given.
- `format_ast(node, indent=0)` renders the tree as nested parenthesised labels
  with two spaces per level.
- `format_ast_debug(node, depth=0)` renders one label per line. A node whose
  name is `None` is shown as `(null)`.
- `print_ast` and `print_ast_debug` write those renderings to standard output.

### `semcheck.types`

- `DataType` lists the value types. Each value is the type's spelling:
  `int`, `real`, `char`, `bool`, `string`, `void`, `int*`, `char*` and
  `real*`.
- `SymbolKind` has the members `VARIABLE` and `FUNCTION`.
- `type_from_name(s)` returns the matching type. Unknown spellings give
  `DataType.INT`.
- `name_from_type(t)` returns the spelling, or `"unknown"` for anything that
  is not a `DataType`.
- `is_type_compatible(lhs, rhs)` is true for equal types and for `int`
  assigned to `real`.
- `is_pointer_type(t)` tells whether `t` is a pointer type.
- `base_type(t)` returns the type a pointer refers to, or `VOID` for a type
  that is not a pointer.

### `semcheck.symbols`

- `SemanticError` is the exception raised when a rule is broken.
- `Symbol` holds `name`, `kind`, `data_type` and `param_types`. Its
  `param_count` property gives the number of parameters.
- `SymbolTable` is a stack of scopes:
  - `enter_scope()` and `exit_scope()` open and close scopes. Depth is
    limited to 100, and closing with no scope open raises `RuntimeError`.
  - `current_scope` and `max_scope` report the current depth and the deepest
    depth reached.
  - `insert(name, kind, data_type)` adds a symbol with no checks.
  - `insert_checked_variable(name, data_type)` raises `SemanticError` if the
    name is already declared in the current scope.
  - `insert_function(name, data_type, param_types=())` adds a function. At
    most 20 parameters are allowed; more raise `ValueError`.
  - `add_multiple_variables(id_list, data_type)` declares every identifier in
    a left-nested list node.
  - `exists_in_current_scope(name)` tells whether the name is declared in the
    current scope.
  - `lookup(name)` searches the innermost scope first and returns the most
    recent declaration, or `None`.
  - `format_scope_hierarchy()` lists the open scopes.
  - `format_symbol_tables()` lists every scope depth that was ever opened,
    with its symbols.

### `semcheck.params`

Helpers for the parameter-list nodes that a parser produces:

- `count_params` and `count_params_helper` count formal parameters.
- `count_actual_params` counts the arguments of a call.
- `collect_param_types` returns the declared parameter types of an `ARGS`
  node in declaration order.
- `collect_params_recursive` returns the declared types found by walking a
  nested parameter list from its last entry leftwards.
- `expected_param_number("par3")` returns `3`. A name that does not start
  with `par` gives `-1`.
- `check_param_order(name, n)` raises `SemanticError` unless the name is
  `par<n>`.

### `semcheck.checker`

- `expr_type(table, expr)` infers the type of an expression tree. It
  recognises literals, `&` and `*`, boolean and comparison operators,
  arithmetic, and identifiers looked up in the table. Anything it does not
  recognise is `INT`.
- `call_param_types(table, args_node)` returns the types of a call's
  arguments.
- The following raise `SemanticError` when a rule is broken:
  - `check_param_types(table, func_name, args_node)`
  - `check_boolean_condition(table, expr, construct_name)`
  - `check_return_type(table, expr, func_name)`
  - `check_string_index(table, index_expr)`

Diagnostic messages go to the standard `logging` loggers named after each
module, for example `semcheck.params`, at `DEBUG` level.

## Example

```python
from semcheck.ast import make_node
from semcheck.types import DataType
from semcheck.symbols import SymbolTable, SemanticError
from semcheck.checker import check_return_type

table = SymbolTable()
table.enter_scope()
table.insert_function("f", DataType.INT, [DataType.INT])
table.insert_checked_variable("x", DataType.INT)

try:
    table.insert_checked_variable("x", DataType.REAL)
except SemanticError as err:
    print(err)  # Semantic Error: Var 'x' already defined in this block

check_return_type(table, make_node("x"), "f")  # passes: int returned from an int function
```

## What it does not do

The package does not read source text. It has no lexer or parser and no
command-line program. The AST has to be built by the caller, with
`make_node` or `Node`. Checks stop at the first problem they find and raise
`SemanticError`; they do not collect a list of errors. The package generates
no code.