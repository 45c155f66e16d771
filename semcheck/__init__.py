"""AST nodes, scoped symbol tables and semantic checks for a compiler front end."""

__version__ = "0.1.0"
__all__ = ["ast", "types", "symbols", "params", "checker"]