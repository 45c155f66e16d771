import pytest

from semcheck.ast import (
    Node,
    format_ast,
    format_ast_debug,
    make_node,
    print_ast,
    print_ast_debug,
)


def _sample():
    return make_node("FUNC", make_node("foo"), make_node("ARGS", make_node("NONE")))


def test_make_node_keeps_children_in_order():
    a, b = make_node("a"), make_node("b")
    node = make_node("root", a, b)
    assert node.name == "root"
    assert node.children == [a, b]
    assert node.child_count == 2


def test_make_node_without_children():
    node = make_node("leaf")
    assert node.children == []
    assert node.child_count == 0


def test_make_node_copies_name_value():
    node = make_node(None)
    assert node == Node(None, [])


def test_format_ast_nested():
    tree = make_node("a", make_node("b"))
    assert format_ast(tree, 0) == "(a\n  (b\n  )\n)\n"


def test_format_ast_none_is_empty():
    assert format_ast(None, 0) == ""


def test_format_ast_parentheses_balance():
    text = format_ast(_sample(), 0)
    assert text.count("(") == text.count(")")
    assert text.count("(") == 4


def test_format_ast_respects_base_indent():
    text = format_ast(_sample(), 4)
    lines = text.splitlines()
    assert all(line.startswith("    ") for line in lines)
    assert lines[0] == "    (FUNC"


def test_format_ast_skips_missing_children():
    tree = make_node("root", None, make_node("x"))
    assert format_ast(tree, 0) == format_ast(make_node("root", make_node("x")), 0)


def test_format_ast_debug_layout():
    tree = make_node("root", make_node("leaf"))
    assert format_ast_debug(tree, 0) == "root\n  leaf\n"


def test_format_ast_debug_null_name():
    text = format_ast_debug(make_node(None), 0)
    assert text.strip() == "(null)"


def test_format_ast_debug_one_line_per_node():
    lines = format_ast_debug(_sample(), 1).splitlines()
    assert len(lines) == 4
    assert lines[0] == "  FUNC"
    assert lines[-1].strip() == "NONE"


@pytest.mark.parametrize("indent", [0, 2, 5])
def test_print_ast_matches_format(capsys, indent):
    print_ast(_sample(), indent)
    assert capsys.readouterr().out == format_ast(_sample(), indent)


def test_print_ast_debug_matches_format(capsys):
    print_ast_debug(_sample(), 2)
    assert capsys.readouterr().out == format_ast_debug(_sample(), 2)