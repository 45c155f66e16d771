import pytest

from semcheck.types import (
    DataType,
    SymbolKind,
    base_type,
    is_pointer_type,
    is_type_compatible,
    name_from_type,
    type_from_name,
)


@pytest.mark.parametrize("data_type", list(DataType))
def test_name_round_trip(data_type):
    assert type_from_name(name_from_type(data_type)) is data_type


@pytest.mark.parametrize(
    "spelling, expected",
    [
        ("int", DataType.INT),
        ("real", DataType.REAL),
        ("char*", DataType.PTR_CHAR),
        ("string", DataType.STRING),
        ("void", DataType.VOID),
    ],
)
def test_type_from_name_known(spelling, expected):
    assert type_from_name(spelling) is expected


@pytest.mark.parametrize("spelling", ["float", "", "INT", "bool*"])
def test_type_from_name_unknown_defaults_to_int(spelling):
    assert type_from_name(spelling) is DataType.INT


def test_name_from_type_pointer():
    assert name_from_type(DataType.PTR_REAL) == "real*"


def test_name_from_type_unknown():
    assert name_from_type(42) == "unknown"


@pytest.mark.parametrize(
    "label, expected",
    [("Function", SymbolKind.FUNCTION), ("Variable", SymbolKind.VARIABLE)],
)
def test_symbol_kind_lookup_by_label(label, expected):
    assert SymbolKind(label) is expected


def test_symbol_kind_unknown_label_raises():
    with pytest.raises(ValueError):
        SymbolKind("Constant")


@pytest.mark.parametrize("data_type", list(DataType))
def test_same_type_is_compatible(data_type):
    assert is_type_compatible(data_type, data_type)


def test_int_widens_to_real_only():
    assert is_type_compatible(DataType.REAL, DataType.INT)
    assert not is_type_compatible(DataType.INT, DataType.REAL)
    assert not is_type_compatible(DataType.BOOL, DataType.INT)


@pytest.mark.parametrize("data_type", list(DataType))
def test_pointer_and_base_agree(data_type):
    if is_pointer_type(data_type):
        assert base_type(data_type) in (DataType.INT, DataType.CHAR, DataType.REAL)
    else:
        assert base_type(data_type) is DataType.VOID


def test_pointer_bases():
    assert base_type(DataType.PTR_INT) is DataType.INT
    assert base_type(DataType.PTR_CHAR) is DataType.CHAR
    assert base_type(DataType.PTR_REAL) is DataType.REAL
    assert not is_pointer_type(DataType.STRING)